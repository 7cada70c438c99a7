"""Better SVG: run JSX-flavoured SVG through SVGO and get JSX back.

WHY: Icon components are written as JSX (``strokeWidth={2}``,
``{...props}``, ``onClick={...}``), but SVGO only understands plain SVG.
This package converts JSX SVG to plain SVG in a way that survives SVGO
untouched, then restores the original JSX syntax afterwards.

HOW: Three-stage pipeline: prepare (detect + forward transcode),
optimize (any black-box optimizer), finalize (reverse transcode). Each
stage is a plain function over strings and is independently testable.

RULES:
- The names below are the public API; everything else may change
- Plain SVG passes through the pipeline unmodified by the transcoder
"""

from better_svg.core.bridge import (
    PreparedSvg,
    finalize_after_optimization,
    optimize_with,
    prepare_for_optimization,
)
from better_svg.core.detect import is_jsx_svg
from better_svg.core.transcode import convert_jsx_to_svg, convert_svg_to_jsx

__version__ = "0.1.0"

__all__ = [
    "PreparedSvg",
    "convert_jsx_to_svg",
    "convert_svg_to_jsx",
    "finalize_after_optimization",
    "is_jsx_svg",
    "optimize_with",
    "prepare_for_optimization",
]
