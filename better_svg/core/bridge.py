"""Optimization bridge: wrap an opaque SVG optimizer with the transcoders.

WHY: Callers (CLI, HTTP API, editor tooling) want "optimize this markup"
without caring whether it is a JSX component body or a plain ``.svg``
file. The bridge decides once, converts if needed, hands plain SVG to the
optimizer, and converts back only if it converted in the first place.

HOW: prepare_for_optimization() classifies and converts, returning the
flag alongside the text so it can travel through the optimizer call (or a
temp file, or a subprocess pipe) to finalize_after_optimization().
optimize_with() chains the three steps around an injected transform.

RULES:
- Plain SVG is never touched on either side of the optimizer
- The optimizer may drop or reorder attributes it does not know, but must
  not edit the values it keeps; dropped placeholders simply vanish and
  edited payloads stay visible as leftover envelope text
- No state survives between calls
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from better_svg.core.detect import is_jsx_svg
from better_svg.core.transcode import convert_jsx_to_svg, convert_svg_to_jsx

logger = logging.getLogger(__name__)

SvgTransform = Callable[[str], str]
"""Any callable that takes plain SVG and returns plain SVG."""


@dataclass(frozen=True)
class PreparedSvg:
    """Markup ready for the optimizer plus the flag needed to undo it.

    Attributes:
        prepared_svg: Plain SVG (converted, or the original text unchanged).
        was_jsx: True if the input was classified as JSX and converted.
    """

    prepared_svg: str
    was_jsx: bool


def prepare_for_optimization(svg_content: str) -> PreparedSvg:
    """Classify ``svg_content`` and convert it to plain SVG if it is JSX."""
    was_jsx = is_jsx_svg(svg_content)
    logger.debug("Classified markup as %s", "JSX" if was_jsx else "plain SVG")

    if was_jsx:
        return PreparedSvg(prepared_svg=convert_jsx_to_svg(svg_content), was_jsx=True)
    return PreparedSvg(prepared_svg=svg_content, was_jsx=False)


def finalize_after_optimization(optimized_svg: str, was_jsx: bool) -> str:
    """Convert optimizer output back to JSX if the original was JSX."""
    if was_jsx:
        return convert_svg_to_jsx(optimized_svg)
    return optimized_svg


def optimize_with(svg_content: str, transform: SvgTransform) -> str:
    """Run ``transform`` on ``svg_content`` behind the JSX round trip.

    Args:
        svg_content: JSX or plain SVG markup.
        transform: The optimizer. Receives plain SVG, returns plain SVG.
                   Exceptions it raises propagate unchanged.

    Returns:
        The optimized markup in the same dialect as the input.
    """
    prepared = prepare_for_optimization(svg_content)
    optimized = transform(prepared.prepared_svg)
    return finalize_after_optimization(optimized, prepared.was_jsx)
