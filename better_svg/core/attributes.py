"""JSX ⇄ SVG attribute name dictionary.

WHY: JSX spells SVG presentation attributes in camelCase (``strokeWidth``)
while SVG markup and SVGO expect kebab-case (``stroke-width``). Both
transcoder directions need the same table, and the two directions must
never disagree.

HOW: ATTRIBUTE_PAIRS is the single source of truth. Both lookup mappings
are built from it in one pass at import time and exposed read-only via
MappingProxyType.

RULES:
- Every JSX name maps to exactly one SVG name and back (bijection)
- Pairs are plain data; adding a pair = one new tuple, no logic changes
- The mappings are never mutated after import, so concurrent reads are safe
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

ATTRIBUTE_PAIRS: Tuple[Tuple[str, str], ...] = (
    # Stroke
    ("strokeWidth", "stroke-width"),
    ("strokeLinecap", "stroke-linecap"),
    ("strokeLinejoin", "stroke-linejoin"),
    ("strokeDasharray", "stroke-dasharray"),
    ("strokeDashoffset", "stroke-dashoffset"),
    ("strokeMiterlimit", "stroke-miterlimit"),
    ("strokeOpacity", "stroke-opacity"),
    # Fill
    ("fillOpacity", "fill-opacity"),
    ("fillRule", "fill-rule"),
    # Clip
    ("clipPath", "clip-path"),
    ("clipRule", "clip-rule"),
    # Font
    ("fontFamily", "font-family"),
    ("fontSize", "font-size"),
    ("fontStyle", "font-style"),
    ("fontWeight", "font-weight"),
    # Text
    ("textAnchor", "text-anchor"),
    ("textDecoration", "text-decoration"),
    ("dominantBaseline", "dominant-baseline"),
    ("alignmentBaseline", "alignment-baseline"),
    ("baselineShift", "baseline-shift"),
    # Gradient / filter
    ("stopColor", "stop-color"),
    ("stopOpacity", "stop-opacity"),
    ("colorInterpolation", "color-interpolation"),
    ("colorInterpolationFilters", "color-interpolation-filters"),
    ("floodColor", "flood-color"),
    ("floodOpacity", "flood-opacity"),
    ("lightingColor", "lighting-color"),
    # Marker
    ("markerStart", "marker-start"),
    ("markerMid", "marker-mid"),
    ("markerEnd", "marker-end"),
    # Rendering and the rest
    ("paintOrder", "paint-order"),
    ("vectorEffect", "vector-effect"),
    ("shapeRendering", "shape-rendering"),
    ("imageRendering", "image-rendering"),
    ("pointerEvents", "pointer-events"),
    ("xlinkHref", "xlink:href"),
)


def _build_indices(
    pairs: Tuple[Tuple[str, str], ...],
) -> Tuple[Mapping[str, str], Mapping[str, str]]:
    jsx_to_svg: Dict[str, str] = {}
    svg_to_jsx: Dict[str, str] = {}
    for jsx_name, svg_name in pairs:
        if jsx_name in jsx_to_svg or svg_name in svg_to_jsx:
            raise ValueError(
                "Duplicate attribute pair: {} / {}".format(jsx_name, svg_name)
            )
        jsx_to_svg[jsx_name] = svg_name
        svg_to_jsx[svg_name] = jsx_name
    return MappingProxyType(jsx_to_svg), MappingProxyType(svg_to_jsx)


JSX_TO_SVG_ATTRIBUTES, SVG_TO_JSX_ATTRIBUTES = _build_indices(ATTRIBUTE_PAIRS)
"""Read-only forward (camelCase → kebab-case) and reverse indices."""
