"""Forward (JSX → SVG) and reverse (SVG → JSX) transcoders.

WHY: SVGO only understands plain SVG. JSX component markup has brace
expressions, spreads, camelCase names and event handlers that SVGO would
reject, mangle or strip. The forward transform hides all of that behind
ordinary-looking attributes; the reverse transform puts it back.

HOW: Each direction is a fixed sequence of whole-text passes.

Forward:
  1. ``={expr}``      → ``="<payload>"``  (brace-aware scanner)
  2. ``{...expr}``    → ``data-spread-N="<payload>"``
  3. ``className=``   → ``class=``
  4. ``strokeWidth=`` → ``stroke-width=`` (whole dictionary)
  5. ``onClick=``     → ``data-jsx-event-onClick=``
  6. ``style=``       → ``data-better-svg-style=``

Reverse runs the mirror image, decoding payloads last:
  1. ``class=`` → ``className=``
  2. dictionary, kebab-case → camelCase
  3. ``data-spread-N="..."`` → ``{...expr}``
  4. ``data-jsx-event-onX=`` → ``onX=``
  5. ``data-better-svg-style=`` → ``style=``
  6. ``name="<payload>"`` → ``name={expr}``

RULES:
- Pass order is load-bearing. Expressions and spreads are encoded before
  any renaming so attribute names inside expression bodies stay intact;
  events and style are renamed after their values were encoded.
- Renames only fire at the start of an attribute name: never after a
  name character, ``-``, ``:`` or ``.`` (so ``font-style=`` is not
  ``style=``), and never after ``+`` or ``/`` (so base64 payload text is
  never rewritten).
- Spread indices restart at 0 on every call
- Both functions are total: no input makes them raise
"""

from __future__ import annotations

import itertools
import re
from typing import List, Tuple

from better_svg.core.attributes import JSX_TO_SVG_ATTRIBUTES, SVG_TO_JSX_ATTRIBUTES
from better_svg.core.payload import PAYLOAD_RE, decode_payload, encode_payload
from better_svg.core.scanner import find_expression_end

SPREAD_ATTRIBUTE_PREFIX = "data-spread-"
EVENT_ATTRIBUTE_PREFIX = "data-jsx-event-"
STYLE_PLACEHOLDER = "data-better-svg-style"

# Zero-width guard placed in front of every attribute name pattern.
ATTRIBUTE_START = r"(?<![\w:.+/-])"

_EXPRESSION_OPEN = "={"

# Forward patterns
_SPREAD_RE = re.compile(r"\{\.\.\.([^}]+)\}")
_CLASS_NAME_RE = re.compile(ATTRIBUTE_START + r"className=")
_EVENT_RE = re.compile(ATTRIBUTE_START + r"(on[A-Z]\w*)=")
_STYLE_RE = re.compile(ATTRIBUTE_START + r"style=")

# Reverse patterns
_CLASS_RE = re.compile(ATTRIBUTE_START + r"class=")
_SPREAD_PLACEHOLDER_RE = re.compile(
    ATTRIBUTE_START + re.escape(SPREAD_ATTRIBUTE_PREFIX) + r'\d+="([^"]*)"'
)
_EVENT_PLACEHOLDER_RE = re.compile(
    ATTRIBUTE_START + re.escape(EVENT_ATTRIBUTE_PREFIX) + r"""(on[A-Z]\w*)=(?=["'])"""
)
_STYLE_PLACEHOLDER_RE = re.compile(ATTRIBUTE_START + re.escape(STYLE_PLACEHOLDER) + "=")
_PAYLOAD_ATTRIBUTE_RE = re.compile(
    ATTRIBUTE_START + r"""([\w:.-]+)=(["'])(""" + PAYLOAD_RE.pattern + r")\2"
)

# Entities SVGO may introduce into a spread value it did not recognise.
# &amp; goes last so "&amp;lt;" becomes "&lt;", not "<".
_ENTITY_REPLACEMENTS: Tuple[Tuple[str, str], ...] = (
    ("&quot;", '"'),
    ("&gt;", ">"),
    ("&lt;", "<"),
    ("&amp;", "&"),
)


def _rename_patterns(mapping) -> List[Tuple[re.Pattern[str], str]]:
    return [
        (re.compile(ATTRIBUTE_START + re.escape(source) + "="), target + "=")
        for source, target in mapping.items()
    ]


_JSX_TO_SVG_RENAMES = _rename_patterns(JSX_TO_SVG_ATTRIBUTES)
_SVG_TO_JSX_RENAMES = _rename_patterns(SVG_TO_JSX_ATTRIBUTES)


# ---------------------------------------------------------------------------
# Forward
# ---------------------------------------------------------------------------


def encode_expressions(text: str) -> str:
    """Replace every ``={expr}`` with ``="<payload>"``.

    An expression whose closing brace never arrives is left as literal
    ``={`` and scanning resumes right after it.
    """
    parts: List[str] = []
    cursor = 0

    while True:
        open_index = text.find(_EXPRESSION_OPEN, cursor)
        if open_index == -1:
            parts.append(text[cursor:])
            break

        parts.append(text[cursor:open_index])
        body_start = open_index + len(_EXPRESSION_OPEN)
        close_index = find_expression_end(text, body_start)

        if close_index is None:
            parts.append(_EXPRESSION_OPEN)
            cursor = body_start
            continue

        expression = text[body_start:close_index]
        parts.append('="{}"'.format(encode_payload(expression)))
        cursor = close_index + 1

    return "".join(parts)


def encode_spreads(text: str) -> str:
    """Replace ``{...expr}`` with numbered ``data-spread-N`` placeholders."""
    counter = itertools.count()

    def _replace(match: re.Match[str]) -> str:
        return '{}{}="{}"'.format(
            SPREAD_ATTRIBUTE_PREFIX, next(counter), encode_payload(match.group(1))
        )

    return _SPREAD_RE.sub(_replace, text)


def convert_jsx_to_svg(text: str) -> str:
    """Convert JSX-flavoured SVG markup into plain SVG that SVGO accepts."""
    text = encode_expressions(text)
    text = encode_spreads(text)
    text = _CLASS_NAME_RE.sub("class=", text)
    for pattern, replacement in _JSX_TO_SVG_RENAMES:
        text = pattern.sub(replacement, text)
    text = _EVENT_RE.sub(EVENT_ATTRIBUTE_PREFIX + r"\1=", text)
    text = _STYLE_RE.sub(STYLE_PLACEHOLDER + "=", text)
    return text


# ---------------------------------------------------------------------------
# Reverse
# ---------------------------------------------------------------------------


def unescape_entities(value: str) -> str:
    """Undo the handful of XML entities SVGO writes into attribute values."""
    for entity, char in _ENTITY_REPLACEMENTS:
        value = value.replace(entity, char)
    return value


def _restore_spread(match: re.Match[str]) -> str:
    value = match.group(1)
    decoded = decode_payload(value)
    if decoded is None:
        decoded = unescape_entities(value)
    return "{{...{}}}".format(decoded)


def _restore_expression(match: re.Match[str]) -> str:
    decoded = decode_payload(match.group(3))
    if decoded is None:
        return match.group(0)
    return "{}={{{}}}".format(match.group(1), decoded)


def convert_svg_to_jsx(text: str) -> str:
    """Convert (optimized) plain SVG back into JSX-flavoured markup."""
    text = _CLASS_RE.sub("className=", text)
    for pattern, replacement in _SVG_TO_JSX_RENAMES:
        text = pattern.sub(replacement, text)
    text = _SPREAD_PLACEHOLDER_RE.sub(_restore_spread, text)
    text = _EVENT_PLACEHOLDER_RE.sub(r"\1=", text)
    text = _STYLE_PLACEHOLDER_RE.sub("style=", text)
    text = _PAYLOAD_ATTRIBUTE_RE.sub(_restore_expression, text)
    return text
