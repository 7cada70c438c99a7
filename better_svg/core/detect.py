"""Heuristic detection of JSX-flavoured SVG.

WHY: Plain SVG must go to SVGO untouched. Only markup that looks like a
JSX component body needs the round trip through the transcoder, and the
result decides whether the reverse transform runs afterwards.

HOW: Four cheap regex checks, any of which is enough. The expression
check deliberately does not balance braces: it is a signal, not a parser.

RULES:
- Pure predicate, no side effects
- ``class=`` and kebab-case attributes alone never classify as JSX
"""

from __future__ import annotations

import re

from better_svg.core.attributes import JSX_TO_SVG_ATTRIBUTES

_EXPRESSION_RE = re.compile(r"=\{[^}]+\}")
_SPREAD_RE = re.compile(r"\{\.\.\.[^}]+\}")
_CLASS_NAME_RE = re.compile(r"\bclassName=")
_JSX_ATTRIBUTE_RES = tuple(
    re.compile(r"\b" + re.escape(name) + "=") for name in JSX_TO_SVG_ATTRIBUTES
)


def is_jsx_svg(text: str) -> bool:
    """Return True if ``text`` contains JSX-only syntax.

    Any of: a brace expression value (``={...}``), a spread
    (``{...props}``), a ``className`` attribute, or a known camelCase
    presentation attribute such as ``strokeWidth=``.
    """
    if _EXPRESSION_RE.search(text):
        return True
    if _SPREAD_RE.search(text):
        return True
    if _CLASS_NAME_RE.search(text):
        return True
    return any(pattern.search(text) for pattern in _JSX_ATTRIBUTE_RES)
