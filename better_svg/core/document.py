"""Locate and optimize inline ``<svg>`` elements inside source files.

WHY: JSX SVG usually lives inside a component file (``Icon.tsx``) next to
imports and logic that SVGO must never see. Optimizing the whole file
would destroy it; optimizing each ``<svg>...</svg>`` element in place
keeps everything around it byte-for-byte.

HOW: A non-greedy regex finds each element. Blocks are optimized through
the bridge and spliced back from last to first so earlier offsets stay
valid. A standalone ``.svg`` file with a prolog (``<?xml ...?>``) is still
one block; a file with no ``<svg`` at all is handed to the bridge whole.

RULES:
- Text outside the located blocks is never modified
- Nested ``<svg>`` elements are treated as part of the outermost match
  up to the first ``</svg>``; this mirrors how editors highlight them
- Byte counts are UTF-8 lengths
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List

from better_svg.core.bridge import SvgTransform, optimize_with

logger = logging.getLogger(__name__)

SVG_BLOCK_RE = re.compile(r"<svg[\s\S]*?>[\s\S]*?</svg>")


@dataclass(frozen=True)
class SvgBlock:
    """One inline SVG element found in a larger text.

    Attributes:
        start: Offset of ``<svg`` in the source text.
        end: Offset just past ``</svg>``.
        content: ``text[start:end]``.
    """

    start: int
    end: int
    content: str


@dataclass(frozen=True)
class DocumentResult:
    """Result of optimizing every SVG element in a document."""

    text: str
    blocks: int
    bytes_before: int
    bytes_after: int


def find_svg_blocks(text: str) -> List[SvgBlock]:
    """Return every ``<svg ...>...</svg>`` element in ``text``, in order."""
    return [
        SvgBlock(start=match.start(), end=match.end(), content=match.group(0))
        for match in SVG_BLOCK_RE.finditer(text)
    ]


def optimize_document(text: str, transform: SvgTransform) -> DocumentResult:
    """Optimize each SVG element in ``text`` and splice the results back.

    Args:
        text: Full file content (component source, HTML, or an SVG file).
        transform: The optimizer, applied through optimize_with().

    Returns:
        DocumentResult with the new text and UTF-8 sizes before and after.
    """
    blocks = find_svg_blocks(text)
    logger.debug("Found %d inline SVG block(s)", len(blocks))

    if not blocks:
        result = optimize_with(text, transform)
        return DocumentResult(
            text=result,
            blocks=0,
            bytes_before=_utf8_len(text),
            bytes_after=_utf8_len(result),
        )

    bytes_before = 0
    bytes_after = 0
    for block in reversed(blocks):
        optimized = optimize_with(block.content, transform)
        bytes_before += _utf8_len(block.content)
        bytes_after += _utf8_len(optimized)
        text = text[:block.start] + optimized + text[block.end:]

    return DocumentResult(
        text=text,
        blocks=len(blocks),
        bytes_before=bytes_before,
        bytes_after=bytes_after,
    )


def format_bytes(size: int) -> str:
    """Human-readable size: ``"512 bytes"`` or ``"1.50 KB"``."""
    if size < 1024:
        return "{} bytes".format(size)
    return "{:.2f} KB".format(size / 1024)


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))
