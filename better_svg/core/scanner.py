"""Brace and quote aware scanner for JSX attribute expressions.

WHY: ``strokeWidth={2}`` is trivial, but event handlers and style objects
are not: ``onClick={() => { run({a: 1}) }}`` nests braces, and
``label={"}"}`` hides a brace inside a string. Stopping at the first
``}`` would cut the expression in half and corrupt everything after it.

HOW: A single left-to-right pass keeps a brace balance (starting at 1 for
the ``{`` already consumed) and a string mode that remembers which of the
three JS quote characters opened it. Inside a string every character is
inert until the same quote appears unescaped.

RULES:
- Returns the index of the closing ``}``, or None when the text ends first
- An unterminated expression is not an error; the caller decides
- A quote is "escaped" only when the character right before it is ``\\``
"""

from __future__ import annotations

from typing import Optional

QUOTE_CHARS = frozenset({'"', "'", "`"})


def find_expression_end(text: str, start: int) -> Optional[int]:
    """Find the ``}`` that closes an expression opened just before ``start``.

    Args:
        text: The full markup being scanned.
        start: Index of the first character after the opening ``={``.

    Returns:
        Index of the matching closing brace, or None if the text ends
        while the balance is still positive.
    """
    balance = 1
    in_string = False
    quote = ""

    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if char == quote and text[index - 1] != "\\":
                in_string = False
            continue

        if char in QUOTE_CHARS:
            in_string = True
            quote = char
        elif char == "{":
            balance += 1
        elif char == "}":
            balance -= 1
            if balance == 0:
                return index

    return None
