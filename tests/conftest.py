"""Shared test fixtures for the better_svg test suite.

WHY: Several test modules need the same realistic inputs: a JSX icon as
it appears in a React component, the same icon as plain SVG, and a full
component source file with inline SVG around ordinary code.

HOW: Module-level constants hold the markup; fixtures hand them out so
tests can request exactly what they need.

RULES:
- The JSX icon uses every construct the transcoder protects: brace
  expressions, a spread, className, camelCase attributes, an event handler
  with a nested block body, and a style object.
- Fixtures return fresh strings; tests never share mutable state.
"""

import pytest


JSX_ICON = (
    '<svg {...props} className="w-4 h-4" fill="none" stroke="currentColor" '
    'viewBox="0 0 24 24" onClick={() => { setOpen(!open) }} '
    'style={{ color: "red" }}>\n'
    '  <path strokeLinecap="round" strokeLinejoin="round" strokeWidth={2} '
    'd="M19 9l-7 7-7-7" />\n'
    '</svg>'
)

PLAIN_ICON = (
    '<svg class="icon" viewBox="0 0 24 24" fill="none" stroke="currentColor">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" '
    'd="M19 9l-7 7-7-7"/></svg>'
)

COMPONENT_SOURCE = (
    "import React from 'react'\n"
    "\n"
    "export function ChevronIcon (props) {\n"
    "  return (\n"
    '    <svg {...props} className="icon" viewBox="0 0 24 24">\n'
    '      <path strokeWidth={2} d="M19 9l-7 7-7-7" />\n'
    "    </svg>\n"
    "  )\n"
    "}\n"
    "\n"
    "export function CloseIcon () {\n"
    '  return <svg viewBox="0 0 24 24"><path d="M6 18L18 6" /></svg>\n'
    "}\n"
)


@pytest.fixture
def jsx_icon():
    """A JSX icon using every protected construct."""
    return JSX_ICON


@pytest.fixture
def plain_icon():
    """A typical SVGO-optimized plain SVG icon."""
    return PLAIN_ICON


@pytest.fixture
def component_source():
    """A .tsx component file with two inline SVG elements."""
    return COMPONENT_SOURCE
