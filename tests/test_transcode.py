"""Unit tests for the forward and reverse transcoders.

WHY: The transcoders are the whole point of the package. Every construct
SVGO cannot represent must come back byte-for-byte after a round trip,
and plain SVG attributes must be renamed exactly where expected.

HOW: Forward and reverse behaviour are tested in isolation against exact
expected strings (payloads built with encode_payload), then the round-trip
law is checked over a set of realistic JSX snippets.

RULES:
- Every captured expression is wrapped in the payload envelope, including
  trivial ones like ``{2}``; round trips depend on it.
"""

from better_svg.core.payload import PAYLOAD_PREFIX, encode_payload
from better_svg.core.transcode import (
    convert_jsx_to_svg,
    convert_svg_to_jsx,
    encode_expressions,
    encode_spreads,
    unescape_entities,
)


def _p(body):
    return encode_payload(body)


# =========================================================================
# Forward: JSX → SVG
# =========================================================================


class TestForwardExpressions:

    def test_number_expression_is_wrapped(self):
        result = convert_jsx_to_svg("<svg><path strokeWidth={2} /></svg>")
        assert result == '<svg><path stroke-width="{}" /></svg>'.format(_p("2"))

    def test_variable_expression_is_wrapped(self):
        result = convert_jsx_to_svg("<svg><path strokeWidth={strokeSize} /></svg>")
        assert 'stroke-width="{}"'.format(_p("strokeSize")) in result

    def test_nested_expression_captured_whole(self):
        result = encode_expressions("<e render={() => { return {a:1} }} />")
        assert result == '<e render="{}" />'.format(_p("() => { return {a:1} }"))

    def test_quoted_brace_captured_whole(self):
        result = encode_expressions('<e label={"}"} />')
        assert result == '<e label="{}" />'.format(_p('"}"'))

    def test_unterminated_expression_left_alone(self):
        text = '<svg width={10 height="2"></svg>'
        assert convert_jsx_to_svg(text) == text

    def test_scanning_resumes_after_unterminated(self):
        text = "<e a={b c={1}"
        # The first "={" never closes, so the second one is still encoded
        assert encode_expressions(text) == '<e a={{b c="{}"'.format(_p("1"))

    def test_attribute_names_inside_expressions_untouched(self):
        result = convert_jsx_to_svg('<svg title={"strokeWidth=2 className=x"} />')
        assert "stroke-width" not in result
        assert "class=" not in result


class TestForwardSpreads:

    def test_single_spread(self):
        result = convert_jsx_to_svg("<svg {...props}><path /></svg>")
        assert result == '<svg data-spread-0="{}"><path /></svg>'.format(_p("props"))

    def test_indices_in_order(self):
        result = encode_spreads('<svg {...a} id="x" {...b}>')
        assert result == '<svg data-spread-0="{}" id="x" data-spread-1="{}">'.format(
            _p("a"), _p("b"),
        )

    def test_indices_restart_per_call(self):
        first = encode_spreads("<svg {...a}>")
        second = encode_spreads("<svg {...b}>")
        assert "data-spread-0" in first
        assert "data-spread-0" in second

    def test_adjacent_spreads(self):
        result = convert_jsx_to_svg('<e {...p}{...q} className="c"/>')
        assert result == '<e data-spread-0="{}"data-spread-1="{}" class="c"/>'.format(
            _p("p"), _p("q"),
        )


class TestForwardRenames:

    def test_class_name(self):
        assert convert_jsx_to_svg('<svg className="icon"><path /></svg>') == \
            '<svg class="icon"><path /></svg>'

    def test_camel_case(self):
        assert convert_jsx_to_svg('<svg><path fillRule="evenodd" /></svg>') == \
            '<svg><path fill-rule="evenodd" /></svg>'

    def test_xlink_href(self):
        assert convert_jsx_to_svg('<svg><use xlinkHref="#icon" /></svg>') == \
            '<svg><use xlink:href="#icon" /></svg>'

    def test_single_quotes(self):
        result = convert_jsx_to_svg("<svg className='icon'><path strokeLinecap='round' /></svg>")
        assert result == "<svg class='icon'><path stroke-linecap='round' /></svg>"

    def test_prefixed_name_not_renamed(self):
        text = '<svg data-strokeWidth="test"><path /></svg>'
        assert convert_jsx_to_svg(text) == text

    def test_font_style_is_not_a_style_attribute(self):
        result = convert_jsx_to_svg('<text fontStyle="italic" />')
        assert result == '<text font-style="italic" />'

    def test_plain_attributes_preserved(self):
        text = '<svg viewBox="0 0 24 24" fill="none"><path d="M0 0" /></svg>'
        assert convert_jsx_to_svg(text) == text

    def test_empty_svg(self):
        assert convert_jsx_to_svg("<svg></svg>") == "<svg></svg>"


class TestForwardPlaceholders:

    def test_event_handler_expression(self):
        result = convert_jsx_to_svg("<e onClick={() => log(1)} a={2}/>")
        assert result == '<e data-jsx-event-onClick="{}" a="{}"/>'.format(
            _p("() => log(1)"), _p("2"),
        )

    def test_event_handler_literal(self):
        result = convert_jsx_to_svg('<svg onLoad="init()" />')
        assert result == '<svg data-jsx-event-onLoad="init()" />'

    def test_lowercase_on_attribute_is_not_an_event(self):
        text = '<svg online="yes" />'
        assert convert_jsx_to_svg(text) == text

    def test_style_object(self):
        result = convert_jsx_to_svg('<svg style={{color: "red"}} />')
        assert result == '<svg data-better-svg-style="{}" />'.format(_p('{color: "red"}'))

    def test_literal_style(self):
        result = convert_jsx_to_svg('<svg style="color: red" />')
        assert result == '<svg data-better-svg-style="color: red" />'


# =========================================================================
# Reverse: SVG → JSX
# =========================================================================


class TestReverseRenames:

    def test_class(self):
        assert convert_svg_to_jsx('<svg class="icon"><path /></svg>') == \
            '<svg className="icon"><path /></svg>'

    def test_kebab_case(self):
        assert convert_svg_to_jsx('<svg><path stroke-width="2" /></svg>') == \
            '<svg><path strokeWidth="2" /></svg>'

    def test_xlink_href(self):
        assert convert_svg_to_jsx('<svg><use xlink:href="#icon" /></svg>') == \
            '<svg><use xlinkHref="#icon" /></svg>'

    def test_similar_prefix_untouched(self):
        # color-interpolation must not eat color-interpolation-filters
        result = convert_svg_to_jsx('<filter color-interpolation-filters="sRGB" />')
        assert result == '<filter colorInterpolationFilters="sRGB" />'

    def test_optimized_output(self, plain_icon):
        result = convert_svg_to_jsx(plain_icon)
        assert 'className="icon"' in result
        assert "strokeLinecap=" in result
        assert "strokeWidth=" in result
        assert "stroke-linecap=" not in result
        assert " class=" not in result

    def test_no_attributes_to_convert(self):
        text = '<svg viewBox="0 0 24 24"><path d="M0 0" /></svg>'
        assert convert_svg_to_jsx(text) == text


class TestReverseSpreads:

    def test_payload_spread(self):
        text = '<svg data-spread-0="{}"><path /></svg>'.format(_p("props"))
        assert convert_svg_to_jsx(text) == "<svg {...props}><path /></svg>"

    def test_plain_value_fallback(self):
        assert convert_svg_to_jsx('<svg data-spread-0="props"><path /></svg>') == \
            "<svg {...props}><path /></svg>"

    def test_entity_fallback(self):
        text = '<svg data-spread-0="a &amp;&amp; b ? x : &quot;y&quot;"></svg>'
        assert convert_svg_to_jsx(text) == '<svg {...a && b ? x : "y"}></svg>'

    def test_unescape_order(self):
        assert unescape_entities("&amp;lt;") == "&lt;"
        assert unescape_entities("&lt;g&gt;") == "<g>"


class TestReversePlaceholders:

    def test_event_payload(self):
        text = '<e data-jsx-event-onClick="{}"/>'.format(_p("() => log(1)"))
        assert convert_svg_to_jsx(text) == "<e onClick={() => log(1)}/>"

    def test_event_literal(self):
        assert convert_svg_to_jsx('<svg data-jsx-event-onLoad="init()" />') == \
            '<svg onLoad="init()" />'

    def test_style_payload(self):
        text = '<svg data-better-svg-style="{}" />'.format(_p('{color: "red"}'))
        assert convert_svg_to_jsx(text) == '<svg style={{color: "red"}} />'

    def test_generic_payload_single_quotes(self):
        text = "<path d='{}' />".format(_p("pathData"))
        assert convert_svg_to_jsx(text) == "<path d={pathData} />"

    def test_generic_payload_on_prefixed_name(self):
        text = '<path data-id="{}" />'.format(_p("id"))
        assert convert_svg_to_jsx(text) == "<path data-id={id} />"

    def test_mangled_payload_left_visible(self):
        text = '<path stroke-width="{}M g==__" />'.format(PAYLOAD_PREFIX)
        assert convert_svg_to_jsx(text) == '<path strokeWidth="{}M g==__" />'.format(
            PAYLOAD_PREFIX,
        )

    def test_payload_inside_longer_value_not_decoded(self):
        text = '<path d="M0 {}" />'.format(_p("x"))
        assert convert_svg_to_jsx(text) == text


# =========================================================================
# Round trip
# =========================================================================


ROUND_TRIP_CASES = [
    '<svg className="icon"><path strokeWidth="2" strokeLinecap="round" /></svg>',
    '<svg><path strokeWidth="2" strokeLinecap="round" strokeLinejoin="bevel" '
    'strokeDasharray="5,5" strokeOpacity="0.5" /></svg>',
    '<svg><text fontFamily="Arial" fontSize="12" fontWeight="bold" fontStyle="italic" /></svg>',
    '<svg {...props} className="w-4 h-4"><path /></svg>',
    '<svg {...props} {...user} className="w-4 h-4"><path /></svg>',
    '<e {...p}{...q} className="c"/>',
    "<e onClick={() => log(1)} a={2}/>",
    '<svg onClick={() => { console.log("click") }} strokeWidth={2}></svg>',
    "<svg onClick={() => { console.log('hola') }} className=\"hola\" strokeWidth=\"2\"></svg>",
    '<svg style={{ color: "red", strokeWidth: 2 }} width={size} />',
    '<svg label={"}"} />',
    "<svg render={() => { return {a:1} }} />",
    "<use xlinkHref={`#${id}`} />",
    '<text aria-label={"café ✓"} />',
    '<svg onClick={handle} data-x="1" fill="none" />',
    "<svg onMouseEnter='literal' />",
    '<svg title={"strokeWidth=2 className=x"} />',
    '<filter colorInterpolationFilters="sRGB" floodColor={c} />',
    "<e a={'\ud800'}/>",
]


class TestRoundTrip:
    """convert_svg_to_jsx(convert_jsx_to_svg(x)) == x for supported JSX."""

    def test_cases(self):
        for jsx in ROUND_TRIP_CASES:
            assert convert_svg_to_jsx(convert_jsx_to_svg(jsx)) == jsx, jsx

    def test_full_icon(self, jsx_icon):
        assert convert_svg_to_jsx(convert_jsx_to_svg(jsx_icon)) == jsx_icon

    def test_forward_output_is_brace_free_for_attributes(self, jsx_icon):
        svg = convert_jsx_to_svg(jsx_icon)
        assert "={" not in svg
        assert "{..." not in svg
        assert "onClick=" not in svg.replace("data-jsx-event-onClick=", "")

    def test_class_attribute_becomes_class_name(self):
        jsx = '<svg onClick={() => {}} class="hola" strokeLinecap="round"></svg>'
        result = convert_svg_to_jsx(convert_jsx_to_svg(jsx))
        assert result == jsx.replace('class="hola"', 'className="hola"')
