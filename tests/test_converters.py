"""Tests for framework converters."""
import json

import pytest

from translation_bridge.converter.avada_converter import AvadaConverter
from translation_bridge.converter.base import expand_box, stable_id, width_to_fraction
from translation_bridge.converter.beaver_builder_converter import BeaverBuilderConverter
from translation_bridge.converter.bootstrap_converter import BootstrapConverter, column_class
from translation_bridge.converter.bricks_converter import BricksConverter
from translation_bridge.converter.claude_converter import DOCUMENTATION_BANNER, ClaudeConverter
from translation_bridge.converter.divi_converter import DiviConverter, divi_spacing
from translation_bridge.converter.elementor_converter import ElementorConverter
from translation_bridge.converter.gutenberg_converter import (
    GutenbergConverter,
    block_style,
    serialize_block_attributes,
)
from translation_bridge.converter.oxygen_converter import OxygenConverter
from translation_bridge.converter.shortcode_converter import build_shortcode
from translation_bridge.converter.wpbakery_converter import WPBakeryConverter, build_vc_link
from translation_bridge.parser.beaver_builder_parser import BeaverBuilderParser
from translation_bridge.parser.divi_parser import DiviParser
from translation_bridge.parser.elementor_parser import ElementorParser
from translation_bridge.parser.gutenberg_parser import GutenbergParser
from translation_bridge.schema.models import Component


def text(component_id="t", content="Hello", **kwargs):
    return Component(id=component_id, type="text", content=content, **kwargs)


def heading(component_id="h", content="Hi", level=2, **kwargs):
    return Component(id=component_id, type="heading", content=content, attributes={"level": level}, **kwargs)


def button(component_id="b", url="/x", target=None):
    attributes = {"url": url}
    if target:
        attributes["target"] = target
    return Component(id=component_id, type="button", content="Go", attributes=attributes)


def image(component_id="i"):
    return Component(id=component_id, type="image", attributes={"src": "a.png", "alt": "A"})


@pytest.fixture
def layout():
    """container > row > column(50%) > heading + button."""
    column = Component(id="c", type="column", attributes={"width": "50%"})
    column.add_child(heading(level=3, styles={"fontSize": "20px"}))
    column.add_child(button())
    row = Component(id="r", type="row", category="layout", children=[column])
    return Component(id="s", type="container", category="layout", children=[row])


class TestHelpers:
    """Test shared converter helpers."""

    def test_stable_id(self):
        """Test ids are deterministic and sized."""
        assert stable_id("abc") == stable_id("abc")
        assert len(stable_id("abc", 13)) == 13
        assert stable_id("abc") != stable_id("abd")

    def test_expand_box(self):
        """Test CSS box shorthand expansion."""
        assert expand_box("10px") == {"top": "10px", "right": "10px", "bottom": "10px", "left": "10px"}
        assert expand_box("1px 2px 3px") == {"top": "1px", "right": "2px", "bottom": "3px", "left": "2px"}
        assert expand_box("") == {}

    def test_width_to_fraction(self):
        """Test column widths become builder fractions."""
        assert width_to_fraction("50%") == "1_2"
        assert width_to_fraction("33.33%") == "1_3"
        assert width_to_fraction("25%", separator="/") == "1/4"
        assert width_to_fraction(None) == "1_1"
        assert width_to_fraction("100%", full="4_4") == "4_4"
        assert width_to_fraction("40%") == "5_12"

    def test_build_shortcode(self):
        """Test attribute escaping and self-closing output."""
        assert build_shortcode("a", {"x": 'say "hi"'}, "in") == '[a x="say &quot;hi&quot;"]in[/a]'
        assert build_shortcode("a", {"x": "[b]", "skip": None}) == '[a x="&#91;b&#93;" /]'
        assert build_shortcode("a", {"flag": True}) == '[a flag="on" /]'


class TestBootstrapConverter:
    """Test BootstrapConverter."""

    def test_layout(self, layout):
        """Test nested markup with column classes and inline styles."""
        expected = (
            '<div class="container">\n'
            '  <div class="row">\n'
            '    <div class="col-md-6">\n'
            '      <h3 style="font-size: 20px;">Hi</h3>\n'
            '      <a class="btn btn-primary" href="/x">Go</a>\n'
            '    </div>\n'
            '  </div>\n'
            '</div>'
        )
        assert BootstrapConverter().convert([layout]) == expected

    def test_image_is_void(self):
        """Test images render without a closing tag."""
        assert BootstrapConverter().convert([image()]) == '<img class="img-fluid" src="a.png" alt="A">'

    def test_attributes_are_escaped(self):
        """Test attribute values are HTML escaped."""
        link = Component(id="l", type="link", content="Docs", attributes={"url": '/a?b="c"'})
        assert BootstrapConverter().convert([link]) == '<a href="/a?b=&quot;c&quot;">Docs</a>'

    def test_fallback_element_keeps_link(self):
        """Test an unknown type with a URL renders as a link and keeps its other keys."""
        widget = Component(
            id="w",
            type="call_to_action",
            content="Buy",
            attributes={"href": "https://shop.example.com", "title": "Buy", "button_style": "flat"},
        )

        assert BootstrapConverter().convert([widget]) == (
            '<a href="https://shop.example.com" title="Buy" data-button-style="flat">Buy</a>'
        )

    def test_unknown_attributes_become_data_attributes(self):
        """Test plain attributes without an HTML meaning are kept as data-*."""
        paragraph = text(attributes={"dropCap": "yes", "align": "center", "level": 2})

        assert BootstrapConverter().convert([paragraph]) == '<p data-drop-cap="yes" data-align="center">Hello</p>'

    def test_column_class(self):
        """Test widths map to the 12 column grid."""
        assert column_class("50%") == "col-md-6"
        assert column_class("33.33%") == "col-md-4"
        assert column_class(None) == "col"
        assert column_class("100%") == "col"


class TestClaudeConverter:
    """Test ClaudeConverter."""

    def test_editable_regions(self):
        """Test banner and editable markers."""
        output = ClaudeConverter().convert([text()])

        assert output.startswith(DOCUMENTATION_BANNER)
        assert "CLAUDE AI-OPTIMIZED HTML" in output
        assert output.endswith('<p data-claude-editable="text">Hello</p>')

    def test_empty(self):
        """Test an empty forest still carries the banner."""
        assert ClaudeConverter().convert([]) == DOCUMENTATION_BANNER


class TestDiviConverter:
    """Test DiviConverter."""

    def test_wraps_loose_module(self):
        """Test a module gets synthetic section, row and column parents."""
        assert DiviConverter().convert([text()]) == (
            '[et_pb_section][et_pb_row][et_pb_column type="4_4"]'
            '[et_pb_text]Hello[/et_pb_text]'
            '[/et_pb_column][/et_pb_row][/et_pb_section]'
        )

    def test_modules(self):
        """Test heading, button and image modules."""
        converter = DiviConverter()

        assert converter.render_leaf(heading()) == "[et_pb_text]<h2>Hi</h2>[/et_pb_text]"
        assert converter.render_leaf(button(target="_blank")) == (
            '[et_pb_button button_url="/x" button_text="Go" url_new_window="on" /]'
        )
        assert converter.render_leaf(image()) == '[et_pb_image src="a.png" alt="A" /]'

    def test_section_styles_and_column_type(self):
        """Test layout styles and column fractions."""
        column = Component(id="c", type="column", attributes={"width": "50%"}, children=[text()])
        row = Component(id="r", type="row", children=[column])
        section = Component(id="s", type="section", styles={"background-color": "#fff"}, children=[row])

        assert DiviConverter().convert([section]) == (
            '[et_pb_section background_color="#fff"][et_pb_row][et_pb_column type="1_2"]'
            '[et_pb_text]Hello[/et_pb_text]'
            '[/et_pb_column][/et_pb_row][/et_pb_section]'
        )

    def test_layout_text_becomes_module(self):
        """Test text held by a layout node is kept as a module."""
        section = Component(id="s", type="section", content="Loose text")
        assert "[et_pb_text]Loose text[/et_pb_text]" in DiviConverter().convert([section])

    def test_spacing(self):
        """Test margin shorthand becomes pipe-separated spacing."""
        assert divi_spacing("10px 20px") == "10px|20px|10px|20px"
        output = DiviConverter().render_leaf(text(styles={"margin": "10px 20px"}))
        assert output == '[et_pb_text custom_margin="10px|20px|10px|20px"]Hello[/et_pb_text]'

    def test_output_parses_back(self):
        """Test the output is valid DIVI markup."""
        output = DiviConverter().convert([text()])
        parsed = DiviParser().parse(output)

        assert [node.type for node in parsed[0].walk()] == ["section", "row", "column", "text"]
        assert list(parsed[0].walk())[-1].content == "Hello"


class TestAvadaConverter:
    """Test AvadaConverter."""

    def test_wraps_loose_module(self):
        """Test the container > row > column chain."""
        assert AvadaConverter().convert([text()]) == (
            '[fusion_builder_container][fusion_builder_row][fusion_builder_column type="1_1"]'
            '[fusion_text]Hello[/fusion_text]'
            '[/fusion_builder_column][/fusion_builder_row][/fusion_builder_container]'
        )

    def test_elements(self):
        """Test title, button and image frame elements."""
        converter = AvadaConverter()

        assert converter.render_leaf(heading(level=3)) == '[fusion_title size="3"]Hi[/fusion_title]'
        assert converter.render_leaf(button()) == '[fusion_button link="/x" target="_self"]Go[/fusion_button]'
        assert converter.render_leaf(image()) == '[fusion_imageframe]<img src="a.png" alt="A" />[/fusion_imageframe]'

    def test_spacing(self):
        """Test box shorthand becomes per-side attributes."""
        output = AvadaConverter().render_leaf(text(styles={"margin": "10px 20px"}))
        assert output == (
            '[fusion_text margin_top="10px" margin_right="20px" margin_bottom="10px" margin_left="20px"]'
            'Hello[/fusion_text]'
        )


class TestWPBakeryConverter:
    """Test WPBakeryConverter."""

    def test_row_and_column(self):
        """Test rows and columns with slash fractions."""
        column = Component(id="c", type="column", attributes={"width": "50%"}, children=[heading(level=3)])
        row = Component(id="r", type="row", children=[column])

        assert WPBakeryConverter().convert([row]) == (
            '[vc_row][vc_column width="1/2"]'
            '[vc_custom_heading text="Hi" font_container="tag:h3" /]'
            '[/vc_column][/vc_row]'
        )

    def test_button_link(self):
        """Test links are encoded in the vc_link format."""
        output = WPBakeryConverter().render_leaf(button(url="https://example.com", target="_blank"))
        assert output == '[vc_btn title="Go" link="url:https%3A%2F%2Fexample.com|target:_blank" /]'
        assert build_vc_link("/a b", title="T") == "url:%2Fa%20b|title:T"

    def test_design_options(self):
        """Test styles travel in the css attribute."""
        output = WPBakeryConverter().render_leaf(text(styles={"color": "red"}))
        rule = f'.vc_custom_{stable_id("t", 10)}{{color: red !important;}}'
        assert output == f'[vc_column_text css="{rule}"]Hello[/vc_column_text]'


class TestGutenbergConverter:
    """Test GutenbergConverter."""

    def test_heading(self):
        """Test the default level is left out of the block comment."""
        converter = GutenbergConverter()

        assert converter.convert([heading()]) == (
            '<!-- wp:heading -->\n<h2 class="wp-block-heading">Hi</h2>\n<!-- /wp:heading -->'
        )
        assert converter.convert([heading(level=3)]) == (
            '<!-- wp:heading {"level":3} -->\n<h3 class="wp-block-heading">Hi</h3>\n<!-- /wp:heading -->'
        )

    def test_button_gets_buttons_parent(self):
        """Test a lone button is wrapped in a buttons block."""
        output = GutenbergConverter().convert([button()])

        assert output.startswith("<!-- wp:buttons -->")
        assert '<!-- wp:button {"url":"/x"} -->' in output
        assert '<a class="wp-block-button__link wp-element-button" href="/x">Go</a>' in output
        assert output.endswith("<!-- /wp:buttons -->")

    def test_group_style(self):
        """Test CSS becomes the nested block style attribute."""
        group = Component(id="g", type="group", styles={"background-color": "#f0f0f0"}, children=[text()])
        output = GutenbergConverter().convert([group])

        assert output.startswith('<!-- wp:group {"style":{"color":{"background":"#f0f0f0"}}} -->')
        assert "<!-- wp:paragraph -->\n<p>Hello</p>\n<!-- /wp:paragraph -->" in output

    def test_block_style(self):
        """Test CSS to block style paths."""
        assert block_style({"padding-top": "10px", "font-size": "20px"}) == {
            "spacing": {"padding": {"top": "10px"}},
            "typography": {"fontSize": "20px"},
        }

    def test_serialize_escapes_comment_breakers(self):
        """Test block attributes cannot close the comment."""
        assert serialize_block_attributes({"a": "<b>--"}) == r'{"a":"\u003cb\u003e\u002d\u002d"}'

    def test_output_parses_back(self):
        """Test the output is valid block markup."""
        output = GutenbergConverter().convert([heading(level=3), text(content="Body text")])
        parsed = GutenbergParser().parse(output)

        assert [node.type for node in parsed] == ["heading", "paragraph"]
        assert parsed[0].content == "Hi"
        assert parsed[0].attributes["level"] == 3
        assert parsed[1].content == "Body text"


class TestElementorConverter:
    """Test ElementorConverter."""

    def test_wraps_loose_widget(self):
        """Test a widget gets a section and a full-width column."""
        data = json.loads(ElementorConverter().convert([text()]))

        assert data[0]["elType"] == "section"
        column = data[0]["elements"][0]
        assert column["elType"] == "column"
        assert column["settings"] == {"_column_size": 100}
        widget = column["elements"][0]
        assert widget["id"] == stable_id("t", 7)
        assert widget["widgetType"] == "text-editor"
        assert widget["settings"] == {"editor": "Hello"}

    def test_widget_settings(self):
        """Test heading and button settings."""
        converter = ElementorConverter()

        title = converter.render_leaf(heading(level=3, styles={"color": "#111"}))
        assert title["settings"] == {"title_color": "#111", "title": "Hi", "header_size": "h3"}

        link = converter.render_leaf(button(url="https://example.com", target="_blank"))
        assert link["widgetType"] == "button"
        assert link["settings"] == {
            "text": "Go",
            "link": {"url": "https://example.com", "is_external": "on", "nofollow": ""},
        }

    def test_nested_section_is_unwrapped(self):
        """Test layout below its level is flattened into the column."""
        inner = Component(id="inner", type="section", children=[heading()])
        column = Component(id="c", type="column", children=[inner])
        section = Component(id="s", type="section", children=[column])

        data = json.loads(ElementorConverter().convert([section]))
        widgets = data[0]["elements"][0]["elements"]

        assert [widget["widgetType"] for widget in widgets] == ["heading"]

    def test_output_parses_back(self, layout):
        """Test the output is valid Elementor data."""
        parsed = ElementorParser().parse(ElementorConverter().convert([layout]))
        column = parsed[0].children[0]
        title = column.children[0]

        assert column.attributes["width"] == "50%"
        assert title.content == "Hi"
        assert title.attributes["level"] == 3


class TestBricksConverter:
    """Test BricksConverter."""

    def test_flat_list(self):
        """Test parent and children links."""
        section = Component(id="s", type="section", children=[
            heading(level=3, styles={"color": "#111", "padding": "10px"}),
        ])
        section_el, heading_el = json.loads(BricksConverter().convert([section]))

        assert section_el["parent"] == 0
        assert section_el["children"] == [heading_el["id"]]
        assert heading_el["parent"] == section_el["id"]
        assert heading_el["name"] == "heading"
        assert heading_el["settings"] == {
            "text": "Hi",
            "tag": "h3",
            "_typography": {"color": {"hex": "#111"}},
            "_padding": {"top": "10px", "right": "10px", "bottom": "10px", "left": "10px"},
        }

    def test_button_link(self):
        """Test links carry the new tab flag."""
        element = json.loads(BricksConverter().convert([button(url="https://example.com", target="_blank")]))[0]
        assert element["settings"]["link"] == {"type": "external", "url": "https://example.com", "newTab": True}


class TestOxygenConverter:
    """Test OxygenConverter."""

    def test_sequential_ids(self):
        """Test ids follow document order and children point at parents."""
        section = Component(id="s", type="section", children=[heading(level=1, content="Title"), text(content="Body")])
        elements = json.loads(OxygenConverter().convert([section]))

        assert [element["id"] for element in elements] == [1, 2, 3]
        assert [element["name"] for element in elements] == ["ct_section", "ct_headline", "ct_text_block"]
        assert [element["options"]["ct_parent"] for element in elements] == [0, 1, 1]
        assert elements[1]["options"]["ct_content"] == "Title"
        assert elements[1]["options"]["original"] == {"tag": "h1"}
        assert elements[2]["options"]["selector"] == f"text_block-3-{stable_id('t', 4)}"

    def test_row_is_flex(self):
        """Test rows become flex div blocks."""
        row = Component(id="r", type="row", children=[text()])
        elements = json.loads(OxygenConverter().convert([row]))

        assert elements[0]["name"] == "ct_div_block"
        assert elements[0]["options"]["original"] == {"display": "flex", "flex-direction": "row"}


class TestBeaverBuilderConverter:
    """Test BeaverBuilderConverter."""

    def test_wraps_loose_module(self):
        """Test a module gets row, column-group and column nodes."""
        nodes = json.loads(BeaverBuilderConverter().convert([text()]))
        row, group, column, module = nodes.values()

        assert [node["type"] for node in (row, group, column, module)] == ["row", "column-group", "column", "module"]
        assert row["parent"] is None
        assert module["parent"] == column["node"]
        assert column["settings"] == {"size": 100}
        assert module["settings"] == {"type": "rich-text", "text": "Hello"}

    def test_module_settings(self):
        """Test heading, button and photo settings."""
        converter = BeaverBuilderConverter()

        title = converter.render_leaf(heading(styles={"color": "#333", "margin": "10px"}))
        assert title["settings"] == {
            "type": "heading",
            "text_color": "333",
            "margin_top": "10px",
            "margin_right": "10px",
            "margin_bottom": "10px",
            "margin_left": "10px",
            "heading": "Hi",
            "tag": "h2",
        }

        link = converter.render_leaf(button())
        assert link["settings"]["link"] == "/x"
        assert link["settings"]["link_target"] == "_self"

        photo = converter.render_leaf(image())
        assert photo["settings"]["type"] == "photo"
        assert photo["settings"]["photo_url"] == "a.png"

    def test_output_parses_back(self):
        """Test the node map is valid Beaver Builder data."""
        parsed = BeaverBuilderParser().parse(BeaverBuilderConverter().convert([text()]))
        nodes = list(parsed[0].walk())

        assert [node.type for node in nodes] == ["row", "column-group", "column", "rich-text"]
        assert nodes[-1].content == "Hello"
