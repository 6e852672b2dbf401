"""Tests for value and style transformers."""
import pytest

from translation_bridge.transformer.registry import ValueKind, ValueTransformerRegistry, classify_value
from translation_bridge.transformer.styles import (
    to_camel_case,
    to_kebab_case,
    transform_style_property,
    transform_styles,
)


class TestClassifyValue:
    """Test value kind detection."""

    @pytest.mark.parametrize("value,kind", [
        ("yes", ValueKind.BOOLEAN),
        ("OFF", ValueKind.BOOLEAN),
        (True, ValueKind.BOOLEAN),
        ("#ff0000", ValueKind.COLOR),
        ("rgba(0,0,0,0.5)", ValueKind.COLOR),
        ("10px", ValueKind.SIZE),
        ("2.5rem", ValueKind.SIZE),
        (3, ValueKind.SIZE),
        ("https://example.com/a", ValueKind.URL),
        ("Hello world", ValueKind.TEXT),
        ("/relative/path", ValueKind.TEXT),
    ])
    def test_kinds(self, value, kind):
        """Test detection order boolean, color, size, url, text."""
        assert classify_value(value) is kind


class TestValueTransformerRegistry:
    """Test ValueTransformerRegistry."""

    @pytest.fixture
    def registry(self):
        return ValueTransformerRegistry()

    def test_boolean_per_framework(self, registry):
        """Test booleans use the target's encoding."""
        assert registry.normalize("yes", "divi") == "on"
        assert registry.normalize("off", "elementor") == "no"
        assert registry.normalize("true", "bricks") is True

    def test_colors_and_sizes_unchanged(self, registry):
        """Test colors and sizes pass through."""
        assert registry.normalize("#fff", "divi") == "#fff"
        assert registry.normalize("12px", "elementor") == "12px"

    def test_integers_are_not_booleans(self, registry):
        """Test numeric values such as heading levels survive."""
        assert registry.normalize(1, "elementor") == 1

    def test_url_is_percent_encoded(self, registry):
        """Test unsafe URL characters are encoded."""
        assert registry.normalize("https://example.com/a\"b", "bootstrap") == "https://example.com/a%22b"

    def test_register_custom(self, registry):
        """Test adding a transformer."""
        registry.register("UPPER", lambda value, **kw: value.upper())

        assert registry.transform("abc", "UPPER") == "ABC"
        assert registry.transform("abc", "MISSING") == "abc"


class TestStyles:
    """Test style naming."""

    def test_case_conversion(self):
        """Test kebab and camel conversions."""
        assert to_kebab_case("backgroundColor") == "background-color"
        assert to_kebab_case("_backgroundColor") == "background-color"
        assert to_kebab_case("font_size") == "font-size"
        assert to_camel_case("background-color") == "backgroundColor"

    def test_property_per_framework(self):
        """Test target naming conventions."""
        assert transform_style_property("font-size", "elementor") == "fontSize"
        assert transform_style_property("font-size", "bricks") == "_fontSize"
        assert transform_style_property("fontSize", "divi") == "font-size"

    def test_spacing_values_get_px(self):
        """Test bare numbers on spacing properties get a unit."""
        styles = transform_styles({"margin-top": "10", "padding": 0, "color": "red"}, "bootstrap")

        assert styles == {"margin-top": "10px", "padding": 0, "color": "red"}
