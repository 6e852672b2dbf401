"""Avada (Fusion Builder) shortcode parser."""
from typing import Any, Dict

from translation_bridge.parser.shortcode_parser import ShortcodeParser, fraction_width


class AvadaParser(ShortcodeParser):
    """Parser for ``[fusion_*]`` shortcodes (container > row > column > element)."""

    framework = "avada"
    # Longest first: fusion_builder_container -> container
    prefixes = ("fusion_builder_", "fusion_")

    STYLE_ATTRIBUTES = {
        "background_color": "background-color",
        "backgroundcolor": "background-color",
        "text_color": "color",
        "textcolor": "color",
        "content_align": "text-align",
        "margin_top": "margin-top",
        "margin_right": "margin-right",
        "margin_bottom": "margin-bottom",
        "margin_left": "margin-left",
        "padding_top": "padding-top",
        "padding_right": "padding-right",
        "padding_bottom": "padding-bottom",
        "padding_left": "padding-left",
        "font_size": "font-size",
        "border_radius": "border-radius",
    }

    def extract_attributes(self, component_type: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        if component_type in ("column", "column_inner") and "type" in attributes:
            attributes["width"] = fraction_width(attributes["type"])

        if component_type == "title" and str(attributes.get("size", "")).isdigit():
            attributes["level"] = int(attributes["size"])

        return attributes
