"""DIVI shortcode parser."""
from typing import Any, Dict

from translation_bridge.parser.shortcode_parser import ShortcodeParser, fraction_width

SPACING_SIDES = ("top", "right", "bottom", "left")


def expand_divi_spacing(value: str) -> str:
    """``10px|20px||20px|false|false`` -> ``10px 20px 0 20px``."""
    parts = value.split("|")[:4]
    parts += [""] * (4 - len(parts))
    return " ".join(part.strip() or "0" for part in parts)


class DiviParser(ShortcodeParser):
    """Parser for ``[et_pb_*]`` shortcodes (section > row > column > module)."""

    framework = "divi"
    prefixes = ("et_pb_",)

    STYLE_ATTRIBUTES = {
        "background_color": "background-color",
        "text_color": "color",
        "text_orientation": "text-align",
        "custom_margin": "margin",
        "custom_padding": "padding",
        "max_width": "max-width",
        "width": "width",
        "height": "height",
        "min_height": "min-height",
        "border_radii": "border-radius",
        "header_font_size": "font-size",
        "text_font_size": "font-size",
    }

    def style_value(self, name: str, value: str) -> Any:
        if name in ("custom_margin", "custom_padding"):
            return expand_divi_spacing(value)
        if name == "border_radii" and "|" in value:
            # "on|4px|4px|4px|4px": leading flag is the link toggle
            return " ".join(part for part in value.split("|")[1:] if part)
        return value

    def extract_attributes(self, component_type: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        if component_type in ("column", "column_inner") and "type" in attributes:
            attributes["width"] = fraction_width(attributes["type"])

        if "module_class" in attributes:
            attributes["class"] = attributes.pop("module_class")
        if "module_id" in attributes:
            attributes["id"] = attributes.pop("module_id")

        return attributes
