"""WPBakery (Visual Composer) shortcode parser."""
import re
from typing import Any, Dict, Tuple
from urllib.parse import unquote

from translation_bridge.parser.base import parse_css_declarations
from translation_bridge.parser.shortcode_parser import ShortcodeParser, fraction_width

# css=".vc_custom_1234{margin-top: 10px !important;}"
CUSTOM_CSS_PATTERN = re.compile(r"\{([^}]*)\}")


def parse_vc_css(css: str) -> Dict[str, str]:
    styles = {}
    for block in CUSTOM_CSS_PATTERN.findall(css or ""):
        for name, value in parse_css_declarations(block).items():
            styles[name] = value.replace("!important", "").strip()
    return styles


def parse_vc_link(link: str) -> Dict[str, str]:
    """``url:http%3A%2F%2Fx.com|title:Go|target:_blank`` -> dict of parts."""
    parts = {}
    for segment in (link or "").split("|"):
        if ":" not in segment:
            continue
        key, value = segment.split(":", 1)
        if value:
            parts[key.strip()] = unquote(value)
    return parts


class WPBakeryParser(ShortcodeParser):
    """Parser for ``[vc_*]`` shortcodes.

    ``css`` design options become styles and ``link`` is decoded into
    ``href``, ``title`` and ``target`` attributes.
    """

    framework = "wpbakery"
    prefixes = ("vc_",)

    STYLE_ATTRIBUTES = {
        "color": "color",
        "background_color": "background-color",
        "font_size": "font-size",
        "align": "text-align",
    }

    def split_attributes(self, raw: Dict[str, str]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        raw = dict(raw)
        css = raw.pop("css", "")
        attributes, styles = super().split_attributes(raw)
        styles.update(parse_vc_css(css))
        return attributes, styles

    def extract_attributes(self, component_type: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        if "link" in attributes:
            link = parse_vc_link(attributes.pop("link"))
            if "url" in link:
                attributes["href"] = link["url"]
            for key in ("title", "target", "rel"):
                if key in link:
                    attributes[key] = link[key]

        if component_type in ("column", "column_inner") and "width" in attributes:
            attributes["width"] = fraction_width(attributes["width"])

        if "el_class" in attributes:
            attributes["class"] = attributes.pop("el_class")
        if "el_id" in attributes:
            attributes["id"] = attributes.pop("el_id")

        return attributes
