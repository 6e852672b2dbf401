"""WPBakery (Visual Composer) shortcode converter."""
from typing import Any, Dict, Tuple
from urllib.parse import quote

from translation_bridge.converter.base import stable_id, width_to_fraction
from translation_bridge.converter.shortcode_converter import ShortcodeConverter
from translation_bridge.schema.models import Component


def build_vc_link(url: str, title: str = "", target: str = "") -> str:
    """Encode a link as ``url:...|title:...|target:...``."""
    parts = [f"url:{quote(str(url), safe='')}"]
    if title:
        parts.append(f"title:{quote(str(title), safe='')}")
    if target:
        parts.append(f"target:{target}")
    return "|".join(parts)


class WPBakeryConverter(ShortcodeConverter):
    """Renders ``[vc_row][vc_column]`` trees.

    Styles travel in the ``css`` design-options attribute as a
    ``.vc_custom_<id>{...}`` rule.
    """

    framework = "wpbakery"

    STRUCTURE = ("vc_row", "vc_column")
    STRUCTURAL_LEVELS = {"container": 0, "section": 0, "row": 0, "column": 1, "col": 1}
    LEAF_LEVEL = 2

    MODULES = {
        "heading": "vc_custom_heading",
        "custom_heading": "vc_custom_heading",
        "text": "vc_column_text",
        "paragraph": "vc_column_text",
        "text_block": "vc_column_text",
        "button": "vc_btn",
        "btn": "vc_btn",
        "image": "vc_single_image",
        "divider": "vc_separator",
        "spacer": "vc_empty_space",
        "video": "vc_video",
        "gallery": "vc_gallery",
        "accordion": "vc_tta_accordion",
        "tabs": "vc_tta_tabs",
        "icon": "vc_icon",
        "cta": "vc_cta",
        "html": "vc_raw_html",
    }
    DEFAULT_MODULE = "vc_column_text"

    def style_attributes(self, component: Component) -> Dict[str, Any]:
        styles = self.css_styles(component)
        if not styles:
            return {}
        declarations = "".join(f"{name}: {value} !important;" for name, value in styles.items())
        return {"css": f".vc_custom_{stable_id(component.id, 10)}{{{declarations}}}"}

    def layout_attributes(self, component: Any, level: int) -> Dict[str, Any]:
        if component is None or level != 1:
            return {}
        return {"width": width_to_fraction(self.attribute(component, "width"), separator="/")}

    def module_parts(self, component: Component, tag: str) -> Tuple[Dict[str, Any], Any]:
        attributes: Dict[str, Any] = {}
        if component.attributes.get("class"):
            attributes["el_class"] = component.attributes["class"]
        if component.attributes.get("id"):
            attributes["el_id"] = component.attributes["id"]

        if tag == "vc_custom_heading":
            attributes["text"] = self.text(component)
            attributes["font_container"] = f"tag:h{self.heading_level(component)}"
            return attributes, None

        if tag == "vc_btn":
            attributes["title"] = self.text(component)
            attributes["link"] = build_vc_link(
                self.attribute(component, "url", "#"),
                target=self.attribute(component, "target", ""),
            )
            return attributes, None

        if tag == "vc_single_image":
            attributes["source"] = "external_link"
            attributes["custom_src"] = self.attribute(component, "src", "")
            if self.attribute(component, "alt"):
                attributes["alt"] = self.attribute(component, "alt")
            return attributes, None

        if tag in ("vc_separator", "vc_empty_space"):
            if tag == "vc_empty_space":
                attributes["height"] = self.attribute(component, "height", "32px")
            return attributes, None

        if tag == "vc_video":
            attributes["link"] = self.attribute(component, "src", "")
            return attributes, None

        return attributes, self.text(component)
