"""Avada (Fusion Builder) shortcode converter."""
from html import escape
from typing import Any, Dict, Tuple

from translation_bridge.converter.base import expand_box, width_to_fraction
from translation_bridge.converter.shortcode_converter import ShortcodeConverter
from translation_bridge.schema.models import Component

BOX_PROPERTIES = ("margin", "padding")
SIDES = ("top", "right", "bottom", "left")


class AvadaConverter(ShortcodeConverter):
    """Renders ``fusion_builder_container`` > row > column > element trees."""

    framework = "avada"

    STRUCTURE = ("fusion_builder_container", "fusion_builder_row", "fusion_builder_column")
    STRUCTURAL_LEVELS = {"container": 0, "section": 0, "row": 1, "column": 2, "col": 2}
    LEAF_LEVEL = 3

    MODULES = {
        "heading": "fusion_title",
        "title": "fusion_title",
        "text": "fusion_text",
        "paragraph": "fusion_text",
        "button": "fusion_button",
        "btn": "fusion_button",
        "image": "fusion_imageframe",
        "divider": "fusion_separator",
        "spacer": "fusion_separator",
        "video": "fusion_video",
        "alert": "fusion_alert",
        "accordion": "fusion_accordion",
        "tabs": "fusion_tabs",
        "gallery": "fusion_gallery",
        "icon": "fusion_fontawesome",
        "html": "fusion_code",
        "code": "fusion_code",
        "card": "fusion_content_boxes",
        "slider": "fusion_slider",
    }
    DEFAULT_MODULE = "fusion_text"

    STYLE_ATTRIBUTES = {
        "background-color": "background_color",
        "color": "text_color",
        "text-align": "content_align",
        "font-size": "font_size",
        "border-radius": "border_radius",
    }

    def style_attributes(self, component: Component) -> Dict[str, Any]:
        attributes = super().style_attributes(component)
        styles = self.css_styles(component)

        for box in BOX_PROPERTIES:
            sides = expand_box(styles[box]) if box in styles else {}
            for side in SIDES:
                value = styles.get(f"{box}-{side}", sides.get(side))
                if value not in (None, ""):
                    attributes[f"{box}_{side}"] = value

        return attributes

    def layout_attributes(self, component: Any, level: int) -> Dict[str, Any]:
        if level != 2:
            return {}
        width = self.attribute(component, "width") if component is not None else None
        return {"type": width_to_fraction(width)}

    def module_parts(self, component: Component, tag: str) -> Tuple[Dict[str, Any], Any]:
        attributes: Dict[str, Any] = {}
        if component.attributes.get("class"):
            attributes["class"] = component.attributes["class"]
        if component.attributes.get("id"):
            attributes["id"] = component.attributes["id"]

        if tag == "fusion_title":
            attributes["size"] = self.heading_level(component)
            return attributes, self.text(component)

        if tag == "fusion_button":
            attributes["link"] = self.attribute(component, "url", "#")
            attributes["target"] = self.attribute(component, "target", "_self")
            return attributes, self.text(component)

        if tag == "fusion_imageframe":
            src = escape(str(self.attribute(component, "src", "")), quote=True)
            alt = escape(str(self.attribute(component, "alt", "")), quote=True)
            return attributes, f'<img src="{src}" alt="{alt}" />'

        if tag == "fusion_separator":
            attributes["style_type"] = "none" if component.type == "spacer" else "single solid"
            return attributes, None

        if tag == "fusion_video":
            attributes["video"] = self.attribute(component, "src", "")
            return attributes, None

        return attributes, self.text(component)
