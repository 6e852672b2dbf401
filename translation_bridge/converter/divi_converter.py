"""DIVI shortcode converter."""
from typing import Any, Dict, Tuple

from translation_bridge.converter.base import expand_box, width_to_fraction
from translation_bridge.converter.shortcode_converter import ShortcodeConverter
from translation_bridge.schema.models import Component


def divi_spacing(value: Any) -> str:
    """``10px 20px`` -> ``10px|20px|10px|20px``."""
    box = expand_box(value)
    return "|".join(box.get(side, "") for side in ("top", "right", "bottom", "left"))


class DiviConverter(ShortcodeConverter):
    """Renders ``[et_pb_section][et_pb_row][et_pb_column]`` trees."""

    framework = "divi"

    STRUCTURE = ("et_pb_section", "et_pb_row", "et_pb_column")
    STRUCTURAL_LEVELS = {"container": 0, "section": 0, "row": 1, "column": 2, "col": 2}
    LEAF_LEVEL = 3

    MODULES = {
        "heading": "et_pb_text",
        "text": "et_pb_text",
        "paragraph": "et_pb_text",
        "list": "et_pb_text",
        "blockquote": "et_pb_text",
        "button": "et_pb_button",
        "btn": "et_pb_button",
        "image": "et_pb_image",
        "card": "et_pb_blurb",
        "blurb": "et_pb_blurb",
        "divider": "et_pb_divider",
        "spacer": "et_pb_divider",
        "video": "et_pb_video",
        "gallery": "et_pb_gallery",
        "slider": "et_pb_slider",
        "carousel": "et_pb_slider",
        "accordion": "et_pb_accordion",
        "tabs": "et_pb_tabs",
        "form": "et_pb_contact_form",
        "cta": "et_pb_cta",
        "icon": "et_pb_icon",
        "html": "et_pb_code",
        "code": "et_pb_code",
    }
    DEFAULT_MODULE = "et_pb_text"

    STYLE_ATTRIBUTES = {
        "background-color": "background_color",
        "color": "text_color",
        "text-align": "text_orientation",
        "max-width": "max_width",
        "min-height": "min_height",
        "font-size": "text_font_size",
    }

    def style_attributes(self, component: Component) -> Dict[str, Any]:
        attributes = super().style_attributes(component)
        styles = self.css_styles(component)

        for box in ("margin", "padding"):
            if box in styles:
                attributes[f"custom_{box}"] = divi_spacing(styles[box])
            elif any(f"{box}-{side}" in styles for side in ("top", "right", "bottom", "left")):
                attributes[f"custom_{box}"] = "|".join(
                    str(styles.get(f"{box}-{side}", "")) for side in ("top", "right", "bottom", "left")
                )

        return attributes

    def layout_attributes(self, component: Any, level: int) -> Dict[str, Any]:
        if level != 2:
            return {}
        width = self.attribute(component, "width") if component is not None else None
        return {"type": width_to_fraction(width, full="4_4")}

    def module_parts(self, component: Component, tag: str) -> Tuple[Dict[str, Any], Any]:
        attributes: Dict[str, Any] = {}
        if component.attributes.get("class"):
            attributes["module_class"] = component.attributes["class"]
        if component.attributes.get("id"):
            attributes["module_id"] = component.attributes["id"]

        if tag == "et_pb_button":
            attributes["button_url"] = self.attribute(component, "url", "#")
            attributes["button_text"] = self.text(component)
            if self.attribute(component, "target") == "_blank":
                attributes["url_new_window"] = "on"
            return attributes, None

        if tag == "et_pb_image":
            attributes["src"] = self.attribute(component, "src", "")
            if self.attribute(component, "alt"):
                attributes["alt"] = self.attribute(component, "alt")
            return attributes, None

        if tag == "et_pb_divider":
            attributes["show_divider"] = "off" if component.type == "spacer" else "on"
            if self.attribute(component, "height"):
                attributes["height"] = self.attribute(component, "height")
            return attributes, None

        if tag == "et_pb_video":
            attributes["src"] = self.attribute(component, "src", "")
            return attributes, None

        if tag == "et_pb_blurb":
            if component.attributes.get("title"):
                attributes["title"] = component.attributes["title"]
            if self.attribute(component, "url"):
                attributes["url"] = self.attribute(component, "url")
            return attributes, component.content or ""

        if component.type == "heading":
            level = self.heading_level(component)
            return attributes, f"<h{level}>{self.text(component)}</h{level}>"

        return attributes, self.text(component)
