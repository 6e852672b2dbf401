"""Elementor JSON converter."""
import json
from typing import Any, Dict, List

from translation_bridge.converter.base import HierarchicalConverter, expand_box, split_unit, stable_id, width_percent
from translation_bridge.schema.models import Component

WIDGET_TYPES = {
    "heading": "heading",
    "text": "text-editor",
    "paragraph": "text-editor",
    "image": "image",
    "button": "button",
    "btn": "button",
    "divider": "divider",
    "spacer": "spacer",
    "map": "google_maps",
    "icon": "icon",
    "card": "icon-box",
    "blurb": "icon-box",
    "slider": "image-carousel",
    "carousel": "image-carousel",
    "gallery": "image-gallery",
    "list": "icon-list",
    "counter": "counter",
    "testimonial": "testimonial",
    "tabs": "tabs",
    "accordion": "accordion",
    "toggle": "toggle",
    "alert": "alert",
    "audio": "audio",
    "video": "video",
    "form": "form",
    "nav": "nav-menu",
    "cta": "call-to-action",
    "blockquote": "blockquote",
    "html": "html",
}

CONTENT_SETTINGS = {
    "heading": "title",
    "text-editor": "editor",
    "button": "text",
    "html": "html",
    "alert": "alert_description",
    "testimonial": "testimonial_content",
    "icon-box": "description_text",
}

COLOR_SETTINGS = {
    "heading": "title_color",
    "button": "button_text_color",
}

# Attributes consumed into dedicated settings
CONSUMED = {"url", "link", "href", "button_url", "src", "image", "image_url", "target", "level", "width", "class", "id"}


def dimension(value: Any) -> Dict[str, Any]:
    number, unit = split_unit(value)
    if number is None:
        return {"unit": "px", "size": value}
    return {"unit": unit or "px", "size": float(number) if "." in number else int(number)}


def box_dimension(value: Any) -> Dict[str, Any]:
    box = expand_box(value)
    unit = "px"
    sides = {}
    for side, side_value in box.items():
        number, side_unit = split_unit(side_value)
        sides[side] = number if number is not None else str(side_value)
        unit = side_unit or unit
    sides["unit"] = unit
    sides["isLinked"] = len(set(box.values())) == 1
    return sides


class ElementorConverter(HierarchicalConverter):
    """Renders ``section`` > ``column`` > ``widget`` element trees as JSON."""

    framework = "elementor"

    STRUCTURAL_LEVELS = {"container": 0, "section": 0, "row": 0, "column": 1, "col": 1}
    LEAF_LEVEL = 2

    def convert(self, components: List[Component]) -> str:
        return json.dumps(self.render_level(components, 0), indent=2, ensure_ascii=False)

    def render_structural(self, component: Component, level: int) -> Dict[str, Any]:
        el_type = "section" if level == 0 else "column"
        settings = self.style_settings(component, el_type)
        settings.update(self.extra_settings(component))

        if el_type == "column":
            percent = width_percent(self.attribute(component, "width")) if self.attribute(component, "width") else None
            settings["_column_size"] = int(round(percent)) if percent is not None else 100

        return {
            "id": stable_id(component.id, 7),
            "elType": el_type,
            "isInner": False,
            "settings": settings,
            "elements": self.render_level(self.layout_children(component), level + 1),
        }

    def render_wrapper(self, components: List[Component], level: int) -> Dict[str, Any]:
        seed = f"{components[0].id}:wrapper:{level}"
        el_type = "section" if level == 0 else "column"
        settings = {"_column_size": 100} if el_type == "column" else {}
        return {
            "id": stable_id(seed, 7),
            "elType": el_type,
            "isInner": False,
            "settings": settings,
            "elements": self.render_level(components, level + 1),
        }

    def render_leaf(self, component: Component) -> Dict[str, Any]:
        widget_type = WIDGET_TYPES.get(component.type)
        if widget_type is None:
            widget_type = component.type if component.type in WIDGET_TYPES.values() else "text-editor"

        settings = self.style_settings(component, widget_type)
        settings.update(self.extra_settings(component))

        content_key = CONTENT_SETTINGS.get(widget_type)
        text = self.text(component)
        if content_key and text:
            settings[content_key] = text

        if widget_type == "heading":
            settings["header_size"] = f"h{self.heading_level(component)}"

        url = self.attribute(component, "url")
        if url and widget_type != "image":
            settings["link"] = {
                "url": url,
                "is_external": "on" if self.attribute(component, "target") == "_blank" else "",
                "nofollow": "",
            }

        src = self.attribute(component, "src")
        if widget_type == "image" and src:
            settings["image"] = {"url": src, "id": ""}

        return {
            "id": stable_id(component.id, 7),
            "elType": "widget",
            "widgetType": widget_type,
            "settings": settings,
            "elements": [self.render_leaf(child) for child in component.children],
        }

    def extra_settings(self, component: Component) -> Dict[str, Any]:
        settings = {
            key: value
            for key, value in component.attributes.items()
            if key not in CONSUMED and key not in ("text", "label", "title", "button_text")
        }
        if component.attributes.get("class"):
            settings["_css_classes"] = component.attributes["class"]
        if component.attributes.get("id"):
            settings["_element_id"] = component.attributes["id"]
        return settings

    def style_settings(self, component: Component, element_type: str) -> Dict[str, Any]:
        settings: Dict[str, Any] = {}
        is_widget = element_type not in ("section", "column")

        for name, value in self.css_styles(component).items():
            if name == "background-color":
                settings["background_background"] = "classic"
                settings["background_color"] = value
            elif name == "color":
                settings[COLOR_SETTINGS.get(element_type, "text_color")] = value
            elif name == "text-align":
                settings["align"] = value
            elif name in ("font-size", "font-weight"):
                settings["typography_typography"] = "custom"
                key = f"typography_{name.replace('-', '_')}"
                settings[key] = dimension(value) if name == "font-size" else value
            elif name in ("margin", "padding"):
                settings[f"_{name}" if is_widget else name] = box_dimension(value)
            elif name == "border-radius":
                settings["border_radius"] = box_dimension(value)
            elif name in ("min-height", "height"):
                settings["min_height" if name == "min-height" else "height"] = dimension(value)
            else:
                settings[name.replace("-", "_")] = value

        return settings
