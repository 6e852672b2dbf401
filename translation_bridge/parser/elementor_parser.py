"""Elementor JSON parser."""
from typing import Any, Dict, List, Tuple

from translation_bridge.parser.json_parser import JsonComponentParser, css_dimension, heading_level
from translation_bridge.schema.models import Component

# setting -> CSS property
STYLE_SETTINGS = {
    "background_color": "background-color",
    "title_color": "color",
    "text_color": "color",
    "color": "color",
    "button_text_color": "color",
    "align": "text-align",
    "text_align": "text-align",
    "typography_font_size": "font-size",
    "typography_font_weight": "font-weight",
    "margin": "margin",
    "padding": "padding",
    "_margin": "margin",
    "_padding": "padding",
    "border_radius": "border-radius",
    "min_height": "min-height",
    "space": "height",
}

# widget -> setting holding its text content
CONTENT_SETTINGS = {
    "heading": "title",
    "text-editor": "editor",
    "button": "text",
    "html": "html",
    "alert": "alert_description",
    "testimonial": "testimonial_content",
}


class ElementorParser(JsonComponentParser):
    """Parser for Elementor ``_elementor_data`` element trees.

    Widgets take their ``widgetType`` as type; sections, columns and
    containers their ``elType``.
    """

    framework = "elementor"
    WRAPPER_KEYS = ("content", "elements")

    def parse_data(self, data: Any) -> List[Component]:
        return [self.parse_element(element) for element in self.require_list(data, "elements")]

    def parse_element(self, element: Dict[str, Any]) -> Component:
        el_type = element.get("elType")
        if not el_type:
            raise ValueError(f"Element {element.get('id')!r} has no elType")

        component_type = element.get("widgetType") if el_type == "widget" else el_type
        if not component_type:
            raise ValueError(f"Widget {element.get('id')!r} has no widgetType")

        settings = element.get("settings") or {}
        if not isinstance(settings, dict):
            # Empty settings are exported as []
            settings = {}

        attributes, styles, content = self.split_settings(component_type, settings)

        component = self.build_component(
            component_type,
            component_type,
            component_id=element.get("id"),
            attributes=attributes,
            styles=styles,
            content=content,
            el_type=el_type,
        )

        for child in self.require_list(element.get("elements") or [], "elements"):
            component.add_child(self.parse_element(child))

        return component

    def split_settings(self, component_type: str, settings: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any], Any]:
        attributes: Dict[str, Any] = {}
        styles: Dict[str, Any] = {}
        content_key = CONTENT_SETTINGS.get(component_type)
        content = settings.get(content_key) if content_key else None

        for key, value in settings.items():
            if key == content_key:
                continue

            if key in STYLE_SETTINGS:
                css_value = css_dimension(value)
                if css_value is not None:
                    styles[STYLE_SETTINGS[key]] = css_value
                continue

            if key == "link" and isinstance(value, dict):
                if value.get("url"):
                    attributes["link"] = value["url"]
                if value.get("is_external"):
                    attributes["target"] = "_blank"
                continue

            if key == "image" and isinstance(value, dict):
                if value.get("url"):
                    attributes["src"] = value["url"]
                continue

            if key == "header_size":
                level = heading_level(value)
                if level:
                    attributes["level"] = level
                continue

            attributes[key] = value

        if component_type == "column" and "_column_size" in attributes:
            attributes["width"] = f"{attributes.pop('_column_size')}%"

        return attributes, styles, str(content) if content else None
