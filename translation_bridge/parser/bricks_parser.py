"""Bricks Builder JSON parser."""
from typing import Any, Dict, List, Optional, Tuple

from translation_bridge.parser.json_parser import JsonComponentParser, css_dimension, heading_level
from translation_bridge.schema.models import Component
from translation_bridge.transformer.styles import to_kebab_case

ROOT_PARENTS = (0, "0", None, "")
CONTENT_SETTINGS = ("text", "content")


def flatten_bricks_style(key: str, value: Any) -> Dict[str, Any]:
    """
    Expand one underscore-prefixed Bricks control into CSS properties.

    ``_padding: {"top": "10"}`` -> ``{"padding-top": "10"}``,
    ``_background: {"color": {"hex": "#fff"}}`` -> ``{"background-color": "#fff"}``,
    ``_typography: {"font-size": "16px"}`` -> ``{"font-size": "16px"}``.
    """
    name = to_kebab_case(key)

    if not isinstance(value, dict):
        return {name: value}

    if "hex" in value or "rgb" in value:
        return {name: value.get("hex") or value.get("rgb")}

    styles: Dict[str, Any] = {}
    for sub_key, sub_value in value.items():
        if isinstance(sub_value, dict) and ("hex" in sub_value or "rgb" in sub_value):
            sub_value = sub_value.get("hex") or sub_value.get("rgb")
        elif isinstance(sub_value, dict):
            sub_value = css_dimension(sub_value)
        if sub_value in (None, ""):
            continue

        if name == "typography":
            styles[to_kebab_case(sub_key)] = sub_value
        else:
            styles[f"{name}-{to_kebab_case(sub_key)}"] = sub_value
    return styles


class BricksParser(JsonComponentParser):
    """Parser for Bricks flat element lists linked by ``parent``/``children``."""

    framework = "bricks"

    def parse_data(self, data: Any) -> List[Component]:
        elements = self.require_list(data, "elements")
        by_id = {}
        for element in elements:
            if "id" not in element or not element.get("name"):
                raise ValueError("Bricks elements need an id and a name")
            by_id[str(element["id"])] = element

        # A parent that is not in the list is treated as the page root
        roots = [e for e in elements if e.get("parent") in ROOT_PARENTS or str(e.get("parent")) not in by_id]
        components = [self.parse_element(root, by_id, set()) for root in roots]
        self.require_reachable(components, by_id)
        return components

    def parse_element(self, element: Dict[str, Any], by_id: Dict[str, Dict[str, Any]], ancestors: set) -> Component:
        element_id = str(element["id"])
        if element_id in ancestors:
            raise ValueError(f"Cycle detected at element {element_id}")

        name = element["name"]
        settings = element.get("settings") or {}
        if not isinstance(settings, dict):
            settings = {}
        attributes, styles, content = self.split_settings(settings)

        component = self.build_component(
            name,
            name,
            component_id=element_id,
            attributes=attributes,
            styles=styles,
            content=content,
        )

        for child in self.child_elements(element, by_id):
            component.add_child(self.parse_element(child, by_id, ancestors | {element_id}))

        return component

    @staticmethod
    def child_elements(element: Dict[str, Any], by_id: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
        element_id = str(element["id"])
        if element.get("children"):
            return [by_id[str(child_id)] for child_id in element["children"] if str(child_id) in by_id]
        return [e for e in by_id.values() if str(e.get("parent")) == element_id]

    @staticmethod
    def split_settings(settings: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any], Optional[str]]:
        attributes: Dict[str, Any] = {}
        styles: Dict[str, Any] = {}
        content = None

        for key, value in settings.items():
            if key.startswith("_"):
                styles.update(flatten_bricks_style(key, value))
            elif key in CONTENT_SETTINGS and content is None and isinstance(value, str):
                content = value
            elif key == "link" and isinstance(value, dict):
                if value.get("url"):
                    attributes["link"] = value["url"]
                if value.get("newTab"):
                    attributes["target"] = "_blank"
            elif key == "image" and isinstance(value, dict):
                if value.get("url"):
                    attributes["src"] = value["url"]
            elif key == "tag" and heading_level(value):
                attributes["level"] = heading_level(value)
            else:
                attributes[key] = value

        return attributes, styles, content
