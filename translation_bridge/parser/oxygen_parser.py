"""Oxygen Builder JSON parser."""
from typing import Any, Dict, List, Optional, Tuple

from translation_bridge.parser.base import strip_prefix
from translation_bridge.parser.json_parser import JsonComponentParser, heading_level
from translation_bridge.schema.models import Component

PREFIXES = ("ct_", "oxy_")
ROOT_PARENTS = (0, "0", None, "")

# option -> attribute
ATTRIBUTE_OPTIONS = {
    "url": "href",
    "target": "target",
    "src": "src",
    "alt": "alt",
    "selector": "oxygen-selector",
    "id": "id",
}

CONTENT_OPTIONS = ("ct_content", "headline_text", "text", "code")


class OxygenParser(JsonComponentParser):
    """Parser for Oxygen element lists.

    Accepts either the flat ``[{id, name, options: {ct_id, ct_parent}}]``
    export or the nested ``{"children": [...]}`` shortcode tree.
    """

    framework = "oxygen"

    def parse_data(self, data: Any) -> List[Component]:
        if isinstance(data, dict) and "children" in data:
            return [self.parse_tree(element) for element in self.require_list(data["children"], "elements")]

        elements = self.require_list(data, "elements")
        for element in elements:
            if not element.get("name"):
                raise ValueError("Oxygen elements need a name")

        known_ids = {self.element_id(e) for e in elements} - {None}
        # A parent that is not in the list is treated as the page root
        roots = [e for e in elements if self.parent_of(e) in ROOT_PARENTS or str(self.parent_of(e)) not in known_ids]
        components = [self.parse_flat(root, elements, set()) for root in roots]
        self.require_reachable(components, known_ids)
        return components

    @staticmethod
    def element_id(element: Dict[str, Any]) -> Optional[str]:
        options = element.get("options") or {}
        ct_id = options.get("ct_id", element.get("id"))
        return str(ct_id) if ct_id is not None else None

    @staticmethod
    def parent_of(element: Dict[str, Any]) -> Any:
        return (element.get("options") or {}).get("ct_parent", 0)

    def parse_flat(self, element: Dict[str, Any], elements: List[Dict[str, Any]], ancestors: set) -> Component:
        component = self.build_element(element)
        if component.id in ancestors:
            raise ValueError(f"Cycle detected at element {component.id}")

        for child in elements:
            if str(self.parent_of(child)) == component.id:
                component.add_child(self.parse_flat(child, elements, ancestors | {component.id}))
        return component

    def parse_tree(self, element: Dict[str, Any]) -> Component:
        if not element.get("name"):
            raise ValueError("Oxygen elements need a name")

        component = self.build_element(element)
        for child in self.require_list(element.get("children") or [], "elements"):
            component.add_child(self.parse_tree(child))
        return component

    def build_element(self, element: Dict[str, Any]) -> Component:
        name = element["name"]
        component_type = strip_prefix(name, PREFIXES)
        options = element.get("options") or {}
        attributes, styles, content = self.split_options(options)

        return self.build_component(
            component_type,
            name,
            component_id=self.element_id(element),
            attributes=attributes,
            styles=styles,
            content=content,
        )

    @staticmethod
    def split_options(options: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any], Optional[str]]:
        attributes: Dict[str, Any] = {}
        styles: Dict[str, Any] = {}

        original = options.get("original") or {}
        if isinstance(original, dict):
            for name, value in original.items():
                if value in (None, ""):
                    continue
                if name in ATTRIBUTE_OPTIONS:
                    attributes[ATTRIBUTE_OPTIONS[name]] = value
                elif name == "tag":
                    level = heading_level(value)
                    if level:
                        attributes["level"] = level
                    else:
                        attributes["tag"] = value
                else:
                    styles[name] = value

        for name, target in ATTRIBUTE_OPTIONS.items():
            if options.get(name):
                attributes[target] = options[name]

        classes = options.get("classes")
        if classes:
            attributes["class"] = " ".join(classes) if isinstance(classes, list) else classes

        content = next((options[key] for key in CONTENT_OPTIONS if options.get(key)), None)
        return attributes, styles, str(content) if content else None
