"""Beaver Builder layout parser (JSON node map)."""
import re
from typing import Any, Dict, List, Optional, Tuple

from translation_bridge.parser.json_parser import JsonComponentParser, heading_level
from translation_bridge.schema.models import Component

HEX_WITHOUT_HASH = re.compile(r"^[0-9A-Fa-f]{3,8}$")
NODE_TYPES = ("row", "column-group", "column", "module")

STYLE_SETTINGS = {
    "bg_color": "background-color",
    "text_color": "color",
    "color": "color",
    "align": "text-align",
    "font_size": "font-size",
    "border_radius": "border-radius",
    "margin_top": "margin-top",
    "margin_right": "margin-right",
    "margin_bottom": "margin-bottom",
    "margin_left": "margin-left",
    "padding_top": "padding-top",
    "padding_right": "padding-right",
    "padding_bottom": "padding-bottom",
    "padding_left": "padding-left",
}

CONTENT_SETTINGS = {
    "heading": "heading",
    "rich-text": "text",
    "button": "text",
    "html": "html",
    "callout": "text",
    "cta": "text",
}

# Node bookkeeping that is not part of the design
IGNORED_SETTINGS = ("type",)


def css_color(value: str) -> str:
    """Beaver Builder stores hex colors without the leading ``#``."""
    if isinstance(value, str) and HEX_WITHOUT_HASH.match(value):
        return f"#{value}"
    return value


class BeaverBuilderParser(JsonComponentParser):
    """Parser for Beaver Builder node maps.

    Nodes are keyed by node id and linked by ``parent``; siblings are
    ordered by ``position``.  Modules take their type from
    ``settings.type`` (``heading``, ``rich-text``, ``photo``...).
    """

    framework = "beaver-builder"
    WRAPPER_KEYS = ("nodes", "content")

    def parse_data(self, data: Any) -> List[Component]:
        nodes = self.index_nodes(data)
        roots = [node for node in nodes.values() if not node.get("parent") or str(node["parent"]) not in nodes]
        components = [self.parse_node(node, nodes, set()) for node in self.ordered(roots)]
        self.require_reachable(components, nodes)
        return components

    def index_nodes(self, data: Any) -> Dict[str, Dict[str, Any]]:
        items = list(data.values()) if isinstance(data, dict) else data
        nodes = {}
        for node in self.require_list(items, "nodes"):
            node_id = node.get("node")
            if not node_id or node.get("type") not in NODE_TYPES:
                raise ValueError(f"Invalid Beaver Builder node: {node_id!r}")
            nodes[str(node_id)] = node
        return nodes

    @staticmethod
    def ordered(nodes: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return sorted(nodes, key=lambda node: float(node.get("position") or 0))

    def parse_node(self, node: Dict[str, Any], nodes: Dict[str, Dict[str, Any]], ancestors: set) -> Component:
        node_id = str(node["node"])
        if node_id in ancestors:
            raise ValueError(f"Cycle detected at node {node_id}")

        settings = node.get("settings") or {}
        if not isinstance(settings, dict):
            settings = {}

        node_type = node["type"]
        component_type = settings.get("type") if node_type == "module" else node_type
        if not component_type:
            raise ValueError(f"Module {node_id} has no settings.type")

        attributes, styles, content = self.split_settings(component_type, settings)

        component = self.build_component(
            component_type,
            component_type,
            component_id=node_id,
            attributes=attributes,
            styles=styles,
            content=content,
            node_type=node_type,
        )

        children = [child for child in nodes.values() if str(child.get("parent")) == node_id]
        for child in self.ordered(children):
            component.add_child(self.parse_node(child, nodes, ancestors | {node_id}))

        return component

    @staticmethod
    def split_settings(component_type: str, settings: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any], Optional[str]]:
        attributes: Dict[str, Any] = {}
        styles: Dict[str, Any] = {}
        content_key = CONTENT_SETTINGS.get(component_type)
        content = settings.get(content_key) if content_key else None

        for key, value in settings.items():
            if key == content_key or key in IGNORED_SETTINGS:
                continue
            if key in STYLE_SETTINGS:
                if value not in (None, ""):
                    css_name = STYLE_SETTINGS[key]
                    styles[css_name] = css_color(value) if css_name.endswith("color") else value
                continue
            if key == "tag" and heading_level(value):
                attributes["level"] = heading_level(value)
                continue
            if key == "photo_src":
                attributes["src"] = value
                continue
            attributes[key] = value

        if component_type == "column" and "size" in attributes:
            attributes["width"] = f"{attributes.pop('size')}%"

        return attributes, styles, str(content) if content else None
