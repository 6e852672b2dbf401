"""Beaver Builder layout converter (JSON node map)."""
import json
from typing import Any, Dict, List

from translation_bridge.converter.base import HierarchicalConverter, expand_box, stable_id, width_percent
from translation_bridge.schema.models import Component

NODE_TYPES = ("row", "column-group", "column")

MODULE_TYPES = {
    "heading": "heading",
    "text": "rich-text",
    "paragraph": "rich-text",
    "button": "button",
    "btn": "button",
    "image": "photo",
    "divider": "separator",
    "spacer": "separator",
    "video": "video",
    "html": "html",
    "icon": "icon",
    "gallery": "gallery",
    "accordion": "accordion",
    "tabs": "tabs",
    "form": "contact-form",
    "list": "list",
    "card": "callout",
    "cta": "cta",
    "slider": "content-slider",
    "nav": "menu",
}

CONTENT_SETTINGS = {
    "heading": "heading",
    "rich-text": "text",
    "button": "text",
    "html": "html",
    "callout": "text",
    "cta": "text",
}

STYLE_SETTINGS = {
    "background-color": "bg_color",
    "color": "text_color",
    "text-align": "align",
    "font-size": "font_size",
    "border-radius": "border_radius",
}

CONSUMED = {"url", "link", "href", "button_url", "src", "image", "image_url", "target", "level", "width", "text"}


def strip_hash(value: Any) -> Any:
    """Beaver Builder stores hex colors without the leading ``#``."""
    if isinstance(value, str) and value.startswith("#"):
        return value[1:]
    return value


class BeaverBuilderConverter(HierarchicalConverter):
    """Renders ``row`` > ``column-group`` > ``column`` > module node maps."""

    framework = "beaver-builder"

    STRUCTURAL_LEVELS = {"container": 0, "section": 0, "row": 1, "column": 2, "col": 2}
    LEAF_LEVEL = 3

    def convert(self, components: List[Component]) -> str:
        nodes: Dict[str, Dict[str, Any]] = {}
        for position, tree in enumerate(self.render_level(components, 0)):
            self.flatten(tree, None, position, nodes)
        return json.dumps(nodes, indent=2, ensure_ascii=False)

    def flatten(self, tree: Dict[str, Any], parent: Any, position: int, nodes: Dict[str, Dict[str, Any]]) -> None:
        children = tree.pop("_children")
        tree["parent"] = parent
        tree["position"] = position
        nodes[tree["node"]] = tree
        for child_position, child in enumerate(children):
            self.flatten(child, tree["node"], child_position, nodes)

    def render_structural(self, component: Component, level: int) -> Dict[str, Any]:
        settings = self.style_settings(component)
        if level == 2:
            settings["size"] = self.column_size(component)
        return {
            "node": stable_id(component.id, 13),
            "type": NODE_TYPES[level],
            "settings": settings,
            "_children": self.render_level(self.layout_children(component), level + 1),
        }

    def render_wrapper(self, components: List[Component], level: int) -> Dict[str, Any]:
        settings = {"size": 100} if level == 2 else {}
        return {
            "node": stable_id(f"{components[0].id}:wrapper:{level}", 13),
            "type": NODE_TYPES[level],
            "settings": settings,
            "_children": self.render_level(components, level + 1),
        }

    def render_leaf(self, component: Component) -> Dict[str, Any]:
        module_type = MODULE_TYPES.get(component.type, "rich-text")
        settings = {
            key: value for key, value in component.attributes.items() if key not in CONSUMED
        }
        settings["type"] = module_type
        settings.update(self.style_settings(component))

        content_key = CONTENT_SETTINGS.get(module_type)
        text = self.text(component)
        if content_key and text:
            settings[content_key] = text

        if module_type == "heading":
            settings["tag"] = f"h{self.heading_level(component)}"

        url = self.attribute(component, "url")
        if url and module_type != "photo":
            settings["link"] = url
            settings["link_target"] = self.attribute(component, "target", "_self")

        if module_type == "photo":
            settings["photo_source"] = "url"
            settings["photo_url"] = self.attribute(component, "src", "")

        return {
            "node": stable_id(component.id, 13),
            "type": "module",
            "settings": settings,
            "_children": [self.render_leaf(child) for child in component.children],
        }

    def column_size(self, component: Component) -> float:
        width = self.attribute(component, "width")
        percent = width_percent(width) if width else None
        return round(percent, 2) if percent is not None else 100

    @staticmethod
    def style_settings(component: Component) -> Dict[str, Any]:
        settings: Dict[str, Any] = {}
        for name, value in HierarchicalConverter.css_styles(component).items():
            if name in STYLE_SETTINGS:
                settings[STYLE_SETTINGS[name]] = strip_hash(value)
            elif name in ("margin", "padding"):
                for side, side_value in expand_box(value).items():
                    settings[f"{name}_{side}"] = side_value
            elif name.startswith(("margin-", "padding-")):
                settings[name.replace("-", "_")] = value
        return settings
