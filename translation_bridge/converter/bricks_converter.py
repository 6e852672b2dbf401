"""Bricks Builder JSON converter."""
import json
from typing import Any, Dict, List, Optional

from translation_bridge.converter.base import ComponentConverter, expand_box, stable_id
from translation_bridge.schema.models import Component
from translation_bridge.transformer.styles import to_camel_case

ELEMENT_NAMES = {
    "section": "section",
    "container": "container",
    "row": "container",
    "column": "block",
    "col": "block",
    "div": "div",
    "block": "block",
    "heading": "heading",
    "text": "text-basic",
    "paragraph": "text-basic",
    "text-basic": "text-basic",
    "rich-text": "text",
    "button": "button",
    "btn": "button",
    "image": "image",
    "video": "video",
    "icon": "icon",
    "divider": "divider",
    "list": "list",
    "html": "code",
    "code": "code",
    "form": "form",
    "nav": "nav-menu",
    "accordion": "accordion",
    "tabs": "tabs",
    "slider": "slider",
    "carousel": "carousel",
    "gallery": "image-gallery",
}

TEXT_ELEMENTS = ("heading", "text-basic", "text", "button", "code")
TYPOGRAPHY_PROPERTIES = ("color", "font-size", "font-weight", "line-height", "text-align", "font-family")
CONSUMED = {"url", "link", "href", "button_url", "src", "image", "image_url", "target", "level", "text", "class", "id"}


def bricks_styles(styles: Dict[str, Any]) -> Dict[str, Any]:
    """Flat CSS -> Bricks underscore controls (``_padding``, ``_typography``...)."""
    settings: Dict[str, Any] = {}

    for name, value in styles.items():
        if name in ("margin", "padding"):
            settings.setdefault(f"_{name}", {}).update(expand_box(value))
        elif name.startswith(("margin-", "padding-")):
            box, side = name.split("-", 1)
            settings.setdefault(f"_{box}", {})[side] = value
        elif name == "background-color":
            settings.setdefault("_background", {})["color"] = {"hex": value}
        elif name in TYPOGRAPHY_PROPERTIES:
            typography = settings.setdefault("_typography", {})
            typography[name] = {"hex": value} if name == "color" else value
        else:
            settings[f"_{to_camel_case(name)}"] = value

    return settings


class BricksConverter(ComponentConverter):
    """Renders the flat Bricks element list linked by ``parent``/``children``."""

    framework = "bricks"

    def convert(self, components: List[Component]) -> str:
        elements: List[Dict[str, Any]] = []
        for component in components:
            self.collect(component, 0, elements)
        return json.dumps(elements, indent=2, ensure_ascii=False)

    def collect(self, component: Component, parent: Any, elements: List[Dict[str, Any]]) -> str:
        element_id = stable_id(component.id, 6)
        element = {
            "id": element_id,
            "name": self.element_name(component),
            "parent": parent,
            "children": [],
            "settings": self.settings(component),
        }
        elements.append(element)

        for child in component.children:
            element["children"].append(self.collect(child, element_id, elements))

        return element_id

    @staticmethod
    def element_name(component: Component) -> str:
        name: Optional[str] = ELEMENT_NAMES.get(component.type)
        if name:
            return name
        return "div" if component.children else "text-basic"

    def settings(self, component: Component) -> Dict[str, Any]:
        settings: Dict[str, Any] = {
            key: value for key, value in component.attributes.items() if key not in CONSUMED
        }
        name = self.element_name(component)

        text = self.text(component)
        if text and name in TEXT_ELEMENTS:
            settings["text"] = text
        elif component.has_content():
            settings["text"] = component.content

        if name == "heading":
            settings["tag"] = f"h{self.heading_level(component)}"

        url = self.attribute(component, "url")
        if url and name != "image":
            settings["link"] = {"type": "external", "url": url}
            if self.attribute(component, "target") == "_blank":
                settings["link"]["newTab"] = True

        if name == "image" and self.attribute(component, "src"):
            settings["image"] = {"url": self.attribute(component, "src")}

        if component.attributes.get("class"):
            settings["_cssClasses"] = component.attributes["class"]
        if component.attributes.get("id"):
            settings["_cssId"] = component.attributes["id"]

        settings.update(bricks_styles(self.css_styles(component)))
        return settings
