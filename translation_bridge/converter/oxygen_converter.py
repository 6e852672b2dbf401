"""Oxygen Builder JSON converter."""
import json
from typing import Any, Dict, List

from translation_bridge.converter.base import ComponentConverter, stable_id
from translation_bridge.schema.models import Component

ELEMENT_NAMES = {
    "container": "ct_section",
    "section": "ct_section",
    "row": "ct_div_block",
    "column": "ct_div_block",
    "col": "ct_div_block",
    "div": "ct_div_block",
    "div_block": "ct_div_block",
    "heading": "ct_headline",
    "headline": "ct_headline",
    "text": "ct_text_block",
    "paragraph": "ct_text_block",
    "text_block": "ct_text_block",
    "button": "ct_link_button",
    "btn": "ct_link_button",
    "link": "ct_link_text",
    "image": "ct_image",
    "video": "ct_video",
    "icon": "ct_fancy_icon",
    "html": "ct_code_block",
    "code": "ct_code_block",
}

TEXT_ELEMENTS = ("ct_headline", "ct_text_block", "ct_link_button", "ct_link_text")


class OxygenConverter(ComponentConverter):
    """Renders the flat Oxygen element list linked by ``ct_parent``.

    Element ids are numbered in document order starting at 1.
    """

    framework = "oxygen"

    def convert(self, components: List[Component]) -> str:
        elements: List[Dict[str, Any]] = []
        for component in components:
            self.collect(component, 0, elements)
        return json.dumps(elements, indent=2, ensure_ascii=False)

    def collect(self, component: Component, parent_id: int, elements: List[Dict[str, Any]]) -> None:
        ct_id = len(elements) + 1
        name = self.element_name(component)

        options: Dict[str, Any] = {
            "ct_id": ct_id,
            "ct_parent": parent_id,
            "selector": f"{name.split('_', 1)[-1]}-{ct_id}-{stable_id(component.id, 4)}",
            "nicename": component.type,
            "original": self.original_options(component, name),
        }

        text = self.text(component)
        if text and (name in TEXT_ELEMENTS or not component.children):
            options["ct_content"] = text
        if component.attributes.get("class"):
            options["classes"] = str(component.attributes["class"]).split()

        elements.append({"id": ct_id, "name": name, "options": options})

        for child in component.children:
            self.collect(child, ct_id, elements)

    @staticmethod
    def element_name(component: Component) -> str:
        name = ELEMENT_NAMES.get(component.type)
        if name:
            return name
        return "ct_div_block" if component.children else "ct_text_block"

    def original_options(self, component: Component, name: str) -> Dict[str, Any]:
        """Design options live under ``original``: CSS plus link and image data."""
        original: Dict[str, Any] = dict(self.css_styles(component))

        if name == "ct_headline":
            original["tag"] = f"h{self.heading_level(component)}"
        if name in ("ct_link_button", "ct_link_text") and self.attribute(component, "url"):
            original["url"] = self.attribute(component, "url")
            if self.attribute(component, "target"):
                original["target"] = self.attribute(component, "target")
        if name == "ct_image":
            original["src"] = self.attribute(component, "src", "")
            if self.attribute(component, "alt"):
                original["alt"] = self.attribute(component, "alt")
        if name == "ct_video" and self.attribute(component, "src"):
            original["src"] = self.attribute(component, "src")
        if component.type == "row":
            original.setdefault("display", "flex")
            original.setdefault("flex-direction", "row")
        if component.attributes.get("id"):
            original["id"] = component.attributes["id"]

        return original
