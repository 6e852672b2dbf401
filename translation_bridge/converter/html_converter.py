"""Shared HTML rendering for HTML-based frameworks."""
import re
from abc import abstractmethod
from html import escape
from typing import Any, Dict, List, Optional, Tuple

from translation_bridge.converter.base import ComponentConverter
from translation_bridge.schema.models import Component
from translation_bridge.transformer.styles import to_kebab_case

VOID_TAGS = ("img", "hr", "br", "input", "source")
INDENT = "  "
HTML_ATTRIBUTES = ("id", "role", "title", "target", "rel", "lang", "dir", "tabindex")
INVALID_NAME_CHARS = re.compile(r"[^a-z0-9-]+")

# (tag, classes, attributes)
Element = Tuple[str, List[str], Dict[str, Any]]


def render_attributes(attributes: Dict[str, Any]) -> str:
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def data_attribute(key: str) -> Optional[str]:
    """``button_style`` -> ``data-button-style``."""
    name = INVALID_NAME_CHARS.sub("-", to_kebab_case(key)).strip("-")
    return f"data-{name}" if name else None


def style_attribute(styles: Dict[str, Any]) -> Optional[str]:
    if not styles:
        return None
    return "; ".join(f"{name}: {value}" for name, value in styles.items()) + ";"


class HtmlConverter(ComponentConverter):
    """Renders one element per component, children indented inside it.

    Subclasses supply ``element_for``; ``wrap_inner`` lets a component put
    its content inside an extra element (a card body, a ratio box).
    """

    PASSTHROUGH_EXCLUDE = {"level", "width", "variant", "class", "style"}

    def convert(self, components: List[Component]) -> str:
        return "\n".join(self.render(component, 0) for component in components)

    def render(self, component: Component, depth: int) -> str:
        tag, classes, attributes = self.element_for(component)

        extra_class = component.attributes.get("class")
        if extra_class:
            classes = classes + [c for c in str(extra_class).split() if c not in classes]

        html_attributes: Dict[str, Any] = {}
        if classes:
            html_attributes["class"] = " ".join(classes)
        html_attributes.update(attributes)
        html_attributes["style"] = style_attribute(self.css_styles(component))

        indent = INDENT * depth
        opening = f"{indent}<{tag}{render_attributes(html_attributes)}>"
        if tag in VOID_TAGS:
            return opening

        if component.children:
            inner = "\n".join(self.render(child, depth + 1) for child in component.children)
            inner = self.wrap_inner(component, inner, depth)
            return f"{opening}\n{inner}\n{indent}</{tag}>"

        text = self.text(component)
        return f"{opening}{self.wrap_inner(component, text, None)}</{tag}>"

    @abstractmethod
    def element_for(self, component: Component) -> Element:
        pass

    def wrap_inner(self, component: Component, inner: str, depth: Optional[int]) -> str:
        return inner

    def passthrough(self, component: Component, consumed: set) -> Dict[str, Any]:
        """HTML attributes carried over verbatim; other plain keys become ``data-*``."""
        attributes: Dict[str, Any] = {}
        for key, value in self.scalar_attributes(component, consumed | self.PASSTHROUGH_EXCLUDE).items():
            if key in HTML_ATTRIBUTES or key.startswith(("data-", "aria-")):
                attributes[key] = value
                continue
            name = data_attribute(key)
            if name:
                attributes.setdefault(name, value)
        return attributes
