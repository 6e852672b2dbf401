"""Bootstrap 5 HTML converter."""
from html import escape
from typing import Optional

from translation_bridge.converter.base import width_percent
from translation_bridge.converter.html_converter import INDENT, Element, HtmlConverter
from translation_bridge.schema.models import Component

# universal type -> (tag, classes)
ELEMENTS = {
    "container": ("div", ["container"]),
    "section": ("section", ["py-5"]),
    "row": ("div", ["row"]),
    "text": ("p", []),
    "paragraph": ("p", []),
    "link": ("a", []),
    "list": ("ul", []),
    "divider": ("hr", []),
    "spacer": ("div", ["my-4"]),
    "blockquote": ("blockquote", ["blockquote"]),
    "quote": ("blockquote", ["blockquote"]),
    "nav": ("nav", ["nav"]),
    "navbar": ("nav", ["navbar", "navbar-expand-lg"]),
    "list-group": ("ul", ["list-group"]),
    "form": ("form", []),
    "accordion": ("div", ["accordion"]),
    "carousel": ("div", ["carousel", "slide"]),
    "slider": ("div", ["carousel", "slide"]),
    "modal": ("div", ["modal"]),
    "tabs": ("div", ["tab-content"]),
    "gallery": ("div", ["row", "g-2"]),
    "icon": ("i", []),
    "table": ("table", ["table"]),
    "card": ("div", ["card"]),
    "video": ("div", ["ratio", "ratio-16x9"]),
}


def column_class(width) -> str:
    percent = width_percent(width) if width else None
    if percent is None or percent >= 100:
        return "col"
    span = max(1, min(12, round(percent * 12 / 100)))
    return f"col-md-{span}"


class BootstrapConverter(HtmlConverter):
    """Renders components as Bootstrap 5 markup."""

    framework = "bootstrap"

    def element_for(self, component: Component) -> Element:
        component_type = component.type

        if component_type in ("column", "col"):
            return "div", [column_class(self.attribute(component, "width"))], self.passthrough(component, set())

        if component_type == "heading":
            return f"h{self.heading_level(component)}", [], self.passthrough(component, set())

        if component_type in ("button", "btn"):
            variant = self.attribute(component, "variant", "primary")
            attributes = {"href": self.attribute(component, "url", "#")}
            attributes.update(self.passthrough(component, self.consumed_keys("url")))
            return "a", ["btn", f"btn-{variant}"], attributes

        if component_type in ("image", "img"):
            attributes = {
                "src": self.attribute(component, "src", ""),
                "alt": self.attribute(component, "alt", ""),
            }
            attributes.update(self.passthrough(component, self.consumed_keys("src", "alt")))
            return "img", ["img-fluid"], attributes

        if component_type == "alert":
            variant = self.attribute(component, "variant", "info")
            return "div", ["alert", f"alert-{variant}"], {"role": "alert"}

        if component_type == "badge":
            variant = self.attribute(component, "variant", "secondary")
            return "span", ["badge", f"bg-{variant}"], {}

        if component_type == "link":
            attributes = {"href": self.attribute(component, "url", "#")}
            attributes.update(self.passthrough(component, self.consumed_keys("url")))
            return "a", [], attributes

        if component_type not in ELEMENTS and self.attribute(component, "url"):
            attributes = {"href": self.attribute(component, "url")}
            attributes.update(self.passthrough(component, self.consumed_keys("url")))
            return "a", [], attributes

        tag, classes = ELEMENTS.get(component_type, ("div", []))
        consumed = self.consumed_keys("src") if component_type == "video" else set()
        return tag, list(classes), self.passthrough(component, consumed)

    def wrap_inner(self, component: Component, inner: str, depth: Optional[int]) -> str:
        if component.type == "card":
            if depth is None:
                return f'<div class="card-body">{inner}</div>'
            body_indent = INDENT * (depth + 1)
            return f'{body_indent}<div class="card-body">\n{inner}\n{body_indent}</div>'

        if component.type == "video" and depth is None:
            src = self.attribute(component, "src", "")
            return f'<iframe src="{escape(str(src), quote=True)}" allowfullscreen></iframe>' if src else inner

        if component.type == "list" and depth is None and inner:
            return f"<li>{inner}</li>"

        return inner
