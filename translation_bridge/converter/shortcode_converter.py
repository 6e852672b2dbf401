"""Base converter for shortcode builders."""
import re
from typing import Any, Dict, List, Tuple

from translation_bridge.converter.base import HierarchicalConverter
from translation_bridge.schema.models import Component

ATTRIBUTE_NAME = re.compile(r"^[\w-]+$")


def escape_shortcode_value(value: Any) -> str:
    """Quote-safe, bracket-safe shortcode attribute value."""
    if isinstance(value, bool):
        value = "on" if value else "off"
    return (
        str(value)
        .replace('"', "&quot;")
        .replace("[", "&#91;")
        .replace("]", "&#93;")
    )


def build_shortcode(tag: str, attributes: Dict[str, Any], inner: Any = None) -> str:
    """``[tag a="b"]inner[/tag]``, or ``[tag a="b" /]`` when ``inner`` is None."""
    rendered = "".join(
        f' {name}="{escape_shortcode_value(value)}"'
        for name, value in attributes.items()
        if value is not None and ATTRIBUTE_NAME.match(name)
    )
    if inner is None:
        return f"[{tag}{rendered} /]"
    return f"[{tag}{rendered}]{inner}[/{tag}]"


class ShortcodeConverter(HierarchicalConverter):
    """Shortcode output with the builder's section/row/column nesting enforced.

    ``STRUCTURE`` lists the layout tags from the outermost level inward;
    ``MODULES`` maps universal types to module tags.
    """

    STRUCTURE: Tuple[str, ...] = ()
    MODULES: Dict[str, str] = {}
    DEFAULT_MODULE = ""

    # CSS property -> builder attribute
    STYLE_ATTRIBUTES: Dict[str, str] = {}

    def convert(self, components: List[Component]) -> str:
        return "\n".join(self.render_level(components, 0))

    def render_structural(self, component: Component, level: int) -> str:
        attributes = self.style_attributes(component)
        attributes.update(self.layout_attributes(component, level))
        inner = "\n".join(self.render_level(self.layout_children(component), level + 1))
        return build_shortcode(self.STRUCTURE[level], attributes, inner)

    def render_wrapper(self, components: List[Component], level: int) -> str:
        inner = "\n".join(self.render_level(components, level + 1))
        return build_shortcode(self.STRUCTURE[level], self.layout_attributes(None, level), inner)

    def render_leaf(self, component: Component) -> str:
        tag = self.MODULES.get(component.type, self.DEFAULT_MODULE)
        attributes, inner = self.module_parts(component, tag)

        merged = self.style_attributes(component)
        merged.update(attributes)

        if component.children:
            nested = "".join(self.render_leaf(child) for child in component.children)
            inner = f"{inner or ''}{nested}"

        return build_shortcode(tag, merged, inner)

    def layout_attributes(self, component: Any, level: int) -> Dict[str, Any]:
        """Attributes for a layout shortcode; ``component`` is None for wrappers."""
        return {}

    def module_parts(self, component: Component, tag: str) -> Tuple[Dict[str, Any], Any]:
        """Module attributes and inner content (None renders self-closing)."""
        return {}, self.text(component)

    def style_attributes(self, component: Component) -> Dict[str, Any]:
        attributes: Dict[str, Any] = {}
        for name, value in self.css_styles(component).items():
            if name in self.STYLE_ATTRIBUTES:
                attributes[self.STYLE_ATTRIBUTES[name]] = value
        return attributes
