"""Abstract base classes for framework converters."""
import hashlib
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from translation_bridge.schema.models import Component
from translation_bridge.transformer.styles import to_kebab_case

# Attribute spellings accepted for each concept, in lookup order
ATTRIBUTE_ALIASES: Dict[str, Tuple[str, ...]] = {
    "url": ("url", "link", "href", "button_url", "link_url"),
    "src": ("src", "image", "image_url", "img", "photo_src", "url"),
    "alt": ("alt", "alt_text"),
    "target": ("target", "link_target"),
    "level": ("level",),
    "text": ("text", "label", "title", "button_text"),
    "width": ("width",),
    "variant": ("variant",),
}

UNIT_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)([a-z%]*)$")
FRACTIONS = {
    "75%": "3_4", "66.67%": "2_3", "66.66%": "2_3", "50%": "1_2",
    "33.33%": "1_3", "25%": "1_4", "20%": "1_5", "16.67%": "1_6",
}


def stable_id(seed: str, length: int = 8) -> str:
    """Deterministic hex id derived from a component id."""
    return hashlib.md5(seed.encode("utf-8")).hexdigest()[:length]


def split_unit(value: Any) -> Tuple[Optional[str], str]:
    """``"10px"`` -> ``("10", "px")``; non-numeric values give ``(None, "")``."""
    match = UNIT_PATTERN.match(str(value).strip())
    if not match:
        return None, ""
    return match.group(1), match.group(2)


def expand_box(value: Any) -> Dict[str, str]:
    """CSS box shorthand (1 to 4 values) -> top/right/bottom/left."""
    parts = str(value).split()
    if not parts:
        return {}
    if len(parts) == 1:
        parts = parts * 4
    elif len(parts) == 2:
        parts = [parts[0], parts[1], parts[0], parts[1]]
    elif len(parts) == 3:
        parts = [parts[0], parts[1], parts[2], parts[1]]
    return dict(zip(("top", "right", "bottom", "left"), parts[:4]))


def width_percent(value: Any) -> Optional[float]:
    number, unit = split_unit(value)
    if number is None or unit not in ("%", ""):
        return None
    return float(number)


def width_to_fraction(value: Any, separator: str = "_", full: str = "1_1") -> str:
    """``50%`` -> ``1_2``; missing or full widths give ``full``."""
    percent = width_percent(value)
    if percent is None or percent >= 100:
        return full.replace("_", separator)

    fraction = FRACTIONS.get(f"{round(percent, 2):g}%")
    if fraction is None:
        fraction = f"{max(1, min(12, round(percent * 12 / 100)))}_12"
    return fraction.replace("_", separator)


class ComponentConverter(ABC):
    """Renders a component forest in one framework's native format."""

    framework: str = ""

    @abstractmethod
    def convert(self, components: List[Component]) -> str:
        """
        Convert components to the framework's markup.

        Args:
            components: Mapped top-level components

        Returns:
            str: Markup, shortcodes or JSON text
        """
        pass

    def validate(self, component: Component) -> bool:
        """Structural check run by the translator before converting."""
        return component.is_valid()

    @staticmethod
    def attribute(component: Component, name: str, default: Any = None) -> Any:
        for key in ATTRIBUTE_ALIASES.get(name, (name,)):
            value = component.attributes.get(key)
            if value not in (None, ""):
                return value
        return default

    def text(self, component: Component) -> str:
        if component.has_content():
            return component.content
        return str(self.attribute(component, "text", ""))

    def heading_level(self, component: Component, default: int = 2) -> int:
        try:
            level = int(self.attribute(component, "level", default))
        except (TypeError, ValueError):
            return default
        return level if 1 <= level <= 6 else default

    @staticmethod
    def css_styles(component: Component) -> Dict[str, Any]:
        """Styles keyed by kebab-case CSS property, whatever the naming."""
        return {to_kebab_case(name): value for name, value in component.styles.items()}

    @staticmethod
    def consumed_keys(*names: str) -> set:
        keys = set()
        for name in names:
            keys.update(ATTRIBUTE_ALIASES.get(name, (name,)))
        return keys

    @staticmethod
    def scalar_attributes(component: Component, exclude: set) -> Dict[str, Any]:
        """Remaining plain attributes, for formats that carry arbitrary keys."""
        return {
            key: value
            for key, value in component.attributes.items()
            if key not in exclude and isinstance(value, (str, int, float, bool))
        }


class HierarchicalConverter(ComponentConverter):
    """Converter for builders that require a fixed nesting of layout levels.

    ``STRUCTURAL_LEVELS`` maps universal types to their level (0 outermost).
    Components found above their level are wrapped in synthetic parents;
    layout components found below their level are unwrapped.
    """

    STRUCTURAL_LEVELS: Dict[str, int] = {}
    LEAF_LEVEL = 0

    def structural_level(self, component: Component) -> int:
        return self.STRUCTURAL_LEVELS.get(component.type, self.LEAF_LEVEL)

    def render_level(self, components: List[Component], level: int) -> List[Any]:
        rendered: List[Any] = []
        pending: List[Component] = []

        def flush():
            if pending:
                rendered.append(self.render_wrapper(list(pending), level))
                pending.clear()

        for component in components:
            component_level = self.structural_level(component)

            if level >= self.LEAF_LEVEL:
                if component_level < self.LEAF_LEVEL:
                    rendered.extend(self.render_level(self.layout_children(component), level))
                else:
                    rendered.append(self.render_leaf(component))
            elif component_level == level:
                flush()
                rendered.append(self.render_structural(component, level))
            elif component_level < level:
                flush()
                rendered.extend(self.render_level(self.layout_children(component), level))
            else:
                pending.append(component)

        flush()
        return rendered

    @staticmethod
    def layout_children(component: Component) -> List[Component]:
        """Children of a layout node; its own text becomes a text child."""
        if component.children or not component.has_content():
            return component.children
        return [Component(id=f"{component.id}-text", type="text", content=component.content)]

    @abstractmethod
    def render_structural(self, component: Component, level: int) -> Any:
        pass

    @abstractmethod
    def render_wrapper(self, components: List[Component], level: int) -> Any:
        """Synthetic parent at ``level`` around ``components``."""
        pass

    @abstractmethod
    def render_leaf(self, component: Component) -> Any:
        pass
