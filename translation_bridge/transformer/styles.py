"""Style property naming and value normalization per target framework."""
import re
from typing import Any, Dict

from translation_bridge.transformer.registry import is_numeric

SPACING_PROPERTIES = ("margin", "padding", "width", "height", "top", "right", "bottom", "left")

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_kebab_case(property_name: str) -> str:
    """``_backgroundColor`` / ``background_color`` -> ``background-color``."""
    name = property_name.strip().lstrip("_")
    name = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
    name = name.replace("_", "-")
    return re.sub(r"-+", "-", name).lower()


def to_camel_case(property_name: str) -> str:
    parts = [p for p in to_kebab_case(property_name).split("-") if p]
    if not parts:
        return ""
    return parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])


def to_bricks_property(property_name: str) -> str:
    return "_" + to_camel_case(property_name)


def transform_style_property(property_name: str, target_framework: str) -> str:
    """Rename a CSS property to the target framework's convention."""
    if target_framework == "bricks":
        return to_bricks_property(property_name)
    if target_framework == "elementor":
        return to_camel_case(property_name)
    return to_kebab_case(property_name)


def is_spacing_property(property_name: str) -> bool:
    kebab = to_kebab_case(property_name)
    return kebab in SPACING_PROPERTIES or "margin" in kebab or "padding" in kebab


def transform_style_value(property_name: str, value: Any) -> Any:
    """Add a ``px`` unit to bare nonzero numbers on spacing properties."""
    if is_numeric(value) and is_spacing_property(property_name) and float(value) != 0:
        return f"{value}px"
    return value


def transform_styles(styles: Dict[str, Any], target_framework: str) -> Dict[str, Any]:
    transformed = {}
    for property_name, value in styles.items():
        new_name = transform_style_property(property_name, target_framework)
        transformed[new_name] = transform_style_value(property_name, value)
    return transformed
