"""Transformer registry for attribute values."""
import re
from enum import Enum
from typing import Any, Callable, Dict
from urllib.parse import quote, urlparse


class ValueKind(str, Enum):
    """Detected kind of a raw attribute value."""

    BOOLEAN = "boolean"
    COLOR = "color"
    SIZE = "size"
    URL = "url"
    TEXT = "text"


BOOLEAN_VALUES = ("yes", "no", "true", "false", "on", "off", "1", "0")
TRUTHY_VALUES = ("yes", "true", "on", "1")

COLOR_PATTERN = re.compile(r"^(#[0-9A-Fa-f]{3,8}|rgba?|hsla?)")
SIZE_PATTERN = re.compile(r"^-?\d+(\.\d+)?(px|em|rem|%|vh|vw)$")
NUMBER_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")

# Per-framework boolean encoding: (true, false)
BOOLEAN_FORMATS: Dict[str, tuple] = {
    "divi": ("on", "off"),
    "elementor": ("yes", "no"),
    "avada": ("yes", "no"),
    "bricks": (True, False),
    "bootstrap": ("true", "false"),
}

URL_SAFE_CHARS = ":/?#[]@!$&'()*+,;=%~-._"


def is_boolean_value(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if not isinstance(value, str):
        return False
    return value.strip().lower() in BOOLEAN_VALUES


def is_color_value(value: Any) -> bool:
    return isinstance(value, str) and bool(COLOR_PATTERN.match(value.strip()))


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and bool(NUMBER_PATTERN.match(value.strip()))


def is_size_value(value: Any) -> bool:
    if isinstance(value, (dict, list)):
        return False
    return is_numeric(value) or bool(SIZE_PATTERN.match(str(value).strip()))


def is_url_value(value: Any) -> bool:
    if not isinstance(value, str) or not value or any(c.isspace() for c in value.strip()):
        return False
    parsed = urlparse(value.strip())
    return bool(parsed.scheme) and bool(parsed.netloc)


def classify_value(value: Any) -> ValueKind:
    """Detect the kind of a raw value, in boolean/color/size/url order."""
    if is_boolean_value(value):
        return ValueKind.BOOLEAN
    if is_color_value(value):
        return ValueKind.COLOR
    if is_size_value(value):
        return ValueKind.SIZE
    if is_url_value(value):
        return ValueKind.URL
    return ValueKind.TEXT


class ValueTransformerRegistry:
    """Registry of value transformers keyed by name.

    Each transformer is called as ``transformer(value, framework=...)``.
    ``normalize`` picks the transformer for the detected :class:`ValueKind`.
    """

    KIND_TRANSFORMERS = {
        ValueKind.BOOLEAN: "BOOLEAN",
        ValueKind.COLOR: "COLOR",
        ValueKind.SIZE: "SIZE",
        ValueKind.URL: "URL",
        ValueKind.TEXT: "NONE",
    }

    def __init__(self):
        """Initialize registry."""
        self.transformers: Dict[str, Callable[..., Any]] = {
            "NONE": lambda x, **kw: x,
            "BOOLEAN": self._normalize_boolean,
            # Color and size formatting is left to the target converters
            "COLOR": lambda x, **kw: x,
            "SIZE": lambda x, **kw: x,
            "URL": self._sanitize_url,
        }

    def register(self, name: str, transformer: Callable[..., Any]) -> None:
        """Add or replace a transformer."""
        self.transformers[name] = transformer

    def get(self, name: str) -> Callable[..., Any]:
        """Get transformer by name."""
        return self.transformers.get(name, self.transformers["NONE"])

    def transform(self, value: Any, transformer_name: str, **config) -> Any:
        """Apply transformation."""
        transformer = self.get(transformer_name)
        return transformer(value, **config)

    def normalize(self, value: Any, framework: str) -> Any:
        """Normalize a value for the target framework based on its kind."""
        kind = classify_value(value)
        return self.transform(value, self.KIND_TRANSFORMERS[kind], framework=framework)

    @staticmethod
    def _normalize_boolean(value: Any, framework: str = "", **config) -> Any:
        """Re-encode a boolean-like value with the framework's convention."""
        if isinstance(value, bool):
            flag = value
        else:
            flag = str(value).strip().lower() in TRUTHY_VALUES

        true_value, false_value = BOOLEAN_FORMATS.get(framework, ("true", "false"))
        return true_value if flag else false_value

    @staticmethod
    def _sanitize_url(value: str, **config) -> str:
        """Percent-encode characters that are not safe in a URL."""
        return quote(value.strip(), safe=URL_SAFE_CHARS)
