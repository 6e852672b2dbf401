"""Translation Bridge - converts page-builder content between frameworks."""

from translation_bridge.errors import (
    BridgeError,
    ConversionError,
    MappingError,
    ParsingError,
    UnsupportedFrameworkError,
    WarningKind,
)
from translation_bridge.registry import FrameworkRegistry
from translation_bridge.schema import Category, Component, Framework
from translation_bridge.translator import Translator

__version__ = "0.1.0"

__all__ = [
    "BridgeError",
    "Category",
    "Component",
    "ConversionError",
    "Framework",
    "FrameworkRegistry",
    "MappingError",
    "ParsingError",
    "Translator",
    "UnsupportedFrameworkError",
    "WarningKind",
]
