"""Attribute value and style transformations."""

from .registry import ValueTransformerRegistry
from .styles import transform_styles

__all__ = ["ValueTransformerRegistry", "transform_styles"]
