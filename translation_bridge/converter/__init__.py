"""Framework markup converters."""

from .base import ComponentConverter
from .converter_factory import ConverterFactory

__all__ = ["ComponentConverter", "ConverterFactory"]
