"""Framework markup parsers."""

from .base import ComponentParser
from .parser_factory import ParserFactory

__all__ = ["ComponentParser", "ParserFactory"]
