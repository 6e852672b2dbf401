"""Component type mapping between frameworks."""

from .engine import MappingEngine
from .history import TranslationHistory
from .mapping import MatchResult

__all__ = ["MappingEngine", "MatchResult", "TranslationHistory"]
