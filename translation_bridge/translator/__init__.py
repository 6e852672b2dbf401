"""Translation pipeline."""

from .cache import TranslationCache
from .qa import QualityChecker
from .translator import Translator

__all__ = ["QualityChecker", "TranslationCache", "Translator"]
