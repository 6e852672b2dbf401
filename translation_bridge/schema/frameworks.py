"""Supported page-builder frameworks."""
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Framework(Enum):
    """Built-in framework variants, each with its accepted aliases."""

    BOOTSTRAP = ("bootstrap", ())
    DIVI = ("divi", ())
    ELEMENTOR = ("elementor", ())
    AVADA = ("avada", ("fusion",))
    BRICKS = ("bricks", ())
    WPBAKERY = ("wpbakery", ("vc", "visualcomposer"))
    BEAVER_BUILDER = ("beaver-builder", ("beaver", "beaverbuilder"))
    GUTENBERG = ("gutenberg", ("blocks", "block-editor"))
    OXYGEN = ("oxygen", ("oxygen-builder",))
    CLAUDE = ("claude", ("claude-ai", "ai"))

    def __init__(self, slug: str, aliases: Tuple[str, ...]):
        self.slug = slug
        self.aliases = aliases

    @staticmethod
    def normalize_name(name: str) -> str:
        return str(name or "").strip().lower()

    @classmethod
    def resolve(cls, name: str) -> Optional["Framework"]:
        """Resolve a framework name or alias, case-insensitively."""
        normalized = cls.normalize_name(name)
        return _LOOKUP.get(normalized)

    @classmethod
    def names(cls) -> List[str]:
        return [member.slug for member in cls]


_LOOKUP: Dict[str, Framework] = {}
for _member in Framework:
    _LOOKUP[_member.slug] = _member
    for _alias in _member.aliases:
        _LOOKUP[_alias] = _member
