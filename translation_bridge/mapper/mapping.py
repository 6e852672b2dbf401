"""Mapping decision model."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MatchResult:
    """Represents the chosen mapping for one source component."""

    mapping: Dict[str, Any]
    confidence: float
    enhanced: bool = False
    fallback: bool = False
    fallback_suggestions: Optional[Dict[str, Any]] = None
    scores: Dict[str, float] = field(default_factory=dict)

    @property
    def universal_type(self) -> Optional[str]:
        return self.mapping.get("universal_type")

    @property
    def category(self) -> Optional[str]:
        return self.mapping.get("category")

    def attribute_map(self, target_framework: str) -> Dict[str, str]:
        """Source key -> target key translations for ``target_framework``."""
        mappings = self.mapping.get("mappings") or {}
        return dict((mappings.get(target_framework) or {}).get("attribute_map") or {})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mapping": self.mapping,
            "confidence": self.confidence,
            "enhanced": self.enhanced,
            "fallback": self.fallback,
            "fallback_suggestions": self.fallback_suggestions,
            "scores": self.scores,
        }


def build_fallback_suggestions(component_type: str, category: str) -> Dict[str, Any]:
    return {
        "message": f"Low confidence match for {component_type}. Consider manual review.",
        "alternatives": [
            {"type": "container", "reason": "Generic container preserves structure"},
            {"type": category, "reason": "Matches component category"},
        ],
    }


def normalize_candidates(entry: Any) -> List[Dict[str, Any]]:
    """Mapping tables may hold a single record or a list of records."""
    if isinstance(entry, dict):
        return [entry]
    if isinstance(entry, list):
        return [candidate for candidate in entry if isinstance(candidate, dict)]
    return []
