"""Mapping engine: pick the closest target type and transform the node."""
import logging
from typing import Any, Dict, Optional

from translation_bridge.config import DEFAULT_MAPPINGS_DIR, DEFAULT_REGISTRY_FILE
from translation_bridge.mapper.history import TranslationHistory
from translation_bridge.mapper.loader import load_component_registry, load_mapping_tables
from translation_bridge.mapper.mapping import (
    MatchResult,
    build_fallback_suggestions,
    normalize_candidates,
)
from translation_bridge.mapper.similarity import (
    calculate_attribute_compatibility,
    calculate_category_similarity,
    calculate_type_similarity,
    calculate_visual_similarity,
    semantic_group_for,
    weighted_confidence,
)
from translation_bridge.schema.models import Component
from translation_bridge.transformer.registry import ValueTransformerRegistry
from translation_bridge.transformer.styles import transform_styles

logger = logging.getLogger(__name__)


class MappingEngine:
    """Map components between frameworks using weighted similarity scoring.

    Usage:
    ```python
    engine = MappingEngine()
    mapped = engine.map(component, "bootstrap", "elementor")
    mapped.metadata["transformation_confidence"]  # 0.0 - 1.0
    ```

    The only state mutated by ``map`` is the translation history.
    """

    SIMILARITY_WEIGHTS = {
        "type": 0.40,
        "category": 0.20,
        "attributes": 0.25,
        "visual": 0.15,
    }
    HISTORICAL_WEIGHT = 0.10

    FALLBACK_TYPES = {
        "layout": "container",
        "content": "text",
        "media": "div",
        "interactive": "div",
        "navigation": "div",
    }
    FALLBACK_CONFIDENCE = 0.3

    def __init__(
        self,
        mappings_dir: Optional[str] = DEFAULT_MAPPINGS_DIR,
        registry_file: Optional[str] = DEFAULT_REGISTRY_FILE,
        confidence_threshold: float = 0.85,
        history: Optional[TranslationHistory] = None,
        value_registry: Optional[ValueTransformerRegistry] = None,
        mappings: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        """
        Initialize the engine.

        Args:
            mappings_dir: Directory of ``source-to-target.json`` tables
            registry_file: Optional universal component registry
            confidence_threshold: Below this a match is flagged for review
            history: History store (a fresh in-memory one by default)
            value_registry: Attribute value transformers
            mappings: Preloaded tables; skips reading ``mappings_dir``
        """
        self.confidence_threshold = confidence_threshold
        self.history = history if history is not None else TranslationHistory()
        self.value_registry = value_registry or ValueTransformerRegistry()
        self.component_registry = load_component_registry(registry_file)

        if mappings is not None:
            self.mappings = {key.lower(): table for key, table in mappings.items()}
        else:
            self.mappings = load_mapping_tables(mappings_dir)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def map(self, component: Component, source_framework: str, target_framework: str) -> Component:
        """
        Map a component (and its subtree) to the target framework.

        Args:
            component: Source component
            source_framework: Source framework name
            target_framework: Target framework name

        Returns:
            Component: New component with the same id and mapped children
        """
        source = source_framework.strip().lower()
        target = target_framework.strip().lower()

        match = self.find_best_match(component, source, target)
        transformed = self._transform_component(component, match, source, target)
        self._record_transformation(component, transformed, match, source, target)

        return transformed

    def find_best_match(self, component: Component, source_framework: str, target_framework: str) -> MatchResult:
        """Score every candidate for ``component.type`` and return the best one."""
        table = self.get_mapping(source_framework, target_framework)
        candidates = normalize_candidates(table.get(component.type))

        if not candidates:
            return self._fallback_match(component)

        scored = []
        for candidate in candidates:
            scores = self._score_candidate(component, candidate, source_framework, target_framework)
            confidence = weighted_confidence(scores, self.SIMILARITY_WEIGHTS, self.HISTORICAL_WEIGHT)
            scored.append(MatchResult(mapping=candidate, confidence=confidence, scores=scores))

        # Stable: ties keep table order
        scored.sort(key=lambda match: match.confidence, reverse=True)
        best = scored[0]

        if best.confidence < self.confidence_threshold:
            best.enhanced = True
            best.fallback_suggestions = build_fallback_suggestions(component.type, component.category)

        return best

    def get_mapping(self, source_framework: str, target_framework: str) -> Dict[str, Any]:
        key = f"{source_framework.strip().lower()}-to-{target_framework.strip().lower()}"
        return self.mappings.get(key, {})

    def get_component_definition(self, universal_type: str) -> Optional[Dict[str, Any]]:
        return self.component_registry.get(universal_type)

    def get_history(self) -> Dict[str, Dict[str, Any]]:
        return self.history.snapshot()

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def _score_candidate(
        self,
        component: Component,
        candidate: Dict[str, Any],
        source_framework: str,
        target_framework: str,
    ) -> Dict[str, float]:
        target_type = candidate.get("universal_type", "")
        history_key = self.history.key(source_framework, component.type, target_framework, target_type)

        return {
            "type": calculate_type_similarity(component.type, target_type),
            "category": calculate_category_similarity(component.category, candidate.get("category", "")),
            "attributes": calculate_attribute_compatibility(
                component.attributes, candidate.get("attributes") or {}
            ),
            "visual": calculate_visual_similarity(
                component.type,
                component.category,
                len(component.children),
                bool(component.styles),
            ),
            "historical": self.history.success_rate(history_key),
        }

    def _fallback_match(self, component: Component) -> MatchResult:
        fallback_type = self.FALLBACK_TYPES.get(component.category, "div")
        logger.debug(f"No candidates for {component.type!r}, falling back to {fallback_type!r}")

        return MatchResult(
            mapping={
                "universal_type": fallback_type,
                "category": component.category,
                "fallback": True,
            },
            confidence=self.FALLBACK_CONFIDENCE,
            fallback=True,
        )

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def _transform_component(
        self,
        component: Component,
        match: MatchResult,
        source_framework: str,
        target_framework: str,
    ) -> Component:
        mapping = match.mapping

        transformed = Component(
            id=component.id,
            type=mapping.get("universal_type") or component.type,
            category=mapping.get("category") or component.category,
            content=component.content,
        )
        transformed.attributes = self.transform_attributes(component.attributes, match, target_framework)
        transformed.styles = transform_styles(component.styles, target_framework)

        for child in component.children:
            transformed.add_child(self.map(child, source_framework, target_framework))

        metadata = dict(component.metadata)
        metadata.update({
            "source_framework": source_framework,
            "target_framework": target_framework,
            "original_type": component.type,
            "transformation_confidence": match.confidence,
            "mapping_used": mapping.get("universal_type") or "fallback",
            "fallback": match.fallback,
            "enhanced": match.enhanced,
        })
        if match.enhanced:
            metadata["fallback_suggestions"] = match.fallback_suggestions
        transformed.metadata = metadata

        return transformed

    def transform_attributes(self, attributes: Dict[str, Any], match: MatchResult, target_framework: str) -> Dict[str, Any]:
        """Rename attributes through the candidate's map; unknown keys pass through."""
        attr_map = match.attribute_map(target_framework)
        transformed: Dict[str, Any] = {}

        for key, value in attributes.items():
            target_key = attr_map.get(key) or self._find_semantic_attribute_match(key, attr_map)

            if target_key:
                transformed[target_key] = self.value_registry.normalize(value, target_framework)
            else:
                transformed[key] = value

        return transformed

    @staticmethod
    def _find_semantic_attribute_match(key: str, attr_map: Dict[str, str]) -> Optional[str]:
        group = semantic_group_for(key)
        if not group:
            return None

        for variant in group:
            if variant != key and variant in attr_map:
                return attr_map[variant]

        return None

    def _record_transformation(
        self,
        source: Component,
        transformed: Component,
        match: MatchResult,
        source_framework: str,
        target_framework: str,
    ) -> None:
        key = self.history.key(source_framework, source.type, target_framework, transformed.type)
        self.history.record(
            key,
            match.confidence,
            successful=match.confidence >= self.confidence_threshold,
        )
