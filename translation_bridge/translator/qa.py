"""Post-translation quality checks."""
from typing import Dict, List

from translation_bridge.schema.models import Component


class QualityChecker:
    """Compares parsed and mapped trees and reports likely problems.

    Components are matched by id, which mapping preserves.  The checker
    only reports; it never alters the trees or fails a translation.
    """

    def __init__(self, low_confidence_threshold: float = 0.7):
        self.low_confidence_threshold = low_confidence_threshold

    def check(
        self,
        source_components: List[Component],
        mapped_components: List[Component],
        avg_confidence: float,
    ) -> List[str]:
        """
        Run every check.

        Args:
            source_components: Top-level components as parsed
            mapped_components: Top-level components after mapping and validation
            avg_confidence: Mean mapping confidence of the call

        Returns:
            List[str]: Warning messages (empty when nothing looks wrong)
        """
        warnings = []

        if len(source_components) != len(mapped_components):
            warnings.append(
                f"Component count mismatch: {len(source_components)} parsed, "
                f"{len(mapped_components)} translated"
            )

        if mapped_components and avg_confidence < self.low_confidence_threshold:
            warnings.append(
                f"Low average confidence: {avg_confidence:.2f} - manual review suggested"
            )

        mapped_index = self._index(mapped_components)
        for source in self._walk(source_components):
            mapped = mapped_index.get(source.id)
            if mapped is None:
                continue

            if source.has_content() and not self._has_any_content(mapped):
                warnings.append(f"Potential content loss in {source.type} (id={source.id})")

            source_children = [child.id for child in source.children]
            mapped_children = [child.id for child in mapped.children]
            if source_children != mapped_children:
                warnings.append(
                    f"Children changed for {source.type} (id={source.id}): "
                    f"{len(source_children)} expected, {len(mapped_children)} translated"
                )

        return warnings

    @staticmethod
    def _walk(components: List[Component]):
        for component in components:
            yield from component.walk()

    def _index(self, components: List[Component]) -> Dict[str, Component]:
        return {component.id: component for component in self._walk(components)}

    @staticmethod
    def _has_any_content(component: Component) -> bool:
        return any(node.has_content() for node in component.walk())
