"""Structural validation of mapped components."""
from typing import Callable, List, Optional, Tuple

from translation_bridge.schema.models import Component


class ComponentValidator:
    """Validates mapped component trees before conversion.

    Invalid top-level components are dropped; invalid descendants are
    pruned from their parent.  Every removal produces a message.
    """

    def __init__(self, predicate: Optional[Callable[[Component], bool]] = None):
        self.predicate = predicate or (lambda component: component.is_valid())

    def validate(self, components: List[Component]) -> Tuple[List[Component], List[Component], List[str]]:
        """
        Validate components.

        Returns:
            Tuple: (kept components, dropped top-level components, messages)
        """
        valid = []
        invalid = []
        messages = []

        for component in components:
            if not self.predicate(component):
                invalid.append(component)
                messages.append(f"Invalid component dropped: {self._describe(component)}")
                continue

            messages.extend(self._prune(component))
            valid.append(component)

        return valid, invalid, messages

    def _prune(self, component: Component) -> List[str]:
        messages = []
        kept = []
        for child in component.children:
            if self.predicate(child):
                messages.extend(self._prune(child))
                kept.append(child)
            else:
                messages.append(
                    f"Invalid child dropped from {component.id}: {self._describe(child)}"
                )
        component.children = kept
        return messages

    @staticmethod
    def _describe(component: Component) -> str:
        return f"{component.type or '<no type>'} (id={component.id or '<no id>'}, category={component.category})"
