"""Shared lookup and caching for parser and converter factories."""
import logging
from typing import Any, Callable, Dict, List, Optional

from translation_bridge.errors import UnsupportedFrameworkError
from translation_bridge.schema.frameworks import Framework

logger = logging.getLogger(__name__)


class FrameworkFactory:
    """Creates one memoized instance per framework.

    Built-in implementations are keyed by :class:`Framework`.  Names passed to
    ``register`` go into a separate extension table that is consulted first.
    """

    kind = "component"
    BUILTINS: Dict[Framework, Callable[[], Any]] = {}

    def __init__(self):
        self._instances: Dict[str, Any] = {}
        self._extensions: Dict[str, Any] = {}

    def resolve_name(self, name: str) -> Optional[str]:
        """Canonical name for ``name`` (aliases resolved), or None."""
        normalized = Framework.normalize_name(name)
        if normalized in self._extensions:
            return normalized

        framework = Framework.resolve(normalized)
        if framework is not None and framework in self.BUILTINS:
            return framework.slug
        return None

    def create(self, name: str) -> Any:
        """
        Return the instance for a framework name or alias.

        Raises:
            UnsupportedFrameworkError: If the name is unknown
        """
        normalized = Framework.normalize_name(name)
        if normalized in self._extensions:
            return self._extensions[normalized]

        framework = Framework.resolve(normalized)
        if framework is None or framework not in self.BUILTINS:
            raise UnsupportedFrameworkError(name)

        instance = self._instances.get(framework.slug)
        if instance is None:
            instance = self.BUILTINS[framework]()
            self._instances[framework.slug] = instance
            logger.debug(f"Created {self.kind} for {framework.slug}")

        return instance

    def is_supported(self, name: str) -> bool:
        return self.resolve_name(name) is not None

    def register(self, name: str, instance: Any) -> None:
        """Register a custom implementation under ``name``."""
        normalized = Framework.normalize_name(name)
        if not normalized:
            raise ValueError("Framework name cannot be empty")
        self._extensions[normalized] = instance
        logger.info(f"Registered custom {self.kind} for {normalized}")

    def clear_cache(self) -> None:
        """Drop memoized built-in instances (registered extensions stay)."""
        self._instances.clear()

    def get_supported_frameworks(self) -> List[str]:
        names = [framework.slug for framework in self.BUILTINS]
        names.extend(name for name in self._extensions if name not in names)
        return names
