"""
Translation pipeline: parse, map, validate, convert.

A ``Translator`` owns its result cache and per-call logs.  Parse and
conversion failures abort the call; mapping and validation failures only
drop the affected components.
"""
import logging
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from translation_bridge.config import BridgeConfig, app_config
from translation_bridge.errors import (
    BridgeError,
    ConversionError,
    MappingError,
    UnsupportedFrameworkError,
    WarningKind,
)
from translation_bridge.mapper.engine import MappingEngine
from translation_bridge.registry import FrameworkRegistry
from translation_bridge.schema.models import Component
from translation_bridge.translator.cache import TranslationCache
from translation_bridge.translator.qa import QualityChecker
from translation_bridge.validator.component_validator import ComponentValidator

logger = logging.getLogger(__name__)

PERFORMANCE_MODES = ("speed", "balanced", "quality")

# Converter failures that mean "this tree cannot be rendered"
CONVERSION_ERRORS = (ValueError, KeyError, TypeError, AttributeError, IndexError, RecursionError)


class Translator:
    """Translates page-builder content between frameworks."""

    def __init__(
        self,
        registry: Optional[FrameworkRegistry] = None,
        mapping_engine: Optional[MappingEngine] = None,
        config: Optional[BridgeConfig] = None,
    ):
        self.config = config or app_config
        self.registry = registry or FrameworkRegistry()
        self.mapping_engine = mapping_engine or MappingEngine(
            mappings_dir=self.config.mappings_dir,
            registry_file=self.config.registry_file,
            confidence_threshold=self.config.confidence_threshold,
        )
        self.cache = TranslationCache(max_size=self.config.cache_size)
        self.validator = ComponentValidator()
        self.quality_checker = QualityChecker(self.config.low_confidence_threshold)

        self.performance_mode = self.config.performance_mode
        self.enable_cache = self.config.enable_cache
        self.progress_callback: Optional[Callable[[int, int, Any], None]] = None

        self.last_success = False
        self.stats: Dict[str, Any] = {}
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []
        self._reset_stats()

    def translate(
        self,
        content: Any,
        source_framework: str,
        target_framework: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        """
        Translate content from one framework to another.

        Args:
            content: Source markup or decoded structure
            source_framework: Source framework name or alias
            target_framework: Target framework name or alias
            options: performance_mode, enable_cache, progress_callback

        Returns:
            Optional[str]: Converted output, or None on failure (see ``last_success``)
        """
        start_time = time.time()
        self._reset_stats()
        self._apply_options(options or {})

        frameworks = self._validate_frameworks(source_framework, target_framework)
        if frameworks is None:
            return self._finish(start_time, None)
        source, target = frameworks

        cache_key = None
        if self.enable_cache:
            try:
                cache_key = self.cache.make_key(content, source, target)
            except RecursionError:
                logger.debug("Content too deeply nested to cache")
            cached = self.cache.get(cache_key) if cache_key is not None else None
            if cached is not None:
                self.stats["cache_hit"] = True
                logger.debug(f"Cache hit for {source} -> {target}")
                return self._finish(start_time, cached)

        try:
            components = self._parse_content(content, source)
        except BridgeError as e:
            self._log_error(str(e), {"stage": "parse", "framework": source})
            return self._finish(start_time, None)

        if not components:
            self._log_warning(
                WarningKind.EMPTY_PARSE,
                "No components found in source content",
                {"framework": source},
            )
            return self._finish(start_time, None)

        mapped = self._map_components(components, source, target)
        validated = self._validate_components(mapped)

        try:
            output = self._convert_to_framework(validated, target)
        except ConversionError as e:
            self._log_error(str(e), {"stage": "convert", "framework": target})
            return self._finish(start_time, None)

        self.stats["successful"] = len(validated)

        if cache_key is not None:
            self.cache.set(cache_key, output)

        self._perform_qa_check(components, validated)

        logger.info(
            f"Translated {source} -> {target}: {self.stats['successful']}/"
            f"{self.stats['total_components']} components, "
            f"avg confidence {self.stats['avg_confidence']:.2f}"
        )
        return self._finish(start_time, output)

    def batch_translate(
        self,
        contents: Any,
        source_framework: str,
        target_framework: str,
        options: Optional[Dict[str, Any]] = None,
    ) -> Dict[Any, Dict[str, Any]]:
        """
        Translate several items, one at a time.

        Args:
            contents: Dict of key -> content, or a list (keys are indexes)
            source_framework: Source framework name or alias
            target_framework: Target framework name or alias
            options: Same as ``translate``; ``progress_callback`` receives
                ``(current, total, key)`` before each item, ``current`` from 1

        Returns:
            Dict: key -> {success, output, stats, errors, warnings}
        """
        options = dict(options or {})
        if "progress_callback" in options:
            self.progress_callback = options.pop("progress_callback")

        items = list(contents.items()) if isinstance(contents, dict) else list(enumerate(contents))
        total = len(items)
        results = {}

        for index, (key, content) in enumerate(items):
            if self.progress_callback:
                self.progress_callback(index + 1, total, key)

            output = self.translate(content, source_framework, target_framework, options)
            results[key] = {
                "success": self.last_success,
                "output": output,
                "stats": self.get_stats(),
                "errors": self.get_errors(),
                "warnings": self.get_warnings(),
            }

        succeeded = sum(1 for result in results.values() if result["success"])
        logger.info(f"Batch {source_framework} -> {target_framework}: {succeeded}/{total} succeeded")
        return results

    def can_translate(self, source_framework: str, target_framework: str) -> bool:
        source = self.registry.parsers.resolve_name(source_framework)
        target = self.registry.converters.resolve_name(target_framework)
        return source is not None and target is not None and source != target

    def get_supported_frameworks(self) -> List[str]:
        return self.registry.get_supported_frameworks()

    def get_stats(self) -> Dict[str, Any]:
        return dict(self.stats)

    def get_errors(self) -> List[Dict[str, Any]]:
        return [dict(error) for error in self.errors]

    def get_warnings(self) -> List[Dict[str, Any]]:
        return [dict(warning) for warning in self.warnings]

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.debug("Translation cache cleared")

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def _validate_frameworks(self, source_framework: str, target_framework: str) -> Optional[Tuple[str, str]]:
        source = self.registry.parsers.resolve_name(source_framework)
        if source is None:
            self._log_error(str(UnsupportedFrameworkError(source_framework)), {"role": "source"})
            return None

        target = self.registry.converters.resolve_name(target_framework)
        if target is None:
            self._log_error(str(UnsupportedFrameworkError(target_framework)), {"role": "target"})
            return None

        if source == target:
            self._log_error(
                "Source and target frameworks cannot be the same",
                {"source": source, "target": target},
            )
            return None

        return source, target

    def _parse_content(self, content: Any, framework: str) -> List[Component]:
        parser = self.registry.parsers.create(framework)
        components = parser.parse(content)
        self.stats["total_components"] = len(components)
        logger.debug(f"Parsed {len(components)} components from {framework}")
        return components

    def _map_components(self, components: List[Component], source: str, target: str) -> List[Component]:
        mapped = []
        confidence_scores = []

        for component in components:
            try:
                result = self.mapping_engine.map(component, source, target)
            except Exception as e:
                error = MappingError(component.type, "component skipped", e)
                self._log_error(str(error), {"stage": "map", "component_id": component.id})
                self.stats["failed"] += 1
                continue

            confidence = result.get_metadata("transformation_confidence", 0.0)
            confidence_scores.append(confidence)

            if confidence < self.config.low_confidence_threshold:
                self._log_warning(
                    WarningKind.LOW_CONFIDENCE,
                    f"Low confidence mapping for {component.type}: {confidence:.2f}",
                    {
                        "component_id": component.id,
                        "source_type": component.type,
                        "target_type": result.type,
                        "confidence": confidence,
                    },
                )

            mapped.append(result)

        if confidence_scores:
            self.stats["avg_confidence"] = sum(confidence_scores) / len(confidence_scores)

        return mapped

    def _validate_components(self, components: List[Component]) -> List[Component]:
        valid, invalid, messages = self.validator.validate(components)
        self.stats["failed"] += len(invalid)
        for message in messages:
            self._log_warning(WarningKind.VALIDATION, message)
        return valid

    def _convert_to_framework(self, components: List[Component], framework: str) -> str:
        converter = self.registry.converters.create(framework)
        try:
            output = converter.convert(components)
        except ConversionError:
            raise
        except CONVERSION_ERRORS as e:
            raise ConversionError(framework, "Failed to convert components", e) from e
        logger.debug(f"Converted {len(components)} components to {framework}")
        return output

    def _perform_qa_check(self, source_components: List[Component], mapped_components: List[Component]) -> None:
        issues = self.quality_checker.check(
            source_components, mapped_components, self.stats["avg_confidence"]
        )
        for issue in issues:
            self._log_warning(WarningKind.QA, issue)

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def _apply_options(self, options: Dict[str, Any]) -> None:
        mode = options.get("performance_mode")
        if mode is not None:
            if mode in PERFORMANCE_MODES:
                self.performance_mode = mode
            else:
                logger.warning(f"Unknown performance mode {mode!r}, keeping {self.performance_mode}")

        if "enable_cache" in options:
            self.enable_cache = bool(options["enable_cache"])

        if "progress_callback" in options:
            self.progress_callback = options["progress_callback"]

        self.stats["performance_mode"] = self.performance_mode

    def _finish(self, start_time: float, output: Optional[str]) -> Optional[str]:
        self.stats["processing_time"] = time.time() - start_time
        self.last_success = output is not None
        return output

    def _log_error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.errors.append({"message": message, "context": context or {}, "timestamp": time.time()})
        logger.error(message)

    def _log_warning(self, kind: WarningKind, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.warnings.append({"kind": kind.value, "message": message, "context": context or {}})
        self.stats["warnings"] += 1
        logger.warning(message)

    def _reset_stats(self) -> None:
        self.last_success = False
        self.stats = {
            "total_components": 0,
            "successful": 0,
            "failed": 0,
            "warnings": 0,
            "avg_confidence": 0.0,
            "processing_time": 0.0,
            "cache_hit": False,
            "performance_mode": self.performance_mode,
        }
        self.errors = []
        self.warnings = []
