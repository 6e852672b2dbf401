"""Exceptions and warning kinds raised or recorded by the translation pipeline.

Parse and conversion failures abort a translation; mapping failures are
recovered per component.  Warnings are never raised: the translator records
them in its warning log tagged with a :class:`WarningKind`.
"""
from enum import Enum
from typing import Optional


class BridgeError(Exception):
    """Base class for all translation bridge errors."""


class UnsupportedFrameworkError(BridgeError, ValueError):
    """Unknown framework name passed to a factory or the translator."""

    def __init__(self, framework: str):
        self.framework = framework
        super().__init__(f"Unsupported framework: {framework}")


class ParsingError(BridgeError):
    """Source content is malformed or failed the format sniff."""

    def __init__(self, framework: str, message: str, cause: Optional[BaseException] = None):
        self.framework = framework
        self.cause = cause
        detail = f"{message} ({cause})" if cause else message
        super().__init__(f"[{framework}] {detail}")


class MappingError(BridgeError):
    """A single component could not be mapped."""

    def __init__(self, component_type: str, message: str, cause: Optional[BaseException] = None):
        self.component_type = component_type
        self.cause = cause
        super().__init__(f"Mapping failed for {component_type!r}: {message}")


class ConversionError(BridgeError):
    """The target converter could not render the component tree."""

    def __init__(self, framework: str, message: str, cause: Optional[BaseException] = None):
        self.framework = framework
        self.cause = cause
        detail = f"{message} ({cause})" if cause else message
        super().__init__(f"[{framework}] {detail}")


class WarningKind(str, Enum):
    """Tags for entries in the translator warning log."""

    LOW_CONFIDENCE = "low_confidence"
    QA = "qa"
    VALIDATION = "validation"
    EMPTY_PARSE = "empty_parse"
