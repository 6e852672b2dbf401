"""Validation of mapped components."""

from .component_validator import ComponentValidator

__all__ = ["ComponentValidator"]
