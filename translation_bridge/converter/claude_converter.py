"""Converter to Claude-optimized HTML."""
from typing import List

from translation_bridge.converter.bootstrap_converter import BootstrapConverter
from translation_bridge.converter.html_converter import Element
from translation_bridge.schema.models import Component

DOCUMENTATION_BANNER = """<!--
╔══════════════════════════════════════════════╗
║  CLAUDE AI-OPTIMIZED HTML                    ║
║  Edit regions marked data-claude-editable.   ║
╚══════════════════════════════════════════════╝
-->"""


class ClaudeConverter(BootstrapConverter):
    """Bootstrap markup with every component tagged as an editable region."""

    framework = "claude"

    def convert(self, components: List[Component]) -> str:
        body = super().convert(components)
        return f"{DOCUMENTATION_BANNER}\n{body}" if body else DOCUMENTATION_BANNER

    def element_for(self, component: Component) -> Element:
        tag, classes, attributes = super().element_for(component)
        attributes = dict(attributes)
        attributes["data-claude-editable"] = component.type
        return tag, classes, attributes
