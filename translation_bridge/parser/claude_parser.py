"""Parser for Claude-optimized HTML."""
import re
from typing import Any, Dict, List, Optional

from bs4 import Tag

from translation_bridge.parser.html_parser import HtmlComponentParser, column_width

# Boxed documentation banner emitted at the top of generated files
DOCUMENTATION_BANNER = re.compile(r"<!--\s*╔═+╗.*?╚═+╝.*?-->", re.DOTALL)
COLUMN_CLASS = re.compile(r"^col(-\w+)?(-\d+)?$")


class ClaudeParser(HtmlComponentParser):
    """Reads the editable-region HTML produced for AI editing.

    ``data-claude-editable`` names the type directly.  Anything else is
    detected by tag and class; elements that match nothing are unwrapped.
    """

    framework = "claude"

    def prepare(self, content: str) -> str:
        return DOCUMENTATION_BANNER.sub("", content)

    def detect_type(self, element: Tag) -> Optional[str]:
        editable = element.get("data-claude-editable")
        if editable:
            return editable

        tag = element.name
        classes = element.get("class") or []

        if tag == "button" or any(c == "btn" or c.startswith("btn-") for c in classes):
            return "button"
        if re.match(r"^h[1-6]$", tag):
            return "heading"
        if tag == "p":
            return "text"
        if any(c == "container" or c.startswith("container-") for c in classes):
            return "container"
        if "row" in classes:
            return "row"
        if any(COLUMN_CLASS.match(c) for c in classes):
            return "column"
        if "card" in classes:
            return "card"
        if tag == "img":
            return "image"
        if tag == "section":
            return "section"
        if tag == "nav" or "nav" in classes or "navbar" in classes:
            return "nav"
        if tag == "form":
            return "form"

        return None

    def extract_attributes(self, element: Tag, component_type: str, classes: List[str]) -> Dict[str, Any]:
        attributes = super().extract_attributes(element, component_type, classes)
        attributes.pop("data-claude-editable", None)

        if component_type == "column":
            attributes["width"] = column_width(classes)

        return attributes
