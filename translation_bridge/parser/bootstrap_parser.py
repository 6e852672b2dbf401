"""Bootstrap HTML parser."""
from typing import Any, Dict, List, Optional

from bs4 import Tag

from translation_bridge.parser.html_parser import HtmlComponentParser, column_width, TAG_TYPES

# Checked in order; "navbar" must win over "nav"
CLASS_TYPES = (
    "navbar",
    "list-group",
    "carousel",
    "accordion",
    "modal",
    "card",
    "alert",
    "badge",
    "btn",
    "nav",
    "row",
)


class BootstrapParser(HtmlComponentParser):
    """Parser for Bootstrap 5 markup.

    Type comes from the Bootstrap component class on the element, else from
    the tag name (``h1``-``h6`` become ``heading``, ``p`` becomes ``text``).
    """

    framework = "bootstrap"

    def detect_type(self, element: Tag) -> Optional[str]:
        classes = element.get("class") or []

        for css_class in CLASS_TYPES:
            if css_class in classes:
                return css_class

        if any(c == "container" or c.startswith("container-") for c in classes):
            return "container"
        if any(c == "col" or c.startswith("col-") for c in classes):
            return "col"

        return TAG_TYPES.get(element.name, element.name)

    def extract_attributes(self, element: Tag, component_type: str, classes: List[str]) -> Dict[str, Any]:
        attributes = super().extract_attributes(element, component_type, classes)

        if component_type == "col":
            attributes["width"] = column_width(classes)

        if component_type in ("btn", "alert", "badge"):
            variant = self._variant(classes, component_type)
            if variant:
                attributes["variant"] = variant

        return attributes

    @staticmethod
    def _variant(classes: List[str], component_type: str) -> Optional[str]:
        """``btn-primary`` -> ``primary`` (size modifiers ignored)."""
        prefix = f"{component_type}-"
        for css_class in classes:
            if css_class.startswith(prefix):
                variant = css_class[len(prefix):]
                if variant not in ("sm", "lg", "block", "dismissible", "group"):
                    return variant
        return None
