"""Shared BeautifulSoup walker for HTML-based frameworks."""
import re
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from translation_bridge.parser.base import ComponentParser, parse_css_declarations
from translation_bridge.schema.models import Component

HTML_TAG_PATTERN = re.compile(r"<[a-zA-Z][^>]*>")

# Text-level tags stay inside their parent's content
INLINE_TAGS = (
    "span", "strong", "em", "b", "i", "u", "s", "br", "small", "code",
    "mark", "sub", "sup", "abbr", "cite", "kbd", "label",
)
SKIP_TAGS = ("script", "style", "meta", "link", "head", "title", "noscript")

TAG_TYPES = {
    "h1": "heading",
    "h2": "heading",
    "h3": "heading",
    "h4": "heading",
    "h5": "heading",
    "h6": "heading",
    "p": "text",
    "img": "image",
    "a": "link",
    "ul": "list",
    "ol": "list",
    "hr": "divider",
    "video": "video",
    "iframe": "embed",
    "blockquote": "blockquote",
    "button": "button",
    "form": "form",
    "nav": "nav",
    "section": "section",
    "table": "table",
}

COLUMN_SPAN = re.compile(r"^col-(?:\w+-)?(\d{1,2})$")


def normalize_text(text: str) -> str:
    return " ".join((text or "").replace("\xa0", " ").split())


def column_width(classes: List[str]) -> str:
    """Bootstrap grid span as a percentage, ``100%`` for auto columns."""
    for css_class in classes:
        match = COLUMN_SPAN.match(css_class)
        if match:
            span = min(int(match.group(1)), 12)
            return f"{round(span * 100 / 12, 2):g}%"
    return "100%"


class HtmlComponentParser(ComponentParser):
    """Walks an HTML fragment, one component per block-level element.

    Subclasses decide the component type of each element through
    ``detect_type``; returning ``None`` unwraps the element and lifts its
    children to the parent.
    """

    def is_valid_content(self, content: Any) -> bool:
        return isinstance(content, str) and bool(HTML_TAG_PATTERN.search(content))

    def prepare(self, content: str) -> str:
        return content

    def _parse(self, content: str) -> List[Component]:
        soup = BeautifulSoup(self.prepare(content), "html.parser")

        for unwanted in soup.find_all(list(SKIP_TAGS)):
            unwanted.decompose()

        root = soup.body or soup
        return self.parse_children(root)

    def parse_children(self, parent: Tag) -> List[Component]:
        components: List[Component] = []
        for child in parent.children:
            if not isinstance(child, Tag) or child.name in INLINE_TAGS:
                continue

            component_type = self.detect_type(child)
            if component_type is None:
                components.extend(self.parse_children(child))
                continue

            components.append(self.parse_element(child, component_type))
        return components

    def parse_element(self, element: Tag, component_type: str) -> Component:
        classes = list(element.get("class") or [])

        block_children = [
            child for child in element.children
            if isinstance(child, Tag) and child.name not in INLINE_TAGS
        ]
        content = None if block_children else normalize_text(element.get_text())

        component = self.build_component(
            component_type,
            element.name,
            attributes=self.extract_attributes(element, component_type, classes),
            styles=parse_css_declarations(element.get("style", "")),
            content=content,
            tag_name=element.name,
            classes=" ".join(classes),
        )

        for child in self.parse_children(element):
            component.add_child(child)

        return component

    def detect_type(self, element: Tag) -> Optional[str]:
        return TAG_TYPES.get(element.name, element.name)

    def extract_attributes(self, element: Tag, component_type: str, classes: List[str]) -> Dict[str, Any]:
        """Copy HTML attributes, minus class and style, plus derived ones."""
        attributes: Dict[str, Any] = {}
        for name, value in element.attrs.items():
            if name in ("class", "style"):
                continue
            attributes[name] = " ".join(value) if isinstance(value, list) else value

        if component_type == "heading" and re.match(r"^h[1-6]$", element.name):
            attributes["level"] = int(element.name[1])

        return attributes
