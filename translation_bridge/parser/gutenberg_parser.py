"""Gutenberg block markup parser."""
import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from translation_bridge.parser.base import ComponentParser, strip_prefix
from translation_bridge.parser.html_parser import normalize_text
from translation_bridge.schema.models import Component

BLOCK_DELIMITER = re.compile(
    r"<!--\s+(?P<closer>/)?wp:(?P<name>[a-z][a-z0-9_-]*(?:/[a-z][a-z0-9_-]*)?)"
    r"\s+(?P<attrs>\{.*?\}\s+)?(?P<void>/)?-->",
    re.DOTALL,
)

LINK_BLOCKS = ("button", "image", "file", "navigation-link")

# style.* paths -> CSS property
STYLE_PATHS = {
    ("color", "background"): "background-color",
    ("color", "text"): "color",
    ("color", "gradient"): "background",
    ("typography", "fontSize"): "font-size",
    ("typography", "fontWeight"): "font-weight",
    ("typography", "lineHeight"): "line-height",
    ("border", "radius"): "border-radius",
    ("border", "width"): "border-width",
    ("border", "color"): "border-color",
}


@dataclass
class BlockNode:
    name: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List["BlockNode"] = field(default_factory=list)
    html_parts: List[str] = field(default_factory=list)

    @property
    def inner_html(self) -> str:
        return "".join(self.html_parts).strip()


def tokenize_blocks(content: str) -> List[BlockNode]:
    """
    Build the block tree from ``<!-- wp:name {json} -->`` delimiters.

    Raises:
        ValueError: On a closer with no opener, an unclosed block or bad JSON
    """
    root = BlockNode(name="")
    stack = [root]
    position = 0

    for match in BLOCK_DELIMITER.finditer(content):
        stack[-1].html_parts.append(content[position:match.start()])
        position = match.end()
        name = match.group("name")

        if match.group("closer"):
            if len(stack) == 1 or stack[-1].name != name:
                raise ValueError(f"Unexpected block closer /wp:{name}")
            stack.pop()
            continue

        raw_attributes = match.group("attrs")
        attributes = json.loads(raw_attributes) if raw_attributes else {}
        if not isinstance(attributes, dict):
            raise ValueError(f"Block attributes for wp:{name} must be an object")

        node = BlockNode(name=name, attributes=attributes)
        stack[-1].children.append(node)
        if not match.group("void"):
            stack.append(node)

    stack[-1].html_parts.append(content[position:])
    if len(stack) > 1:
        raise ValueError(f"Unclosed block wp:{stack[-1].name}")

    return root.children


def flatten_block_style(style: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a block ``style`` object into flat CSS properties."""
    styles: Dict[str, Any] = {}

    for (group, key), css_property in STYLE_PATHS.items():
        value = (style.get(group) or {}).get(key)
        if value not in (None, "") and not isinstance(value, dict):
            styles[css_property] = value

    spacing = style.get("spacing") or {}
    for box in ("padding", "margin"):
        value = spacing.get(box)
        if isinstance(value, dict):
            for side, side_value in value.items():
                styles[f"{box}-{side}"] = side_value
        elif value:
            styles[box] = value

    return styles


class GutenbergParser(ComponentParser):
    """Parser for serialized block editor content.

    Block names lose their ``core/`` namespace; third-party namespaces are
    kept.  Leaf blocks take their text content from the saved inner HTML.
    """

    framework = "gutenberg"

    def is_valid_content(self, content: Any) -> bool:
        return isinstance(content, str) and "<!-- wp:" in content

    def _parse(self, content: str) -> List[Component]:
        return [self.parse_block(block) for block in tokenize_blocks(content)]

    def parse_block(self, block: BlockNode) -> Component:
        component_type = strip_prefix(block.name, ("core/",))
        attributes = dict(block.attributes)
        styles = flatten_block_style(attributes.pop("style", None) or {})

        content = None
        if not block.children and block.inner_html:
            content = self.extract_inner(component_type, block.inner_html, attributes)

        if component_type == "heading":
            attributes.setdefault("level", 2)

        component = self.build_component(
            component_type,
            block.name,
            attributes=attributes,
            styles=styles,
            content=content,
        )

        for child in block.children:
            component.add_child(self.parse_block(child))

        return component

    @staticmethod
    def extract_inner(component_type: str, html: str, attributes: Dict[str, Any]) -> Optional[str]:
        """Read text plus link and image targets from a block's saved HTML."""
        soup = BeautifulSoup(html, "html.parser")

        image = soup.find("img")
        if image is not None:
            if image.get("src") and "url" not in attributes:
                attributes["url"] = image["src"]
            if image.get("alt") and "alt" not in attributes:
                attributes["alt"] = image["alt"]

        link = soup.find("a") if component_type in LINK_BLOCKS else None
        if link is not None and link.get("href"):
            link_key = "href" if component_type == "image" else "url"
            attributes.setdefault(link_key, link["href"])

        if component_type == "html":
            return html
        return normalize_text(soup.get_text()) or None
