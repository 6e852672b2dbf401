"""Nested shortcode tokenizer and the base parser for shortcode builders."""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from translation_bridge.parser.base import ComponentParser, strip_prefix
from translation_bridge.schema.models import Component

SHORTCODE_TOKEN = re.compile(r"\[(/?)([A-Za-z_][\w-]*)((?:\s[^\]]*?)?)\s*(/?)\]")
ATTRIBUTE_PATTERN = re.compile(
    r"""([\w-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"']+))"""
)
FRACTION_PATTERN = re.compile(r"^(\d+)_(\d+)$")


@dataclass
class ShortcodeNode:
    """One shortcode occurrence with its nested shortcodes."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["ShortcodeNode"] = field(default_factory=list)
    text_parts: List[str] = field(default_factory=list)

    @property
    def content(self) -> str:
        return "".join(self.text_parts).strip()


def parse_attributes(text: str) -> Dict[str, str]:
    """Parse ``key="value" key2='v' key3=v`` into a dict."""
    attributes = {}
    for match in ATTRIBUTE_PATTERN.finditer(text or ""):
        name = match.group(1)
        value = next((g for g in match.groups()[1:] if g is not None), "")
        attributes[name] = value
    return attributes


def tokenize_shortcodes(content: str, prefixes: Tuple[str, ...]) -> List[ShortcodeNode]:
    """
    Build the shortcode tree for tags starting with one of ``prefixes``.

    A tag encloses content only when a matching closing tag follows it;
    otherwise it is treated as self-closing.  Unknown tags are left as text.

    Raises:
        ValueError: On a closing tag with no open counterpart
    """
    root = ShortcodeNode(tag="")
    stack = [root]
    position = 0

    for match in SHORTCODE_TOKEN.finditer(content):
        closing, tag, raw_attributes, self_closing = match.groups()
        if not tag.startswith(prefixes):
            continue

        stack[-1].text_parts.append(content[position:match.start()])
        position = match.end()

        if closing:
            for index in range(len(stack) - 1, 0, -1):
                if stack[index].tag == tag:
                    del stack[index:]
                    break
            else:
                raise ValueError(f"Unexpected closing tag [/{tag}]")
            continue

        node = ShortcodeNode(tag=tag, attributes=parse_attributes(raw_attributes))
        stack[-1].children.append(node)

        if not self_closing and f"[/{tag}]" in content[match.end():]:
            stack.append(node)

    stack[-1].text_parts.append(content[position:])
    if len(stack) > 1:
        raise ValueError(f"Unclosed shortcode [{stack[-1].tag}]")

    return root.children


def fraction_width(value: str) -> str:
    """Builder column fractions (``1_2``, ``1/3``) as a percentage."""
    match = FRACTION_PATTERN.match((value or "").replace("/", "_").strip())
    if not match or int(match.group(2)) == 0:
        return "100%"
    return f"{round(int(match.group(1)) * 100 / int(match.group(2)), 2):g}%"


class ShortcodeParser(ComponentParser):
    """Base for shortcode builders (DIVI, Avada, WPBakery)."""

    prefixes: Tuple[str, ...] = ()

    # native attribute -> CSS property
    STYLE_ATTRIBUTES: Dict[str, str] = {}

    def is_valid_content(self, content: Any) -> bool:
        if not isinstance(content, str):
            return False
        return any(f"[{prefix}" in content for prefix in self.prefixes)

    def _parse(self, content: str) -> List[Component]:
        return [self.parse_node(node) for node in tokenize_shortcodes(content, self.prefixes)]

    def parse_node(self, node: ShortcodeNode) -> Component:
        component_type = strip_prefix(node.tag, self.prefixes)
        attributes, styles = self.split_attributes(node.attributes)

        component = self.build_component(
            component_type,
            node.tag,
            attributes=self.extract_attributes(component_type, attributes),
            styles=styles,
            content=node.content if not node.children else None,
        )

        for child in node.children:
            component.add_child(self.parse_node(child))

        return component

    def split_attributes(self, raw: Dict[str, str]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Separate style attributes from the rest."""
        attributes: Dict[str, Any] = {}
        styles: Dict[str, Any] = {}

        for name, value in raw.items():
            if name in self.STYLE_ATTRIBUTES:
                if value != "":
                    styles[self.STYLE_ATTRIBUTES[name]] = self.style_value(name, value)
            else:
                attributes[name] = value

        return attributes, styles

    def style_value(self, name: str, value: str) -> Any:
        return value

    def extract_attributes(self, component_type: str, attributes: Dict[str, Any]) -> Dict[str, Any]:
        return attributes
