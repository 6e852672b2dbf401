"""Gutenberg block markup converter."""
import json
from html import escape
from typing import Any, Dict, List, Optional, Tuple

from translation_bridge.converter.base import ComponentConverter
from translation_bridge.converter.html_converter import render_attributes, style_attribute
from translation_bridge.schema.models import Component

BLOCKS = {
    "container": "group",
    "section": "group",
    "div": "group",
    "group": "group",
    "row": "columns",
    "columns": "columns",
    "column": "column",
    "col": "column",
    "heading": "heading",
    "text": "paragraph",
    "paragraph": "paragraph",
    "button": "button",
    "btn": "button",
    "buttons": "buttons",
    "image": "image",
    "divider": "separator",
    "separator": "separator",
    "spacer": "spacer",
    "video": "video",
    "list": "list",
    "blockquote": "quote",
    "quote": "quote",
    "html": "html",
    "code": "code",
    "gallery": "gallery",
}

# CSS property -> path inside the block "style" attribute
STYLE_PATHS = {
    "background-color": ("color", "background"),
    "color": ("color", "text"),
    "font-size": ("typography", "fontSize"),
    "font-weight": ("typography", "fontWeight"),
    "line-height": ("typography", "lineHeight"),
    "border-radius": ("border", "radius"),
    "border-width": ("border", "width"),
    "border-color": ("border", "color"),
}

# Attributes rendered into the saved HTML rather than the block comment
HTML_ATTRIBUTES = {"url", "link", "href", "button_url", "src", "alt", "class", "text", "label", "target"}


def serialize_block_attributes(attributes: Dict[str, Any]) -> str:
    """JSON for a block comment; ``--``, ``<`` and ``>`` are escaped."""
    encoded = json.dumps(attributes, ensure_ascii=False, separators=(",", ":"))
    return (
        encoded.replace("--", "\\u002d\\u002d")
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
    )


def block_style(styles: Dict[str, Any]) -> Dict[str, Any]:
    """Inverse of the block ``style`` flattening: CSS -> nested style object."""
    style: Dict[str, Any] = {}
    for name, value in styles.items():
        if name in STYLE_PATHS:
            group, key = STYLE_PATHS[name]
            style.setdefault(group, {})[key] = value
            continue
        for box in ("padding", "margin"):
            if name == box:
                style.setdefault("spacing", {})[box] = value
            elif name.startswith(f"{box}-"):
                spacing = style.setdefault("spacing", {})
                if not isinstance(spacing.get(box), dict):
                    spacing[box] = {}
                spacing[box][name[len(box) + 1:]] = value
    return style


class GutenbergConverter(ComponentConverter):
    """Renders serialized block markup (``<!-- wp:name {attrs} -->``)."""

    framework = "gutenberg"

    def convert(self, components: List[Component]) -> str:
        return "\n\n".join(self.render(component) for component in components)

    def block_name(self, component: Component) -> str:
        name = BLOCKS.get(component.type)
        if name:
            return name
        if "/" in component.type:
            return component.type
        return "group" if component.children else "paragraph"

    def render(self, component: Component, parent_block: Optional[str] = None) -> str:
        name = self.block_name(component)

        if name == "button" and parent_block != "buttons":
            wrapper = Component(id=f"{component.id}-buttons", type="buttons", children=[component])
            return self.render(wrapper)

        attributes, inner = self.block_parts(component, name)
        styles = self.css_styles(component)
        style = block_style(styles)
        if style:
            attributes["style"] = style

        html = self.saved_html(component, name, inner, styles)
        return self.wrap_block(name, attributes, html)

    @staticmethod
    def wrap_block(name: str, attributes: Dict[str, Any], html: Optional[str]) -> str:
        serialized = f" {serialize_block_attributes(attributes)}" if attributes else ""
        if html is None:
            return f"<!-- wp:{name}{serialized} /-->"
        return f"<!-- wp:{name}{serialized} -->\n{html}\n<!-- /wp:{name} -->"

    def block_parts(self, component: Component, name: str) -> Tuple[Dict[str, Any], str]:
        """Block comment attributes and the rendered inner blocks or text."""
        attributes = self.scalar_attributes(component, HTML_ATTRIBUTES | {"level", "width", "height"})
        if component.attributes.get("class"):
            attributes["className"] = component.attributes["class"]

        if name == "heading":
            level = self.heading_level(component)
            if level != 2:
                attributes["level"] = level
        if name == "column" and self.attribute(component, "width"):
            attributes["width"] = str(self.attribute(component, "width"))
        if name == "spacer":
            attributes["height"] = str(self.attribute(component, "height", "32px"))
        if name == "image" and self.attribute(component, "src"):
            attributes["url"] = self.attribute(component, "src")
            if self.attribute(component, "alt"):
                attributes["alt"] = self.attribute(component, "alt")
        if name == "button" and self.attribute(component, "url"):
            attributes["url"] = self.attribute(component, "url")

        if component.children:
            inner = "\n".join(self.render(child, name) for child in component.children)
        else:
            inner = escape(self.text(component), quote=False) if name not in ("html", "code") else self.text(component)

        return attributes, inner

    def saved_html(self, component: Component, name: str, inner: str, styles: Dict[str, Any]) -> Optional[str]:
        """The static HTML a block saves between its delimiters."""
        style = style_attribute(styles)

        if name == "heading":
            level = self.heading_level(component)
            return f'<h{level}{render_attributes({"class": "wp-block-heading", "style": style})}>{inner}</h{level}>'
        if name == "paragraph":
            return f"<p{render_attributes({'style': style})}>{inner}</p>"
        if name == "button":
            link = render_attributes({
                "class": "wp-block-button__link wp-element-button",
                "href": self.attribute(component, "url"),
                "target": self.attribute(component, "target"),
                "style": style,
            })
            return f'<div class="wp-block-button"><a{link}>{inner}</a></div>'
        if name == "image":
            image = render_attributes({"src": self.attribute(component, "src", ""), "alt": self.attribute(component, "alt", "")})
            return f'<figure class="wp-block-image"><img{image}/></figure>'
        if name == "separator":
            return '<hr class="wp-block-separator has-alpha-channel-opacity"/>'
        if name == "spacer":
            height = escape(str(self.attribute(component, "height", "32px")), quote=True)
            return f'<div style="height:{height}" aria-hidden="true" class="wp-block-spacer"></div>'
        if name == "video":
            video = render_attributes({"controls": True, "src": self.attribute(component, "src", "")})
            return f'<figure class="wp-block-video"><video{video}></video></figure>'
        if name == "list":
            items = inner if component.children else (f"<li>{inner}</li>" if inner else "")
            return f"<ul>{items}</ul>"
        if name == "quote":
            body = inner if component.children else f"<p>{inner}</p>"
            return f'<blockquote class="wp-block-quote">{body}</blockquote>'
        if name == "code":
            return f'<pre class="wp-block-code"><code>{escape(inner, quote=False)}</code></pre>'
        if name == "html":
            return inner

        css_class = {"columns": "wp-block-columns", "column": "wp-block-column", "buttons": "wp-block-buttons"}.get(
            name, "wp-block-group"
        )
        wrapper = render_attributes({"class": css_class, "style": style})
        if not component.children and inner:
            inner = self.wrap_block("paragraph", {}, f"<p>{inner}</p>")
        return f"<div{wrapper}>{inner}</div>" if "/" not in name else (inner or None)
