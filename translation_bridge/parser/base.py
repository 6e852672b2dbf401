"""Abstract base class for framework parsers."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from translation_bridge.errors import ParsingError
from translation_bridge.schema.models import Category, Component

logger = logging.getLogger(__name__)

# Native (prefix-stripped) type -> category
CATEGORY_BY_TYPE: Dict[str, str] = {
    # layout
    "section": "layout",
    "container": "layout",
    "row": "layout",
    "row_inner": "layout",
    "column": "layout",
    "column_inner": "layout",
    "col": "layout",
    "column-group": "layout",
    "columns": "layout",
    "group": "layout",
    "div": "layout",
    "div_block": "layout",
    "block": "layout",
    "builder_container": "layout",
    "builder_row": "layout",
    "builder_column": "layout",
    "builder_row_inner": "layout",
    "builder_column_inner": "layout",
    "fullwidth": "layout",
    "inner_wrap": "layout",
    "spacer": "layout",
    "empty_space": "layout",
    "divider": "layout",
    "separator": "layout",
    "separator_element": "layout",
    "hr": "layout",
    # content
    "heading": "content",
    "custom_heading": "content",
    "headline": "content",
    "title": "content",
    "text": "content",
    "text_block": "content",
    "text-editor": "content",
    "rich-text": "content",
    "paragraph": "content",
    "p": "content",
    "blockquote": "content",
    "quote": "content",
    "list": "content",
    "code": "content",
    "code_block": "content",
    "html": "content",
    "column_text": "content",
    "card": "content",
    "blurb": "content",
    "alert": "content",
    "badge": "content",
    "testimonial": "content",
    "cta": "content",
    "content_boxes": "content",
    "icon-box": "content",
    "table": "content",
    "rich_text": "content",
    # interactive
    "button": "interactive",
    "btn": "interactive",
    "buttons": "interactive",
    "link_button": "interactive",
    "accordion": "interactive",
    "toggle": "interactive",
    "tabs": "interactive",
    "tta_tabs": "interactive",
    "tta_accordion": "interactive",
    "modal": "interactive",
    "form": "interactive",
    "contact_form": "interactive",
    "contact-form": "interactive",
    "search": "interactive",
    "slider": "interactive",
    "countdown": "interactive",
    # media
    "image": "media",
    "img": "media",
    "photo": "media",
    "picture": "media",
    "single_image": "media",
    "imageframe": "media",
    "video": "media",
    "youtube": "media",
    "audio": "media",
    "gallery": "media",
    "carousel": "media",
    "icon": "media",
    "fontawesome": "media",
    "map": "media",
    "google-map": "media",
    "embed": "media",
    # navigation
    "nav": "navigation",
    "navbar": "navigation",
    "menu": "navigation",
    "nav-menu": "navigation",
    "navigation": "navigation",
    "breadcrumb": "navigation",
    "breadcrumbs": "navigation",
    "pagination": "navigation",
    "list-group": "navigation",
    "link": "navigation",
    "a": "navigation",
    "link_text": "navigation",
    "link_wrapper": "navigation",
}


def infer_category(component_type: str) -> str:
    return CATEGORY_BY_TYPE.get(component_type, Category.CONTENT.value)


def strip_prefix(native_type: str, prefixes) -> str:
    """Drop the first matching vendor prefix from a native element name."""
    for prefix in prefixes:
        if native_type.startswith(prefix) and len(native_type) > len(prefix):
            return native_type[len(prefix):]
    return native_type


def parse_css_declarations(css: str) -> Dict[str, str]:
    """``"color: red; margin:0"`` -> ``{"color": "red", "margin": "0"}``."""
    styles: Dict[str, str] = {}
    for declaration in (css or "").split(";"):
        if ":" not in declaration:
            continue
        name, value = declaration.split(":", 1)
        name, value = name.strip().lower(), value.strip()
        if name and value:
            styles[name] = value
    return styles


class ComponentParser(ABC):
    """Turns one framework's markup into a forest of components.

    ``parse`` raises :class:`ParsingError` when the content is malformed.
    An empty list means the content was well formed but held nothing.
    """

    framework: str = ""

    # Errors from the underlying decoders that mean "malformed input"
    PARSE_ERRORS = (ValueError, KeyError, TypeError, AttributeError, IndexError)

    def __init__(self):
        self._counter = 0

    @abstractmethod
    def is_valid_content(self, content: Any) -> bool:
        """Cheap format sniff run before parsing."""
        pass

    @abstractmethod
    def _parse(self, content: Any) -> List[Component]:
        """Parse content already accepted by ``is_valid_content``."""
        pass

    def parse(self, content: Any) -> List[Component]:
        """
        Parse framework content into components.

        Args:
            content: Raw markup (string) or decoded structure

        Returns:
            List[Component]: Top-level components, in document order

        Raises:
            ParsingError: If the content is malformed
        """
        if not self.is_valid_content(content):
            raise ParsingError(self.framework, "Content is not valid markup for this framework")

        self._counter = 0
        try:
            components = self._parse(content)
        except ParsingError:
            raise
        except RecursionError as e:
            raise ParsingError(self.framework, "Content is nested too deeply", e) from e
        except self.PARSE_ERRORS as e:
            raise ParsingError(self.framework, "Failed to parse content", e) from e

        logger.debug(f"[{self.framework}] Parsed {len(components)} top-level components")
        return components

    def next_id(self) -> str:
        self._counter += 1
        return f"{self.framework}-{self._counter}"

    def build_component(
        self,
        component_type: str,
        native_type: str,
        component_id: Optional[str] = None,
        attributes: Optional[Dict[str, Any]] = None,
        styles: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
        category: Optional[str] = None,
        **metadata,
    ) -> Component:
        """Create a component stamped with this parser's provenance."""
        component_metadata = {
            "source_framework": self.framework,
            "native_type": native_type,
        }
        component_metadata.update(metadata)

        return Component(
            id=str(component_id) if component_id not in (None, "") else self.next_id(),
            type=component_type,
            category=Category.coerce(category or infer_category(component_type)),
            attributes=attributes or {},
            styles=styles or {},
            content=content if content else None,
            metadata=component_metadata,
        )
