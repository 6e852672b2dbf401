"""Base parser for builders that store layouts as JSON."""
import json
from abc import abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from translation_bridge.parser.base import ComponentParser
from translation_bridge.schema.models import Component

BOX_SIDES = ("top", "right", "bottom", "left")


def css_dimension(value: Any) -> Optional[str]:
    """
    Render a builder dimension control as CSS.

    ``{"size": 16, "unit": "px"}`` -> ``16px`` and
    ``{"top": "10", "right": "0", ..., "unit": "px"}`` -> ``10px 0px ...``.
    Scalars are returned as strings; empty controls give ``None``.
    """
    if isinstance(value, dict):
        unit = value.get("unit", "")
        if "size" in value:
            size = value.get("size")
            return f"{size}{unit}" if size not in (None, "") else None
        if any(side in value for side in BOX_SIDES):
            sides = [str(value.get(side) or 0) for side in BOX_SIDES]
            if all(side in ("0", "") for side in sides):
                return None
            return " ".join(f"{side}{unit}" if side != "0" else "0" for side in sides)
        return None
    if value in (None, ""):
        return None
    return str(value)


def heading_level(tag: Any) -> Optional[int]:
    """``"h2"`` -> ``2``."""
    tag = str(tag or "").lower()
    if len(tag) == 2 and tag[0] == "h" and tag[1] in "123456":
        return int(tag[1])
    return None


class JsonComponentParser(ComponentParser):
    """Accepts a JSON string or an already decoded structure.

    Subclasses implement ``parse_data`` on the decoded value.
    """

    # Wrapper keys some exports put around the element list
    WRAPPER_KEYS: Iterable[str] = ("content",)

    def is_valid_content(self, content: Any) -> bool:
        if isinstance(content, (dict, list)):
            return True
        if not isinstance(content, str):
            return False
        stripped = content.strip()
        return stripped.startswith("{") or stripped.startswith("[")

    def decode(self, content: Any) -> Any:
        if isinstance(content, str):
            return json.loads(content)
        return content

    def unwrap(self, data: Any) -> Any:
        if isinstance(data, dict):
            for key in self.WRAPPER_KEYS:
                if key in data:
                    return self.decode(data[key])
        return data

    def _parse(self, content: Any) -> List[Component]:
        return self.parse_data(self.unwrap(self.decode(content)))

    @abstractmethod
    def parse_data(self, data: Any) -> List[Component]:
        """Build components from the decoded layout."""
        pass

    @staticmethod
    def require_list(data: Any, what: str) -> List[Dict[str, Any]]:
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of {what}, got {type(data).__name__}")
        for item in data:
            if not isinstance(item, dict):
                raise ValueError(f"Expected {what} to be objects, got {type(item).__name__}")
        return data

    @staticmethod
    def require_reachable(components: List[Component], element_ids: Iterable[str]) -> None:
        """Raise if an element hangs off no root, i.e. sits on a parent cycle."""
        reached = {component.id for root in components for component in root.walk()}
        stranded = sorted(element_id for element_id in element_ids if element_id not in reached)
        if stranded:
            raise ValueError(f"Elements not reachable from a root (parent cycle): {', '.join(stranded)}")
