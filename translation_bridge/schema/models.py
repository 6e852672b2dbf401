"""Universal component tree shared by parsers, mapper and converters."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional


class Category(str, Enum):
    """Coarse classification of a component."""

    LAYOUT = "layout"
    CONTENT = "content"
    INTERACTIVE = "interactive"
    MEDIA = "media"
    NAVIGATION = "navigation"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def coerce(cls, value: Optional[str]) -> str:
        """Return a valid category name, defaulting to content."""
        if value in cls.values():
            return value
        return cls.CONTENT.value


@dataclass
class Component:
    """One node of the universal component tree.

    ``id`` is assigned once at parse time and carried through mapping; any
    later reassignment raises ``AttributeError``.
    """

    id: str
    type: str
    category: str = Category.CONTENT.value
    attributes: Dict[str, Any] = field(default_factory=dict)
    styles: Dict[str, Any] = field(default_factory=dict)
    content: Optional[str] = None
    children: List["Component"] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError(f"Component id is immutable (id={self.__dict__['id']!r})")
        super().__setattr__(name, value)

    def add_child(self, child: "Component") -> None:
        """Append a child, keeping insertion order."""
        self.children.append(child)

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def has_content(self) -> bool:
        return isinstance(self.content, str) and bool(self.content.strip())

    def is_valid(self) -> bool:
        """Check structural completeness of this node (children excluded)."""
        if not self.id or not isinstance(self.id, str):
            return False
        if not self.type or not isinstance(self.type, str):
            return False
        if self.category not in Category.values():
            return False
        if not isinstance(self.attributes, dict) or not isinstance(self.styles, dict):
            return False

        confidence = self.metadata.get("transformation_confidence")
        if confidence is not None and not 0.0 <= confidence <= 1.0:
            return False

        return True

    def walk(self) -> Iterator["Component"]:
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def count(self) -> int:
        return sum(1 for _ in self.walk())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": self.type,
            "category": self.category,
            "attributes": dict(self.attributes),
            "styles": dict(self.styles),
            "content": self.content,
            "children": [child.to_dict() for child in self.children],
            "metadata": dict(self.metadata),
        }
