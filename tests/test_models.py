"""Tests for the universal component model and framework enumeration."""
import pytest

from translation_bridge.schema.frameworks import Framework
from translation_bridge.schema.models import Category, Component


class TestComponent:
    """Test Component."""

    def test_defaults(self):
        """Test a bare component gets empty collections."""
        component = Component(id="c1", type="text")

        assert component.category == "content"
        assert component.attributes == {}
        assert component.styles == {}
        assert component.children == []
        assert component.content is None

    def test_add_child_keeps_order(self):
        """Test children are appended in insertion order."""
        parent = Component(id="p", type="row", category="layout")
        for index in range(3):
            parent.add_child(Component(id=f"c{index}", type="text"))

        assert [child.id for child in parent.children] == ["c0", "c1", "c2"]
        assert parent.count() == 4

    def test_id_is_immutable(self):
        """Test reassigning id raises."""
        component = Component(id="c1", type="text")

        with pytest.raises(AttributeError):
            component.id = "c2"

    def test_other_fields_are_mutable(self):
        """Test non-id fields can be replaced."""
        component = Component(id="c1", type="text")
        component.type = "heading"
        component.children = [Component(id="c2", type="text")]

        assert component.type == "heading"
        assert len(component.children) == 1

    def test_has_content(self):
        """Test whitespace-only content does not count."""
        assert Component(id="a", type="text", content="Hello").has_content()
        assert not Component(id="b", type="text", content="   ").has_content()
        assert not Component(id="c", type="text").has_content()

    def test_is_valid(self):
        """Test structural validity checks."""
        assert Component(id="a", type="text").is_valid()
        assert not Component(id="", type="text").is_valid()
        assert not Component(id="a", type="").is_valid()
        assert not Component(id="a", type="text", category="widget").is_valid()

    def test_is_valid_rejects_confidence_out_of_range(self):
        """Test confidence metadata must lie in [0, 1]."""
        component = Component(id="a", type="text", metadata={"transformation_confidence": 1.5})

        assert not component.is_valid()

    def test_walk_is_depth_first(self):
        """Test walk order."""
        root = Component(id="root", type="section", category="layout")
        first = Component(id="first", type="row", category="layout")
        first.add_child(Component(id="leaf", type="text"))
        root.add_child(first)
        root.add_child(Component(id="second", type="text"))

        assert [node.id for node in root.walk()] == ["root", "first", "leaf", "second"]

    def test_get_metadata(self):
        """Test metadata lookup with default."""
        component = Component(id="a", type="text", metadata={"native_type": "p"})

        assert component.get_metadata("native_type") == "p"
        assert component.get_metadata("missing", "x") == "x"

    def test_to_dict_nests_children(self):
        """Test dictionary conversion."""
        parent = Component(id="p", type="row", category="layout")
        parent.add_child(Component(id="c", type="text", content="Hi"))

        data = parent.to_dict()

        assert data["id"] == "p"
        assert data["children"][0]["content"] == "Hi"


class TestCategory:
    """Test Category."""

    def test_coerce(self):
        """Test unknown categories default to content."""
        assert Category.coerce("layout") == "layout"
        assert Category.coerce("unknown") == "content"
        assert Category.coerce(None) == "content"


class TestFramework:
    """Test Framework."""

    def test_names(self):
        """Test all ten frameworks are listed."""
        assert len(Framework.names()) == 10
        assert "beaver-builder" in Framework.names()

    @pytest.mark.parametrize("alias,expected", [
        ("fusion", Framework.AVADA),
        ("VC", Framework.WPBAKERY),
        ("visualcomposer", Framework.WPBAKERY),
        ("Beaver", Framework.BEAVER_BUILDER),
        ("block-editor", Framework.GUTENBERG),
        ("oxygen-builder", Framework.OXYGEN),
        ("ai", Framework.CLAUDE),
        (" Elementor ", Framework.ELEMENTOR),
    ])
    def test_resolve_aliases(self, alias, expected):
        """Test aliases resolve case-insensitively."""
        assert Framework.resolve(alias) is expected

    def test_resolve_unknown(self):
        """Test unknown names resolve to None."""
        assert Framework.resolve("wix") is None
