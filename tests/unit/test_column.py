"""Tests for ColumnNode."""

import pytest

from meretable.column import ColumnNode


def make_group(title: str, *children: str) -> ColumnNode:
    node = ColumnNode(title)
    for child in children:
        node.add_child(child)
    return node


class TestStructure:
    """Tests for building column trees."""

    def test_new_column_is_leaf(self) -> None:
        """A fresh column has no children, no values and zero width."""
        node = ColumnNode("Name")
        assert node.title == "Name"
        assert node.is_leaf
        assert node.values == []
        assert node.width == 0
        assert node.depth == 1
        assert node.leaf_count == 1

    def test_title_is_read_only(self) -> None:
        """Title cannot be reassigned."""
        node = ColumnNode("Name")
        with pytest.raises(AttributeError):
            node.title = "Other"  # type: ignore[misc]

    def test_add_child_returns_new_leaf(self) -> None:
        """add_child appends a leaf and returns it."""
        node = ColumnNode("G")
        child = node.add_child("a")
        assert node.children == [child]
        assert child.is_leaf
        assert not node.is_leaf

    def test_add_child_allows_duplicates(self) -> None:
        """Duplicate subcolumn titles are not checked at this level."""
        node = make_group("G", "a", "a")
        assert [c.title for c in node.children] == ["a", "a"]

    def test_find_child(self) -> None:
        """find_child matches titles exactly."""
        node = make_group("G", "a", "b")
        assert node.find_child("b") is node.children[1]
        assert node.find_child("B") is None

    def test_depth_and_leaf_count(self) -> None:
        """Depth counts header levels, leaf_count counts value slots."""
        node = make_group("T", "v")
        inner = node.add_child("U")
        inner.add_child("x")
        inner.add_child("y")
        assert node.depth == 3
        assert node.leaf_count == 3
        assert [leaf.title for leaf in node.iter_leaves()] == ["v", "x", "y"]


class TestValues:
    """Tests for distributing and clearing values."""

    def test_leaf_consumes_one_value(self) -> None:
        """A leaf takes exactly one value from the cursor."""
        node = ColumnNode("A")
        cursor = iter(["1", "2"])
        node.consume_values(cursor)
        assert node.values == ["1"]
        assert next(cursor) == "2"

    def test_group_distributes_depth_first(self) -> None:
        """A group hands the cursor to its children left to right."""
        node = make_group("T", "v")
        inner = node.add_child("U")
        inner.add_child("x")
        inner.add_child("y")

        node.consume_values(iter(["1", "2", "3"]))

        assert node.values == []
        assert node.children[0].values == ["1"]
        assert inner.values == []
        assert [c.values for c in inner.children] == [["2"], ["3"]]

    def test_clear_values_keeps_structure(self) -> None:
        """clear_values empties every leaf but keeps the children."""
        node = make_group("G", "a", "b")
        node.consume_values(iter(["1", "2"]))
        node.clear_values()
        assert [c.title for c in node.children] == ["a", "b"]
        assert all(c.values == [] for c in node.children)


class TestComputeWidth:
    """Tests for the width algorithm."""

    def test_leaf_title_width(self) -> None:
        """A leaf without values is as wide as its title."""
        assert ColumnNode("Title").compute_width() == 5

    def test_leaf_longest_value(self) -> None:
        """A leaf grows to fit its longest value."""
        node = ColumnNode("A")
        node.values.extend(["12", "123456", "1"])
        assert node.compute_width() == 6

    def test_group_adds_separators(self) -> None:
        """Group width is the children's widths plus one separator per gap."""
        node = make_group("G", "a", "b", "c")
        assert node.compute_width() == 5
        assert [c.width for c in node.children] == [1, 1, 1]

    def test_group_equalizes_children(self) -> None:
        """Every child gets the width of the widest sibling."""
        node = make_group("G", "a", "b")
        node.children[0].values.append("long")
        node.children[1].values.append("x")
        assert node.compute_width() == 9
        assert [c.width for c in node.children] == [4, 4]

    def test_wide_title_widens_children(self) -> None:
        """A title wider than its children widens them equally, rounding up."""
        node = make_group("Group", "a", "b")
        assert node.compute_width() == 7
        assert [c.width for c in node.children] == [3, 3]

    def test_title_exactly_fits(self) -> None:
        """A title equal to the summed child widths leaves them unchanged."""
        node = make_group("GG", "a", "b")
        assert node.compute_width() == 3
        assert [c.width for c in node.children] == [1, 1]

    def test_nested_group_splits_evenly(self) -> None:
        """A nested group widened by its parent spreads the width to its leaves."""
        node = ColumnNode("G")
        inner = node.add_child("U")
        inner.add_child("x")
        inner.add_child("y")
        wide = node.add_child("w")
        wide.values.append("hello")
        inner.children[0].values.append("1")
        inner.children[1].values.append("2")

        assert node.compute_width() == 11
        assert inner.width == wide.width == 5
        assert [c.width for c in inner.children] == [2, 2]

    def test_nested_group_rounds_up_to_splittable_width(self) -> None:
        """Siblings are widened until the nested group can split exactly."""
        node = ColumnNode("G")
        inner = node.add_child("U")
        inner.add_child("x")
        inner.add_child("y")
        wide = node.add_child("w")
        wide.values.append("abcd")

        node.compute_width()

        # two subcolumns of width c take 2c + 1, so 4 is not possible
        assert inner.width == wide.width == 5
        assert sum(c.width for c in inner.children) + 1 == inner.width

    def test_recompute_after_values_shrink(self) -> None:
        """Widths are recomputed from scratch on every call."""
        node = make_group("G", "a", "b")
        node.children[0].values.append("long")
        node.compute_width()
        node.clear_values()
        assert node.compute_width() == 3
