"""
Column tree nodes.

A column is either a leaf, holding one value per row, or a group, whose
header spans its subcolumns. Widths are computed bottom-up in a single
pass per subtree.
"""

from __future__ import annotations

from collections.abc import Iterator


class ColumnNode:
    """One column or column group of a table.

    Attributes:
        children: Subcolumns, left to right. Empty for a leaf.
        values: One value per row. Only leaves hold values.
        width: Rendered width in characters, refreshed by compute_width()
    """

    __slots__ = ("_title", "children", "values", "width")

    def __init__(self, title: str) -> None:
        self._title = title
        self.children: list[ColumnNode] = []
        self.values: list[str] = []
        self.width = 0

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"ColumnNode({self._title!r}, values={len(self.values)})"
        return f"ColumnNode({self._title!r}, children={self.children!r})"

    @property
    def title(self) -> str:
        """Display label of the column."""
        return self._title

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def depth(self) -> int:
        """Number of header levels in this subtree (a leaf is 1)."""
        if self.is_leaf:
            return 1
        return 1 + max(child.depth for child in self.children)

    @property
    def leaf_count(self) -> int:
        """Number of values this column consumes per row."""
        if self.is_leaf:
            return 1
        return sum(child.leaf_count for child in self.children)

    def iter_leaves(self) -> Iterator[ColumnNode]:
        """Yield leaf columns depth-first, left to right."""
        if self.is_leaf:
            yield self
            return
        for child in self.children:
            yield from child.iter_leaves()

    def add_child(self, title: str) -> ColumnNode:
        """
        Append a new leaf subcolumn.

        Duplicate titles are not checked here; the Table decides the
        duplicate policy.

        Args:
            title: Title of the subcolumn

        Returns:
            The new subcolumn
        """
        child = ColumnNode(title)
        self.children.append(child)
        return child

    def find_child(self, title: str) -> ColumnNode | None:
        """Return the direct subcolumn with exactly this title, if any."""
        for child in self.children:
            if child.title == title:
                return child
        return None

    def consume_values(self, cursor: Iterator[str]) -> None:
        """
        Take this column's share of a flat row from the cursor.

        A leaf takes exactly one value. A group hands the cursor to each
        child in order, so the row is distributed depth-first.

        Args:
            cursor: Iterator over the remaining values of the row
        """
        if self.is_leaf:
            self.values.append(next(cursor))
            return
        for child in self.children:
            child.consume_values(cursor)

    def clear_values(self) -> None:
        """Drop all values in this subtree, keeping the structure."""
        for child in self.children:
            child.clear_values()
        self.values.clear()

    def compute_width(self) -> int:
        """
        Calculate the rendered width of this column.

        A leaf is as wide as its title or its longest value. A group is as
        wide as its children laid side by side with one separator between
        each pair. All direct children of a group get the same width; if
        the group title does not fit over them, every child is widened
        equally until it does.

        Returns:
            The computed width
        """
        self.width = len(self._title)

        if self.is_leaf:
            for value in self.values:
                self.width = max(self.width, len(value))
            return self.width

        count = len(self.children)
        child_width = max(child.compute_width() for child in self.children)

        if self.width > child_width * count:
            child_width = -(-self.width // count)

        # nested groups can only be split into specific widths
        while not all(child.accepts_width(child_width) for child in self.children):
            child_width += 1

        for child in self.children:
            child.assign_width(child_width)

        self.width = child_width * count + count - 1
        return self.width

    def accepts_width(self, width: int) -> bool:
        """
        Check whether this column can be drawn exactly ``width`` wide.

        Only meaningful after compute_width(). A leaf accepts any width at
        least its own; a group needs the width to split evenly between its
        children and their separators.
        """
        if width < self.width:
            return False
        if self.is_leaf:
            return True
        count = len(self.children)
        inner = width - (count - 1)
        if inner % count:
            return False
        return all(child.accepts_width(inner // count) for child in self.children)

    def assign_width(self, width: int) -> None:
        """Set the width of this column, spreading it evenly over subcolumns."""
        self.width = width
        if self.is_leaf:
            return
        count = len(self.children)
        child_width = (width - (count - 1)) // count
        for child in self.children:
            child.assign_width(child_width)
