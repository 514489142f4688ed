"""
Table builder with nested column headers.

Example:
    from meretable import Table

    table = Table(["Name"])
    table.add_subcolumn("Score", "Math").add_subcolumn("Score", "Art")
    table.add_values("alice", "90", "75")
    print(table)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from .column import ColumnNode
from .exceptions import ArgumentCountMismatch, InvalidStructuralEdit
from .render import GridRenderer, RenderOptions

logger = logging.getLogger(__name__)


class Table:
    """
    Fixed-width text table whose columns may be split into subcolumns.

    Columns are added first, then rows are appended as flat sequences of
    strings, one value per leaf column in left-to-right order. Every
    mutating method returns the table so calls can be chained.

    Column names are deduplicated by exact match at each level: adding a
    column or subcolumn that already exists is a no-op.

    Attributes:
        columns: Top-level columns, left to right
        num_rows: Number of rows appended so far
    """

    def __init__(
        self,
        columns: Iterable[str] | None = None,
        *,
        options: RenderOptions | None = None,
    ) -> None:
        """
        Create a table.

        Args:
            columns: Optional names of initial top-level columns
            options: Characters and alignment used by render()
        """
        self.columns: list[ColumnNode] = []
        self.num_rows = 0
        self.options = options or RenderOptions()
        if columns is not None:
            self.add_columns(columns)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        titles = [column.title for column in self.columns]
        return f"Table(columns={titles!r}, num_rows={self.num_rows})"

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    @property
    def leaf_count(self) -> int:
        """Number of values each row must supply."""
        return sum(column.leaf_count for column in self.columns)

    @property
    def depth(self) -> int:
        """Number of header levels (0 for a table without columns)."""
        return max((column.depth for column in self.columns), default=0)

    def column(self, name: str) -> ColumnNode | None:
        """Return the top-level column with exactly this name, if any."""
        for column in self.columns:
            if column.title == name:
                return column
        return None

    def add_column(self, name: str) -> Table:
        """
        Add a top-level column to the right of the table.

        Args:
            name: Column title. An existing column with this title is kept
                as is.

        Raises:
            InvalidStructuralEdit: If the column is new and rows exist
        """
        return self.add_column_path(name)

    def add_columns(self, *names: str | Iterable[str]) -> Table:
        """
        Add several top-level columns, left to right.

        Accepts either separate arguments or a single iterable:
        ``add_columns("A", "B")`` or ``add_columns(["A", "B"])``.

        Raises:
            InvalidStructuralEdit: If any new column would be added while
                rows exist. Nothing is added in that case.
        """
        flat = _flatten(names)
        if self.num_rows:
            for name in flat:
                if self.column(name) is None:
                    raise self._rejected((name,))
        for name in flat:
            self.add_column_path(name)
        return self

    def add_subcolumn(self, column_name: str, subcolumn_name: str) -> Table:
        """
        Add a subcolumn to a top-level column, creating the column if needed.

        Args:
            column_name: Title of the top-level column
            subcolumn_name: Title of the new subcolumn

        Raises:
            InvalidStructuralEdit: If rows exist and the subcolumn is new
        """
        return self.add_column_path(column_name, subcolumn_name)

    def add_column_path(self, *titles: str) -> Table:
        """
        Make sure a column exists at the given title path.

        Each missing level is created, so ``add_column_path("A", "B", "C")``
        builds a three-level header when nothing exists yet.

        Args:
            titles: Titles from the top-level column down

        Raises:
            ValueError: If no titles are given
            TypeError: If a title is not a string
            InvalidStructuralEdit: If rows exist and the path is not
                already present
        """
        if not titles:
            raise ValueError("add_column_path requires at least one title")
        _check_strings(titles)

        existing = self._find_path(titles)
        if existing is not None:
            return self
        if self.num_rows:
            raise self._rejected(titles)

        node = self.column(titles[0])
        if node is None:
            node = ColumnNode(titles[0])
            self.columns.append(node)
        for title in titles[1:]:
            node = node.find_child(title) or node.add_child(title)
        return self

    def _find_path(self, titles: tuple[str, ...]) -> ColumnNode | None:
        node = self.column(titles[0])
        for title in titles[1:]:
            if node is None:
                return None
            node = node.find_child(title)
        return node

    def _rejected(self, titles: tuple[str, ...]) -> InvalidStructuralEdit:
        parent = self._find_path(titles[:-1]) if len(titles) > 1 else None
        if parent is not None and parent.is_leaf:
            reason = f"it already holds {len(parent.values)} value(s) and cannot get subcolumns"
        else:
            reason = f"the table already has {self.num_rows} row(s); call clear() first"
        logger.debug("Rejected structural edit of %s: %s", "/".join(titles), reason)
        return InvalidStructuralEdit(titles, reason)

    # -------------------------------------------------------------------------
    # Rows
    # -------------------------------------------------------------------------

    def add_values(self, *values: str | Iterable[str]) -> Table:
        """
        Append one row.

        Values are distributed over the leaf columns depth-first, left to
        right. Accepts either separate arguments or a single iterable.

        Raises:
            ArgumentCountMismatch: If the number of values differs from
                leaf_count. The table is left unchanged.
            TypeError: If a value is not a string
        """
        row = _flatten(values)
        expected = self.leaf_count
        if len(row) != expected:
            raise ArgumentCountMismatch(expected, len(row))

        cursor = iter(row)
        for column in self.columns:
            column.consume_values(cursor)
        self.num_rows += 1
        return self

    def clear(self) -> Table:
        """Remove all rows, keeping the columns."""
        for column in self.columns:
            column.clear_values()
        self.num_rows = 0
        return self

    def headers(self) -> list[tuple[str, ...]]:
        """Title paths of the leaf columns, left to right."""
        paths: list[tuple[str, ...]] = []

        def walk(node: ColumnNode, prefix: tuple[str, ...]) -> None:
            path = (*prefix, node.title)
            if node.is_leaf:
                paths.append(path)
                return
            for child in node.children:
                walk(child, path)

        for column in self.columns:
            walk(column, ())
        return paths

    def rows(self) -> list[list[str]]:
        """Values row by row, in leaf column order."""
        leaves = [leaf for column in self.columns for leaf in column.iter_leaves()]
        return [[leaf.values[i] for leaf in leaves] for i in range(self.num_rows)]

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def render(self, options: RenderOptions | None = None) -> str:
        """
        Render the table as text.

        Args:
            options: Override the table's render options for this call

        Returns:
            The table, each line terminated by a newline
        """
        return GridRenderer(options or self.options).render(self.columns, self.num_rows)

    def write(self, stream: TextIO | None = None) -> Table:
        """Write the rendered table to a text stream (stdout by default)."""
        (stream or sys.stdout).write(self.render())
        return self


def _flatten(args: tuple[str | Iterable[str], ...]) -> list[str]:
    """Accept f("a", "b") as well as f(["a", "b"])."""
    if len(args) == 1 and not isinstance(args[0], str):
        items = list(args[0])
    else:
        items = list(args)
    _check_strings(items)
    return items


def _check_strings(items: Iterable[object]) -> None:
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"expected str, got {type(item).__name__}: {item!r}")
