"""
Grid renderer for column trees.

This module provides the GridRenderer class, which turns a forest of
ColumnNode trees into bordered ASCII text with layered headers.

Example output:
    +-----+---------+
    |     |    Score|
    | Name|----+----+
    |     |Math| Art|
    +=====+====+====+
    |alice|  90|  75|
    +-----+----+----+
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .column import ColumnNode

logger = logging.getLogger(__name__)

ALIGNMENTS = ("l", "r", "c")

# Fewest header lines drawn, so flat tables keep the same frame as two-level ones
MIN_HEADER_DEPTH = 2


@dataclass(frozen=True)
class RenderOptions:
    """
    Characters and alignment used to draw a table.

    Attributes:
        align: Cell alignment, 'r' (default), 'l' or 'c'
        content_fill: Padding for titles and values
        border_fill: Fill for the top/bottom borders and group separators
        header_fill: Fill for the line between headers and data
        content_border: Separator after each title or value cell
        joint: Separator after each cell on border lines
    """

    align: str = "r"
    content_fill: str = " "
    border_fill: str = "-"
    header_fill: str = "="
    content_border: str = "|"
    joint: str = "+"

    def __post_init__(self) -> None:
        if self.align not in ALIGNMENTS:
            raise ValueError(f"align must be one of {', '.join(ALIGNMENTS)}, got {self.align!r}")
        for name in ("content_fill", "border_fill", "header_fill", "content_border", "joint"):
            if len(getattr(self, name)) != 1:
                raise ValueError(f"{name} must be a single character")

    def pad(self, text: str, width: int, fill: str) -> str:
        """Pad text to width using the configured alignment."""
        if self.align == "l":
            return text.ljust(width, fill)
        if self.align == "c":
            return text.center(width, fill)
        return text.rjust(width, fill)


class GridRenderer:
    """Render a column forest as a bordered text grid."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        """
        Initialize the grid renderer.

        Args:
            options: Characters and alignment. Defaults to RenderOptions().
        """
        self._options = options or RenderOptions()

    @property
    def options(self) -> RenderOptions:
        return self._options

    def render(self, columns: Sequence[ColumnNode], num_rows: int) -> str:
        """
        Render columns and their values.

        Widths are recomputed first, so the output always reflects the
        current titles and values.

        Args:
            columns: Top-level columns, left to right
            num_rows: Number of value rows to draw

        Returns:
            Table text, each line terminated by a newline
        """
        for column in columns:
            column.compute_width()

        opts = self._options
        leaves = [leaf for column in columns for leaf in column.iter_leaves()]
        height = header_height(columns)
        logger.debug(
            "Rendering %d column(s), %d leaf column(s), %d row(s), %d header line(s)",
            len(columns),
            len(leaves),
            num_rows,
            height,
        )

        lines: list[str] = []
        lines.append(self._border(columns, opts.border_fill))
        for index in range(height):
            cells = (cell for c in columns for cell in self._header_cells(c, index, height))
            lines.append(self._line(opts.content_border, cells))
        lines.append(self._border(leaves, opts.header_fill))
        for row in range(num_rows):
            cells = (
                (leaf.width, leaf.values[row], opts.content_fill, opts.content_border)
                for leaf in leaves
            )
            lines.append(self._line(opts.content_border, cells))
        lines.append(self._border(leaves, opts.border_fill))

        return "".join(line + "\n" for line in lines)

    def _line(self, left: str, cells: Iterable[tuple[int, str, str, str]]) -> str:
        """Join cells of (width, text, fill, border) after a left border."""
        pad = self._options.pad
        return left + "".join(pad(text, width, fill) + sep for width, text, fill, sep in cells)

    def _border(self, columns: Sequence[ColumnNode], fill: str) -> str:
        joint = self._options.joint
        return self._line(joint, ((column.width, "", fill, joint) for column in columns))

    def _header_cells(
        self, column: ColumnNode, index: int, height: int
    ) -> Iterator[tuple[int, str, str, str]]:
        """
        Yield the cells a column draws on one header line.

        Each column owns a band of ``height`` lines. A leaf puts its title on
        the middle line of the band. A group puts its title on the first
        line, a separator under each child on the second, and hands the
        remaining lines to its children.
        """
        opts = self._options
        if column.is_leaf:
            text = column.title if index == height // 2 else ""
            yield column.width, text, opts.content_fill, opts.content_border
        elif index == 0:
            yield column.width, column.title, opts.content_fill, opts.content_border
        elif index == 1:
            for child in column.children:
                yield child.width, "", opts.border_fill, opts.joint
        else:
            for child in column.children:
                yield from self._header_cells(child, index - 2, height - 2)


def header_height(columns: Sequence[ColumnNode]) -> int:
    """Number of header lines needed for the given top-level columns."""
    depth = max([MIN_HEADER_DEPTH, *(column.depth for column in columns)])
    return 2 * depth - 1
