"""YAML/JSON manifest parsing and validation for declarative tables."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .exceptions import ManifestError
from .render import RenderOptions
from .table import Table

RENDER_KEYS = tuple(f.name for f in fields(RenderOptions))


@dataclass(frozen=True)
class ColumnDecl:
    """A column declaration: a plain title, or a title with subcolumns.

    In a manifest a leaf is written as a title and a group as a single-key
    mapping from its title to a list of column entries. Titles may be any
    YAML scalar except null; numbers and booleans are converted with str(),
    the same way row values are.
    """

    title: str
    children: tuple[ColumnDecl, ...] = ()

    @classmethod
    def from_obj(cls, obj: Any, path: str = "columns") -> ColumnDecl:
        title = _scalar_title(obj)
        if title is not None:
            return cls(title=title)
        if isinstance(obj, dict):
            if len(obj) != 1:
                raise ManifestError(path, "a column group must have exactly one title")
            ((key, entries),) = obj.items()
            title = _scalar_title(key)
            if title is None:
                raise ManifestError(path, f"column title must be a scalar, got {key!r}")
            if not isinstance(entries, list) or not entries:
                raise ManifestError(
                    f"{path}.{title}", "a column group needs a non-empty list of subcolumns"
                )
            return cls(title=title, children=_parse_columns(entries, f"{path}.{title}"))
        raise ManifestError(path, f"expected a title or a mapping, got {type(obj).__name__}")

    def to_obj(self) -> str | dict[str, Any]:
        if not self.children:
            return self.title
        return {self.title: [child.to_obj() for child in self.children]}

    @property
    def leaf_count(self) -> int:
        if not self.children:
            return 1
        return sum(child.leaf_count for child in self.children)

    def paths(self) -> list[tuple[str, ...]]:
        """Title paths from this column down to each of its leaves."""
        if not self.children:
            return [(self.title,)]
        return [(self.title, *path) for child in self.children for path in child.paths()]


@dataclass(frozen=True)
class TableManifest:
    """Parsed manifest describing a table's columns, rows and render options."""

    columns: tuple[ColumnDecl, ...]
    rows: tuple[tuple[str, ...], ...] = ()
    render: RenderOptions = field(default_factory=RenderOptions)

    @classmethod
    def from_dict(cls, d: Any) -> TableManifest:
        if not isinstance(d, dict):
            raise ManifestError("", "manifest must be a mapping")

        unknown = sorted(map(str, set(d) - {"columns", "rows", "render"}))
        if unknown:
            raise ManifestError("", f"unknown key(s): {', '.join(unknown)}")

        raw_columns = d.get("columns")
        if not isinstance(raw_columns, list):
            raise ManifestError("columns", "'columns' is required and must be a list")
        columns = _parse_columns(raw_columns, "columns")
        leaf_count = sum(column.leaf_count for column in columns)

        raw_rows = d.get("rows") or []
        if not isinstance(raw_rows, list):
            raise ManifestError("rows", "'rows' must be a list")
        rows = tuple(
            _parse_row(row, f"rows[{i}]", leaf_count) for i, row in enumerate(raw_rows)
        )

        return cls(columns=columns, rows=rows, render=_parse_render(d.get("render") or {}))

    @classmethod
    def from_yaml(cls, yaml_str: str) -> TableManifest:
        """Parse a YAML (or JSON) document."""
        import yaml

        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ManifestError("", f"not valid YAML: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"columns": [column.to_obj() for column in self.columns]}
        if self.rows:
            result["rows"] = [list(row) for row in self.rows]
        if self.render != RenderOptions():
            defaults = RenderOptions()
            result["render"] = {
                key: getattr(self.render, key)
                for key in RENDER_KEYS
                if getattr(self.render, key) != getattr(defaults, key)
            }
        return result

    def build(self, options: RenderOptions | None = None) -> Table:
        """
        Create a Table with the declared columns and rows.

        Args:
            options: Render options overriding the manifest's own

        Returns:
            A populated Table
        """
        table = Table(options=options or self.render)
        for column in self.columns:
            for path in column.paths():
                table.add_column_path(*path)
        for row in self.rows:
            table.add_values(row)
        return table


def _scalar_title(obj: Any) -> str | None:
    if isinstance(obj, str):
        return obj
    if isinstance(obj, (bool, int, float)):
        return str(obj)
    return None


def _parse_columns(entries: list[Any], path: str) -> tuple[ColumnDecl, ...]:
    columns: list[ColumnDecl] = []
    seen: set[str] = set()
    for i, entry in enumerate(entries):
        column = ColumnDecl.from_obj(entry, f"{path}[{i}]")
        if column.title in seen:
            raise ManifestError(f"{path}[{i}]", f"duplicate column title {column.title!r}")
        seen.add(column.title)
        columns.append(column)
    return tuple(columns)


def _parse_row(row: Any, path: str, leaf_count: int) -> tuple[str, ...]:
    if not isinstance(row, list):
        raise ManifestError(path, "a row must be a list of values")
    if len(row) != leaf_count:
        raise ManifestError(path, f"expected {leaf_count} value(s), got {len(row)}")
    values: list[str] = []
    for value in row:
        if isinstance(value, (list, dict)):
            raise ManifestError(path, f"values must be scalars, got {type(value).__name__}")
        values.append("" if value is None else str(value))
    return tuple(values)


def _parse_render(d: Any) -> RenderOptions:
    if not isinstance(d, dict):
        raise ManifestError("render", "'render' must be a mapping")
    unknown = sorted(map(str, set(d) - set(RENDER_KEYS)))
    if unknown:
        raise ManifestError("render", f"unknown key(s): {', '.join(unknown)}")
    try:
        return RenderOptions(**d)
    except (TypeError, ValueError) as e:
        raise ManifestError("render", str(e)) from e
