"""
meretable: Fixed-width ASCII tables with nested column headers.

This library renders tabular data as bordered text with:
- Columns split into subcolumns, to any depth
- Equal-width subcolumns under each group header
- Declarative YAML/JSON table manifests
- A command line renderer

Example:
    from meretable import Table

    table = Table(["Name"])
    table.add_subcolumn("Score", "Math").add_subcolumn("Score", "Art")
    table.add_values("alice", "90", "75")
    print(table)

    +-----+---------+
    |     |    Score|
    | Name|----+----+
    |     |Math| Art|
    +=====+====+====+
    |alice|  90|  75|
    +-----+----+----+
"""

from importlib.metadata import PackageNotFoundError, version

from .column import ColumnNode
from .exceptions import (
    ArgumentCountMismatch,
    InvalidStructuralEdit,
    ManifestError,
    MereTableError,
    RowError,
    StructureError,
)
from .manifest import ColumnDecl, TableManifest
from .render import GridRenderer, RenderOptions
from .table import Table

try:
    __version__ = version("meretable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "ColumnNode",
    "GridRenderer",
    "RenderOptions",
    # Manifests
    "TableManifest",
    "ColumnDecl",
    # Exceptions - Base
    "MereTableError",
    # Exceptions - Categories
    "StructureError",
    "RowError",
    # Exceptions - Structure
    "InvalidStructuralEdit",
    # Exceptions - Row
    "ArgumentCountMismatch",
    # Exceptions - Manifest
    "ManifestError",
]
