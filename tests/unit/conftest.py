"""Unit test fixtures for meretable."""

import copy
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from meretable import Table

SCORES_MANIFEST = {
    "columns": ["Name", {"Score": ["Math", "Art"]}],
    "rows": [["alice", "90", "75"], ["bob", "85", "100"]],
}


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture
def flat_table() -> Table:
    """Two plain columns and one row."""
    return Table(["A", "B"]).add_values("x", "y")


@pytest.fixture
def grouped_table() -> Table:
    """A plain column next to a group of two subcolumns."""
    table = Table(["Name"])
    table.add_subcolumn("Score", "Math").add_subcolumn("Score", "Art")
    return table.add_values("alice", "90", "75")


@pytest.fixture
def nested_table() -> Table:
    """Three header levels: Id | T(U(x, y), v)."""
    table = Table(["Id"])
    table.add_column_path("T", "U", "x")
    table.add_column_path("T", "U", "y")
    table.add_column_path("T", "v")
    return table.add_values("1", "a", "b", "c")


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Write the scores manifest to a YAML file."""
    path = tmp_path / "table.yaml"
    path.write_text(yaml.dump(SCORES_MANIFEST, sort_keys=False))
    return path


@pytest.fixture
def scores_manifest() -> dict:
    """A manifest with a plain column and a two-subcolumn group."""
    return copy.deepcopy(SCORES_MANIFEST)
