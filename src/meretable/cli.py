"""Command-line interface for rendering meretable manifests."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import IO

import click
import yaml

from .exceptions import MereTableError
from .manifest import TableManifest
from .render import ALIGNMENTS, RenderOptions
from .table import Table

logger = logging.getLogger(__name__)

ENV_PREFIX = "MERETABLE"
"""Prefix for environment variables backing CLI options (e.g. MERETABLE_RENDER_ALIGN)."""

TEMPLATE = {
    "columns": [
        "Name",
        {"Score": ["Math", "Art"]},
    ],
    "rows": [
        ["alice", "90", "75"],
        ["bob", "85", "100"],
    ],
    "render": {"align": "r"},
}


@click.group()
@click.version_option(package_name="meretable")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Render fixed-width ASCII tables with nested column headers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )


@cli.command()
@click.option(
    "--file",
    "-f",
    "manifest_file",
    type=click.File("r"),
    default="-",
    show_default=True,
    help="YAML or JSON table manifest ('-' for stdin).",
)
@click.option(
    "--align",
    type=click.Choice(ALIGNMENTS),
    default=None,
    help="Cell alignment (overrides the manifest).",
)
@click.option(
    "--border-char",
    type=str,
    default=None,
    help="Character between cells on title and value lines.",
)
@click.option(
    "--joint-char",
    type=str,
    default=None,
    help="Character between cells on border lines.",
)
def render(
    manifest_file: IO[str],
    align: str | None,
    border_char: str | None,
    joint_char: str | None,
) -> None:
    """Render a table manifest to stdout."""
    manifest = _load_manifest(manifest_file)

    overrides = {
        key: value
        for key, value in (
            ("align", align),
            ("content_border", border_char),
            ("joint", joint_char),
        )
        if value is not None
    }
    try:
        options = dataclasses.replace(manifest.render, **overrides)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    table = _build(manifest, options)
    click.echo(table.render(), nl=False)


@cli.command()
def template() -> None:
    """Print an example table manifest."""
    click.echo(yaml.dump(TEMPLATE, default_flow_style=False, sort_keys=False), nl=False)


@cli.command("inspect")
@click.option(
    "--file",
    "-f",
    "manifest_file",
    type=click.File("r"),
    default="-",
    show_default=True,
    help="YAML or JSON table manifest ('-' for stdin).",
)
def inspect_manifest(manifest_file: IO[str]) -> None:
    """Show the leaf columns of a manifest and their computed widths."""
    manifest = _load_manifest(manifest_file)
    table = _build(manifest, manifest.render)
    table.render()

    leaves = [leaf for column in table.columns for leaf in column.iter_leaves()]
    report = Table(["Column", "Width"])
    for path, leaf in zip(table.headers(), leaves):
        report.add_values("/".join(path), str(leaf.width))

    click.echo(report.render(), nl=False)
    click.echo(f"Rows: {table.num_rows}, header levels: {table.depth}")


def _load_manifest(manifest_file: IO[str]) -> TableManifest:
    """Read and parse a manifest, exiting with an error message on failure."""
    try:
        return TableManifest.from_yaml(manifest_file.read())
    except MereTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _build(manifest: TableManifest, options: RenderOptions) -> Table:
    try:
        return manifest.build(options)
    except MereTableError as e:
        logger.debug("Failed to build table", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Console script entry point."""
    cli(auto_envvar_prefix=ENV_PREFIX)
