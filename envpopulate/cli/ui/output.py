"""Rendering of field rows as a table, JSON or YAML."""

import json
from typing import Any, Dict, List, Sequence

import click
import yaml
from rich.console import Console
from rich.table import Table

console = Console()

FORMATS = ("table", "json", "yaml")


def _plain(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def render(title: str, columns: Sequence[str], rows: List[Dict[str, Any]], output_format: str) -> None:
    """Print rows in the requested format.

    Args:
        title: Table title, ignored for machine formats.
        columns: Row keys in display order.
        rows: Rows keyed by column.
        output_format: One of ``FORMATS``.
    """
    if output_format == "json":
        data = [{column: _plain(row.get(column)) for column in columns} for row in rows]
        click.echo(json.dumps(data, indent=2))
        return

    if output_format == "yaml":
        data = [{column: _plain(row.get(column)) for column in columns} for row in rows]
        click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column.replace("_", " ").title(), justify="left")
    for row in rows:
        table.add_row(*("" if row.get(column) is None else str(row.get(column)) for column in columns))
    console.print(table)
