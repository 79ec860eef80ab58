"""CLI commands package."""

import click

from ..ui.logging import setup_logging
from .check import check
from .describe import describe


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity")
def cli(verbose: int) -> None:
    """envpopulate CLI."""
    setup_logging(verbose)


cli.add_command(check)
cli.add_command(describe)
