"""
Check Command for envpopulate CLI

Imports a record class, populates a fresh instance from the environment
and prints the resolved field values. Any configuration error is reported
on stderr with a non-zero exit code, which makes the command usable as a
startup or deployment check.

Example Usage:
    $ envpopulate check myapp.settings:Settings
    $ envpopulate check myapp.settings:Settings --env-file .env
    $ envpopulate check myapp.settings:Settings --format json
"""

import logging
from typing import Optional

import click
from dotenv import load_dotenv

from ...annotation import parse_annotation
from ...errors import ConfigurationError, type_name
from ...fields import describe as describe_fields
from ...populate import populate
from ..target import load_record_class
from ..ui.output import FORMATS, render

logger = logging.getLogger(__name__)


@click.command()
@click.argument("target")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Dotenv file loaded before populating; existing variables win",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default="table",
    help="Output format",
)
def check(target: str, env_file: Optional[str], output_format: str) -> None:
    """Populate TARGET (module:Class) and print its field values."""
    if env_file:
        load_dotenv(env_file, override=False)
        logger.info(f"Loaded environment from {env_file}")

    record_type = load_record_class(target)
    try:
        record = record_type()
    except TypeError as e:
        raise click.ClickException(
            f'cannot build "{type_name(record_type)}" without arguments: {e}'
        ) from e

    try:
        populate(record)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    rows = []
    for descriptor in describe_fields(record_type):
        if descriptor.annotation is None:
            continue
        spec = parse_annotation(descriptor.annotation)
        if spec is None:
            continue
        rows.append({
            "field": descriptor.name,
            "variable": spec.variable,
            "value": getattr(record, descriptor.name),
        })

    logger.info(f"Populated {len(rows)} fields on {type_name(record_type)}")
    render(type_name(record_type), ("field", "variable", "value"), rows, output_format)
