"""Describe command: print the field table of a record class."""

import click

from ...annotation import parse_annotation
from ...errors import type_name
from ...fields import describe as describe_fields
from ..target import load_record_class
from ..ui.output import FORMATS, render


@click.command()
@click.argument("target")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default="table",
    help="Output format",
)
def describe(target: str, output_format: str) -> None:
    """Print how each field of TARGET (module:Class) is populated."""
    record_type = load_record_class(target)

    rows = []
    for descriptor in describe_fields(record_type):
        row = {"field": descriptor.name, "type": type_name(descriptor.declared_type)}
        if descriptor.annotation is None:
            row["source"] = "not populated"
        else:
            spec = parse_annotation(descriptor.annotation)
            if spec is None:
                row["source"] = "skipped (malformed annotation)"
            else:
                row["variable"] = spec.variable
                row["default"] = spec.default
                row["source"] = "required" if spec.required else "optional"
        rows.append(row)

    render(
        type_name(record_type),
        ("field", "type", "variable", "default", "source"),
        rows,
        output_format,
    )
