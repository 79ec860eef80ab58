"""Resolve ``module:Class`` references given on the command line."""

import importlib

import click


def load_record_class(reference: str) -> type:
    """Import a record class.

    Importing the module also runs any parser registrations it performs.

    Args:
        reference: Reference of the form ``package.module:ClassName``.

    Returns:
        Record class.

    Raises:
        click.BadParameter: If the reference cannot be resolved.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(f'expected "module:Class", got "{reference}"')

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f'cannot import module "{module_name}": {e}') from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise click.BadParameter(f'"{module_name}" has no attribute "{attr_path}"') from e

    if not isinstance(obj, type):
        raise click.BadParameter(f'"{reference}" is not a class')

    return obj
