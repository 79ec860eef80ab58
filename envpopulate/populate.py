"""Populate record fields from environment variables."""

import dataclasses
import logging
import os
from typing import Mapping, Optional, TypeVar

from .annotation import parse_annotation
from .errors import (
    InvalidTargetError,
    MissingRequiredVariableError,
    ParseFailureError,
    UnresolvedParserError,
    type_name,
)
from .fields import describe
from .registry import ParserRegistry, default_registry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_mutable_record(target: object) -> bool:
    if isinstance(target, (type, tuple)):
        return False
    if not hasattr(target, "__dict__") and not hasattr(type(target), "__slots__"):
        return False
    if dataclasses.is_dataclass(target) and type(target).__dataclass_params__.frozen:
        return False
    return True


def _assign(target: object, name: str, value: object) -> None:
    try:
        setattr(target, name, value)
    except AttributeError as e:
        raise InvalidTargetError(type(target)) from e


class Populator:
    """Resolves annotated record fields against an environment."""

    def __init__(
        self,
        registry: Optional[ParserRegistry] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize populator.

        Args:
            registry: Parser registry. Defaults to the process-wide registry.
            environ: Variables to read. Defaults to ``os.environ``.
        """
        self.registry = registry if registry is not None else default_registry
        self.environ = environ if environ is not None else os.environ

    def populate(self, target: T) -> T:
        """Populate the annotated fields of a record in place.

        Fields are resolved in declaration order and processing stops at the
        first error. Fields assigned before the error keep their new values.

        Args:
            target: Mutable record instance.

        Returns:
            The same record.

        Raises:
            InvalidTargetError: If target is not a mutable record instance.
            MissingRequiredVariableError: If a required variable is unset.
            UnresolvedParserError: If a field type has no parser.
            ParseFailureError: If a parser rejects a value.
        """
        if not _is_mutable_record(target):
            raise InvalidTargetError(target if isinstance(target, type) else type(target))

        record_type = type(target)
        for descriptor in describe(record_type):
            if descriptor.annotation is None:
                continue

            spec = parse_annotation(descriptor.annotation)
            if spec is None:
                logger.warning(
                    f'Skipping field "{descriptor.name}" on "{type_name(record_type)}": '
                    f'malformed annotation "{descriptor.annotation}"'
                )
                continue

            raw = self.environ.get(spec.variable)
            if raw is None:
                if spec.required:
                    raise MissingRequiredVariableError(spec.variable, descriptor.name, record_type)
                raw = spec.default
                logger.debug(f"Using default for {spec.variable} ({descriptor.name})")

            if descriptor.declared_type is str:
                _assign(target, descriptor.name, raw)
                continue

            entry = self.registry.lookup(descriptor.declared_type)
            if entry is None:
                raise UnresolvedParserError(
                    spec.variable, descriptor.name, record_type, descriptor.declared_type
                )

            try:
                value = entry.convert(raw)
            except Exception as e:
                raise ParseFailureError(
                    spec.variable, descriptor.name, record_type, descriptor.declared_type, e
                ) from e

            _assign(target, descriptor.name, value)

        return target


def populate(
    target: T,
    registry: Optional[ParserRegistry] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> T:
    """Populate a record from the environment.

    This is a convenience function that creates a populator and runs it
    in one step.
    """
    return Populator(registry, environ).populate(target)
