"""Field-descriptor tables built from record classes."""

import dataclasses
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, List, Optional, get_args, get_origin, get_type_hints

from .annotation import METADATA_KEY, Env


@dataclass(frozen=True)
class FieldDescriptor:
    """Declared field of a record class."""

    name: str  # Attribute name, used in diagnostics
    declared_type: Any  # Resolved type with Annotated extras stripped
    annotation: Optional[str]  # Raw payload, None when the field is not annotated


def _split_annotated(hint: Any):
    """Separate an ``Annotated`` hint into its type and payload."""
    if get_origin(hint) is not Annotated:
        return hint, None

    base, *extras = get_args(hint)
    for extra in extras:
        if isinstance(extra, Env):
            return base, extra.payload
    return base, None


def describe(record_type: type) -> List[FieldDescriptor]:
    """Build the field-descriptor table of a record class.

    Dataclass fields come in dataclass order and may carry their payload in
    field metadata. Any class-level annotation may carry it through
    ``Annotated[T, Env(...)]``; metadata takes precedence when both exist.

    Args:
        record_type: Record class to inspect.

    Returns:
        Descriptors in declaration order.
    """
    hints = get_type_hints(record_type, include_extras=True)

    if dataclasses.is_dataclass(record_type):
        declared = [(f.name, f.metadata.get(METADATA_KEY)) for f in dataclasses.fields(record_type)]
    else:
        declared = [(name, None) for name in hints]

    descriptors = []
    for name, metadata_payload in declared:
        hint = hints.get(name, Any)
        if get_origin(hint) is ClassVar:
            continue

        declared_type, payload = _split_annotated(hint)
        if metadata_payload is not None:
            payload = metadata_payload

        descriptors.append(FieldDescriptor(name, declared_type, payload))

    return descriptors
