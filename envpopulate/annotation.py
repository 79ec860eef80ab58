"""Annotation payloads attached to record fields.

A payload is a single string of the form ``NAME`` or ``NAME,DEFAULT``.
Both parts are trimmed. A payload with one part marks a required
variable, two parts an optional variable with a literal default.

Payloads are attached either through dataclass field metadata::

    @dataclass
    class Settings:
        host: str = env_field("APP_HOST,localhost")

or through ``typing.Annotated``::

    class Settings:
        port: Annotated[Port, Env("APP_PORT,8080")]
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

METADATA_KEY = "environment"


@dataclass(frozen=True)
class Env:
    """Marker carrying an annotation payload inside ``Annotated[...]``."""

    payload: str


@dataclass(frozen=True)
class EnvSpec:
    """Parsed annotation payload."""

    variable: str
    default: Optional[str] = None

    @property
    def required(self) -> bool:
        """Whether the variable has no default."""
        return self.default is None


def parse_annotation(payload: str) -> Optional[EnvSpec]:
    """Parse an annotation payload.

    Args:
        payload: Raw payload string.

    Returns:
        Parsed payload, or None when it has more than two parts.
    """
    parts = payload.split(",")
    if len(parts) < 1 or len(parts) > 2:
        return None

    variable = parts[0].strip()
    if len(parts) == 1:
        return EnvSpec(variable)
    return EnvSpec(variable, parts[1].strip())


def env_field(payload: str, *, default: Any = None, **kwargs: Any) -> Any:
    """Declare a dataclass field populated from the environment.

    The field defaults to ``default`` so the record can be built before
    population. Remaining keyword arguments go to ``dataclasses.field``.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = payload
    if "default_factory" not in kwargs:
        kwargs["default"] = default
    return dataclasses.field(metadata=metadata, **kwargs)
