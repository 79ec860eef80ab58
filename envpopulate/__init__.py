"""
envpopulate - Typed configuration records from environment variables

This package fills the fields of a configuration record from environment
variables. Each field carries an annotation naming its variable and an
optional default; string fields are assigned directly and every other type
is converted by a parser registered for it.

Key Features:
- Annotation payloads of the form ``NAME`` or ``NAME,DEFAULT``
- Dataclass metadata and ``typing.Annotated`` field discovery
- Parser registration with signature checks at registration time
- Fail-fast population with descriptive errors

Example Usage:
    from dataclasses import dataclass
    from typing import NewType

    from envpopulate import env_field, populate, register_parser

    Port = NewType("Port", int)

    def parse_port(value: str) -> Port:
        return Port(int(value))

    register_parser(Port, parse_port)

    @dataclass
    class Settings:
        host: str = env_field("APP_HOST")
        port: Port = env_field("APP_PORT,8080")

    settings = populate(Settings())
"""

import logging
from importlib.metadata import version

from .annotation import Env, EnvSpec, env_field, parse_annotation
from .errors import (
    ConfigurationError,
    InvalidTargetError,
    MissingRequiredVariableError,
    ParseFailureError,
    ParserSignatureError,
    UnresolvedParserError,
)
from .fields import FieldDescriptor, describe
from .populate import Populator, populate
from .registry import ParserRegistry, default_registry, register_parser, use_parser

__version__ = version("envpopulate")

logger = logging.getLogger(__name__)

__all__ = [
    "__version__",
    # Annotations
    "Env",
    "EnvSpec",
    "env_field",
    "parse_annotation",
    # Fields
    "FieldDescriptor",
    "describe",
    # Registry
    "ParserRegistry",
    "default_registry",
    "register_parser",
    "use_parser",
    # Population
    "Populator",
    "populate",
    # Errors
    "ConfigurationError",
    "InvalidTargetError",
    "MissingRequiredVariableError",
    "UnresolvedParserError",
    "ParseFailureError",
    "ParserSignatureError",
]
