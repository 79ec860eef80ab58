"""Configuration errors raised while populating records."""

from typing import Any, Optional


def type_name(tp: Any) -> str:
    """Get a stable display name for a type.

    Builtins are shown by their bare name, everything else as
    ``module.QualifiedName``. Typing constructs without a name fall back
    to their repr.
    """
    name = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None)
    if name is None:
        return repr(tp)
    module = getattr(tp, "__module__", None)
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


class ConfigurationError(Exception):
    """Base configuration error."""
    pass


class InvalidTargetError(ConfigurationError):
    """Populate was called on something that is not a mutable record."""

    def __init__(self, target_type: Any):
        self.target_type = target_type
        super().__init__(
            f'expected populate to be called on a mutable record instance, '
            f'not "{type_name(target_type)}"'
        )


class FieldError(ConfigurationError):
    """Error tied to a single annotated field."""

    def __init__(
        self,
        message: str,
        variable: str,
        field: str,
        record_type: type,
        target_type: Optional[Any] = None,
    ):
        self.variable = variable
        self.field = field
        self.record_type = record_type
        self.target_type = target_type
        super().__init__(message)


class MissingRequiredVariableError(FieldError):
    """Required variable absent from the environment and no default given."""

    def __init__(self, variable: str, field: str, record_type: type):
        super().__init__(
            f'required environment variable "{variable}" for field "{field}" '
            f'on "{type_name(record_type)}" was missing',
            variable,
            field,
            record_type,
        )


class UnresolvedParserError(FieldError):
    """No parser is registered for a non-string field type."""

    def __init__(self, variable: str, field: str, record_type: type, target_type: Any):
        super().__init__(
            f'the environment variable "{variable}" for field "{field}" '
            f'on "{type_name(record_type)}" was read, but no parser could be '
            f'found for type "{type_name(target_type)}"',
            variable,
            field,
            record_type,
            target_type,
        )


class ParseFailureError(FieldError):
    """A registered parser rejected the raw value.

    The parser's error is kept as ``cause`` and chained as ``__cause__``.
    """

    def __init__(
        self,
        variable: str,
        field: str,
        record_type: type,
        target_type: Any,
        cause: BaseException,
    ):
        self.cause = cause
        super().__init__(
            f'the environment variable "{variable}" for field "{field}" '
            f'on "{type_name(record_type)}" was read, but the parser for type '
            f'"{type_name(target_type)}" failed: {cause}',
            variable,
            field,
            record_type,
            target_type,
        )


class ParserSignatureError(TypeError):
    """A parser function does not satisfy the registration contract."""
    pass
