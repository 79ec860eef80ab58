"""Parser registry.

Parsers convert a raw environment string into a target type. A parser
either returns the value and raises on bad input::

    def parse_port(value: str) -> Port: ...

or returns a ``(value, error)`` pair::

    def parse_port(value: str) -> Tuple[Port, Optional[Exception]]: ...

Signatures are checked when the parser is registered, so a bad parser
fails at startup instead of during population. Registration is not
synchronised; register parsers at startup before populating records.
"""

import inspect
import logging
import types
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union, get_args, get_origin

from .errors import ParserSignatureError, type_name

logger = logging.getLogger(__name__)

_SHAPE_MESSAGE = (
    "parser functions must return either T, or (T, Optional[Exception]), "
    "where T can be any type but an exception"
)


@dataclass(frozen=True)
class ParserEntry:
    """Registered parser for one target type."""

    target_type: Any
    function: Callable[[str], Any]
    returns_error: bool = False  # Whether the parser returns a (value, error) pair

    def convert(self, raw: str) -> Any:
        """Convert a raw value.

        Args:
            raw: Raw environment value.

        Returns:
            Converted value.

        Raises:
            Exception: Whatever the parser raised or reported.
        """
        result = self.function(raw)
        if not self.returns_error:
            return result

        value, error = result
        if error is not None:
            raise error
        return value


def _is_optional_exception(hint: Any) -> bool:
    if get_origin(hint) not in (Union, types.UnionType):
        return False
    return set(get_args(hint)) == {Exception, type(None)}


def _is_exception_type(hint: Any) -> bool:
    return isinstance(hint, type) and issubclass(hint, BaseException)


def inspect_parser(parser: Any, require_annotations: bool = False) -> Tuple[Any, bool]:
    """Validate a parser signature.

    Args:
        parser: Candidate parser function.
        require_annotations: Whether the input and return annotations must be present.

    Returns:
        Annotated result type (``inspect.Parameter.empty`` if unannotated)
        and whether the parser returns a ``(value, error)`` pair.

    Raises:
        ParserSignatureError: If the signature does not satisfy the contract.
    """
    if not callable(parser):
        raise ParserSignatureError(f'cannot use "{parser!r}" as a parser function')

    try:
        signature = inspect.signature(parser, eval_str=True)
    except (TypeError, ValueError, NameError) as e:
        raise ParserSignatureError(f'cannot inspect parser function "{parser!r}": {e}') from e

    params = list(signature.parameters.values())
    if len(params) != 1 or params[0].kind not in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        raise ParserSignatureError("parser functions must accept a single string as input")

    param_type = params[0].annotation
    if param_type is inspect.Parameter.empty:
        if require_annotations:
            raise ParserSignatureError("parser functions must accept a single string as input")
    elif param_type is not str:
        raise ParserSignatureError("parser functions must accept a single string as input")

    result = signature.return_annotation
    if result is inspect.Parameter.empty:
        if require_annotations:
            raise ParserSignatureError(_SHAPE_MESSAGE)
        return result, False

    returns_error = False
    if get_origin(result) in (tuple, Tuple):
        args = get_args(result)
        if len(args) != 2 or not _is_optional_exception(args[1]):
            raise ParserSignatureError(_SHAPE_MESSAGE)
        result, returns_error = args[0], True

    if result is None or result is type(None) or _is_exception_type(result):
        raise ParserSignatureError(_SHAPE_MESSAGE)

    return result, returns_error


class ParserRegistry:
    """Mapping from target type to parser.

    At most one parser is active per type; registering a type again
    replaces the previous parser.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._parsers: Dict[Any, ParserEntry] = {}

    def register(self, target_type: Any, parser: Callable[[str], Any]) -> None:
        """Register a parser for an explicit target type.

        Args:
            target_type: Type the parser produces.
            parser: Parser function taking a single string.

        Raises:
            ParserSignatureError: If the parser signature is invalid or
                its annotated result type differs from ``target_type``.
        """
        if _is_exception_type(target_type):
            raise ParserSignatureError(_SHAPE_MESSAGE)

        result, returns_error = inspect_parser(parser)
        if result is not inspect.Parameter.empty and result != target_type:
            raise ParserSignatureError(
                f'parser function returns "{type_name(result)}" but was registered '
                f'for "{type_name(target_type)}"'
            )

        self._store(ParserEntry(target_type, parser, returns_error))

    def use_parser(self, parser: Callable[[str], Any]) -> None:
        """Register a parser keyed by its annotated result type.

        Args:
            parser: Parser function with ``str`` input and result annotations.

        Raises:
            ParserSignatureError: If the parser signature is invalid.
        """
        result, returns_error = inspect_parser(parser, require_annotations=True)
        self._store(ParserEntry(result, parser, returns_error))

    def parser(self, target_type: Any) -> Callable:
        """Decorator registering a parser for ``target_type``."""
        def decorator(func: Callable[[str], Any]) -> Callable[[str], Any]:
            self.register(target_type, func)
            return func
        return decorator

    def _store(self, entry: ParserEntry) -> None:
        if entry.target_type in self._parsers:
            logger.debug(f"Replacing parser for type {type_name(entry.target_type)}")
        else:
            logger.debug(f"Registered parser for type {type_name(entry.target_type)}")
        self._parsers[entry.target_type] = entry

    def lookup(self, target_type: Any) -> Optional[ParserEntry]:
        """Get the parser registered for a type, if any."""
        return self._parsers.get(target_type)

    def clear(self) -> None:
        """Remove every registered parser."""
        self._parsers.clear()

    def __contains__(self, target_type: Any) -> bool:
        return target_type in self._parsers

    def __len__(self) -> int:
        return len(self._parsers)


default_registry = ParserRegistry()


def register_parser(target_type: Any, parser: Callable[[str], Any]) -> None:
    """Register a parser on the process-wide registry."""
    default_registry.register(target_type, parser)


def use_parser(parser: Callable[[str], Any]) -> None:
    """Register a parser on the process-wide registry, keyed by its result annotation."""
    default_registry.use_parser(parser)
