"""Tests for parser registration."""

from typing import NewType, Optional, Tuple

import pytest

from envpopulate import ConfigurationError, ParserRegistry, ParserSignatureError
from envpopulate.registry import inspect_parser

Port = NewType("Port", int)


def parse_port(value: str) -> Port:
    return Port(int(value))


def parse_port_checked(value: str) -> Tuple[Port, Optional[Exception]]:
    try:
        return Port(int(value)), None
    except ValueError as e:
        return Port(0), e


def test_use_parser_keys_by_return_annotation():
    registry = ParserRegistry()

    registry.use_parser(parse_port)

    entry = registry.lookup(Port)
    assert entry.function is parse_port
    assert entry.returns_error is False
    assert entry.convert("80") == 80


def test_use_parser_with_error_tuple():
    registry = ParserRegistry()

    registry.use_parser(parse_port_checked)

    entry = registry.lookup(Port)
    assert entry.returns_error is True
    assert entry.convert("81") == 81
    with pytest.raises(ValueError):
        entry.convert("eighty")


def test_pep604_error_tuple_is_accepted():
    def parse(value: str) -> tuple[int, Exception | None]:
        return int(value), None

    result, returns_error = inspect_parser(parse)

    assert result is int
    assert returns_error is True


def test_register_with_explicit_type():
    registry = ParserRegistry()

    registry.register(int, lambda value: int(value, 0))

    assert int in registry
    assert registry.lookup(int).convert("0x10") == 16


def test_register_rejects_mismatched_result_type():
    registry = ParserRegistry()

    with pytest.raises(ParserSignatureError):
        registry.register(int, parse_port)


def test_register_rejects_exception_target():
    with pytest.raises(ParserSignatureError):
        ParserRegistry().register(ValueError, lambda value: ValueError(value))


def test_parser_decorator():
    registry = ParserRegistry()

    @registry.parser(Port)
    def parse(value: str) -> Port:
        return Port(int(value))

    assert registry.lookup(Port).function is parse


def test_reregistering_replaces_previous_parser():
    registry = ParserRegistry()
    registry.use_parser(parse_port)

    registry.use_parser(parse_port_checked)

    assert len(registry) == 1
    assert registry.lookup(Port).function is parse_port_checked


def test_fresh_registry_is_empty():
    registry = ParserRegistry()
    registry.use_parser(parse_port)

    assert len(ParserRegistry()) == 0
    registry.clear()
    assert registry.lookup(Port) is None


def no_annotations(value):
    return value


def two_inputs(value: str, base: int) -> int:
    return int(value, base)


def int_input(value: int) -> int:
    return value


def keyword_only(*, value: str) -> int:
    return int(value)


def returns_error(value: str) -> Exception:
    return Exception(value)


def returns_error_subclass(value: str) -> ValueError:
    return ValueError(value)


def returns_none(value: str) -> None:
    return None


def wrong_error_type(value: str) -> Tuple[int, Optional[ValueError]]:
    return int(value), None


def non_optional_error(value: str) -> Tuple[int, Exception]:
    return int(value), Exception()


def three_results(value: str) -> Tuple[int, int, Optional[Exception]]:
    return 0, 0, None


@pytest.mark.parametrize(
    "parser",
    [
        "not a function",
        no_annotations,
        two_inputs,
        int_input,
        keyword_only,
        returns_error,
        returns_error_subclass,
        returns_none,
        wrong_error_type,
        non_optional_error,
        three_results,
    ],
)
def test_use_parser_rejects_invalid_signatures(parser):
    registry = ParserRegistry()

    with pytest.raises(ParserSignatureError):
        registry.use_parser(parser)

    assert len(registry) == 0


def test_signature_error_is_not_a_configuration_error():
    with pytest.raises(TypeError) as exc_info:
        ParserRegistry().use_parser(two_inputs)

    assert not isinstance(exc_info.value, ConfigurationError)
    assert str(exc_info.value) == "parser functions must accept a single string as input"


class Uninspectable:
    __signature__ = "not a signature"

    def __call__(self, value):
        return value


def test_uninspectable_callable_is_rejected():
    with pytest.raises(ParserSignatureError) as exc_info:
        ParserRegistry().register(str, Uninspectable())

    assert str(exc_info.value).startswith("cannot inspect parser function")


def test_wrapped_builtin_parser():
    def parse_float(value: str) -> float:
        return float(value)

    registry = ParserRegistry()
    registry.register(float, parse_float)

    assert registry.lookup(float).convert("2.5") == 2.5
