"""Tests for annotation payloads and field-descriptor tables."""

from dataclasses import dataclass, field
from typing import Annotated, ClassVar

import pytest

from envpopulate import Env, EnvSpec, describe, env_field, parse_annotation


@pytest.mark.parametrize(
    "payload, expected",
    [
        ("NAME", EnvSpec("NAME")),
        ("NAME,9012", EnvSpec("NAME", "9012")),
        ("  NAME  ,  some default ", EnvSpec("NAME", "some default")),
        ("NAME,", EnvSpec("NAME", "")),
        ("", EnvSpec("")),
    ],
)
def test_parse_annotation(payload, expected):
    assert parse_annotation(payload) == expected


def test_parse_annotation_with_too_many_parts():
    assert parse_annotation("NAME,a,b") is None


def test_required_only_without_default():
    assert EnvSpec("NAME").required
    assert not EnvSpec("NAME", "").required


def test_env_field_keeps_existing_metadata():
    @dataclass
    class Tagged:
        value: str = env_field("TAGGED", default="x", metadata={"doc": "a value"})

    assert Tagged().value == "x"
    descriptor = describe(Tagged)[0]
    assert descriptor.annotation == "TAGGED"


def test_env_field_default_factory():
    @dataclass
    class Factory:
        value: str = env_field("FACTORY", default_factory=lambda: "made")

    assert Factory().value == "made"


def test_describe_dataclass_in_declaration_order():
    @dataclass
    class Settings:
        counter: ClassVar[int] = 0
        host: str = env_field("HOST")
        port: int = env_field("PORT,80")
        mode: Annotated[str, Env("MODE,dev")] = "dev"
        plain: str = field(default="p")

    descriptors = describe(Settings)

    assert [d.name for d in descriptors] == ["host", "port", "mode", "plain"]
    assert [d.declared_type for d in descriptors] == [str, int, str, str]
    assert [d.annotation for d in descriptors] == ["HOST", "PORT,80", "MODE,dev", None]


def test_metadata_takes_precedence_over_annotated():
    @dataclass
    class Both:
        value: Annotated[str, Env("FROM_ANNOTATED")] = env_field("FROM_METADATA")

    assert describe(Both)[0].annotation == "FROM_METADATA"


def test_describe_plain_class_includes_base_fields():
    class Base:
        base_value: Annotated[str, Env("BASE")]

    class Child(Base):
        limit: ClassVar[int] = 5
        child_value: Annotated[int, "unrelated", Env("CHILD")]
        other: Annotated[str, "unrelated"]

    descriptors = describe(Child)

    assert [(d.name, d.declared_type, d.annotation) for d in descriptors] == [
        ("base_value", str, "BASE"),
        ("child_value", int, "CHILD"),
        ("other", str, None),
    ]
