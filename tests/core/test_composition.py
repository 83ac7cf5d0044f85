# topmark:header:start
#
#   project      : Benediction
#   file         : test_composition.py
#   file_relpath : tests/core/test_composition.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `mixin`, `missing_members` and `assert_implements`."""

from __future__ import annotations

from types import MappingProxyType, SimpleNamespace
from typing import Any

import pytest

import benediction
from benediction.core.composition import assert_implements, missing_members, mixin
from benediction.core.delegation import bless
from benediction.core.errors import InvalidArgumentError, UnimplementedMemberError
from benediction.core.messages import ErrorKind
from benediction.core.proto import Constructor
from tests.conftest import parametrize
from tests.fixtures.plugins import (
    CsvExporter,
    Exporter,
    HalfExporter,
    InheritingExporter,
    Shape,
)


def test_mixin_first_source_wins() -> None:
    """Earlier sources take priority over later ones."""
    assert mixin({}, {"a": 1}, {"a": 2, "b": 2}) == {"a": 1, "b": 2}


def test_mixin_keeps_own_properties() -> None:
    """Properties the child holds are not overwritten."""
    child: dict[str, int] = {"a": 0}
    assert mixin(child, {"a": 1, "b": 1}) is child
    assert child == {"a": 0, "b": 1}


def test_mixin_skips_none_sources() -> None:
    """``None`` sources are ignored."""
    assert mixin({}, None, {"a": 1}, None) == {"a": 1}


def test_mixin_from_module() -> None:
    """A module contributes its exported names."""
    helpers: dict[str, Any] = mixin({}, benediction)
    assert helpers["bless"] is benediction.bless
    assert helpers["LAST_ARG"] is benediction.LAST_ARG
    assert "logger" not in helpers


def test_mixin_into_class_keeps_descriptors() -> None:
    """Static methods copied between classes remain static methods."""

    class Source:
        @staticmethod
        def double(value):
            return value * 2

    class Target:
        pass

    mixin(Target, Source)
    assert isinstance(vars(Target)["double"], staticmethod)
    assert Target().double(4) == 8


def test_mixin_shadows_inherited_properties() -> None:
    """An inherited property is not own, so the source's value is installed."""

    class Base:
        flavor = "plain"

    class Child(Base):
        pass

    mixin(Child, {"flavor": "spicy"})
    assert Child.flavor == "spicy"
    assert Base.flavor == "plain"


def test_mixin_into_constructor_uses_prototype() -> None:
    """Constructors are resolved to their prototype on both sides."""
    target = SimpleNamespace()
    mixin(target, Shape)
    assert target.sides == 0
    assert not hasattr(target, "constructor")


def test_mixin_into_instance() -> None:
    """Plain instances receive attributes."""
    target = SimpleNamespace(keep=True)
    mixin(target, {"keep": False, "new": 1})
    assert target.keep is True
    assert target.new == 1


class Named:
    def __init__(self, name: str) -> None:
        self.name = name

    def who(self) -> str:
        return self.name

    @classmethod
    def kind(cls) -> str:
        return cls.__name__

    @staticmethod
    def shout(text: str) -> str:
        return text.upper()


def test_mixin_instance_methods_run_against_child() -> None:
    """Methods copied from an instance are re-bound to the child instance."""
    child = SimpleNamespace(name="child")
    mixin(child, Named("source"))
    assert child.who() == "child"
    assert child.kind() == "Named"
    assert child.shout("hi") == "HI"
    assert child.name == "child"


def test_mixin_class_methods_run_against_child() -> None:
    """Functions copied from a class become methods of the child instance."""
    child = SimpleNamespace(name="child")
    mixin(child, Named)
    assert child.who() == "child"
    assert child.kind() == "Named"


def test_mixin_constructor_methods_run_against_child() -> None:
    """Prototype functions copied into an instance receive that instance."""

    @Constructor
    def Greeter(this, name):
        this.name = name

    Greeter.prototype.describe = lambda this: f"I am {this.name}"
    child = SimpleNamespace(name="child")
    mixin(child, Greeter)
    assert child.describe() == "I am child"
    source = SimpleNamespace(name="shape")
    mixin(source, Shape)
    assert source.area() == 0


def test_mixin_blessed_instance_methods_run_against_child() -> None:
    """Delegates bound to a blessed source follow the copy to the child."""
    source = SimpleNamespace(name="source")
    bless(source, {"label": lambda obj, prefix: f"{prefix}{obj.name}"})
    child = SimpleNamespace(name="child")
    mixin(child, source)
    assert source.label("> ") == "> source"
    assert child.label("> ") == "> child"


def test_mixin_instance_keeps_plain_callable_attributes() -> None:
    """Callables stored on an instance are attributes, not methods: copied as-is."""

    def shout(text: str) -> str:
        return text.upper()

    child = SimpleNamespace()
    mixin(child, SimpleNamespace(shout=shout))
    assert child.shout is shout


def test_mixin_read_only_child() -> None:
    """Read-only mappings cannot receive properties."""
    with pytest.raises(TypeError):
        mixin(MappingProxyType({}), {"a": 1})


def test_mixin_requires_child() -> None:
    """``None`` is not a valid child."""
    with pytest.raises(InvalidArgumentError) as excinfo:
        mixin(None, {"a": 1})
    assert excinfo.value.kind is ErrorKind.UNDEFINED
    assert excinfo.value.details == ("mixin", "child")


@parametrize(
    "child",
    [CsvExporter, CsvExporter(), InheritingExporter, InheritingExporter()],
)
def test_assert_implements_passes(child: Any) -> None:
    """Conformant classes and instances pass, inherited members included."""
    assert_implements(child, Exporter)
    assert missing_members(child, Exporter) == []


def test_assert_implements_reports_first_missing() -> None:
    """The first missing member in interface order is reported."""
    with pytest.raises(UnimplementedMemberError) as excinfo:
        assert_implements(HalfExporter, Exporter)
    assert excinfo.value.member == "extension"
    assert excinfo.value.kind is ErrorKind.UNIMPLEMENTED
    assert str(excinfo.value) == "Interface property 'extension' is not implemented."
    assert isinstance(excinfo.value, AttributeError)


def test_missing_members_lists_all() -> None:
    """All missing members are listed, in interface order."""
    assert missing_members(HalfExporter, Exporter) == ["extension", "name"]


def test_none_valued_member_counts_as_missing() -> None:
    """A member explicitly set to ``None`` is absent."""
    child = {"extension": None, "export": print, "name": "x"}
    assert missing_members(child, Exporter) == ["extension"]


def test_constructor_interface() -> None:
    """A constructor interface contributes its prototype's enumerable members."""
    assert_implements(Shape("square"), Shape)
    assert missing_members({"area": len}, Shape) == ["sides"]


@parametrize(
    ("child", "interf", "param"),
    [(None, Exporter, "child"), (CsvExporter, None, "interf")],
)
@parametrize("check", [assert_implements, missing_members])
def test_assert_implements_missing_arguments(
    check: Any, child: Any, interf: Any, param: str
) -> None:
    """``None`` arguments are rejected."""
    with pytest.raises(InvalidArgumentError) as excinfo:
        check(child, interf)
    assert excinfo.value.details == ("assert_implements", param)
