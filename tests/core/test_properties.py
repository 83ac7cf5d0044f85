# topmark:header:start
#
#   project      : Benediction
#   file         : test_properties.py
#   file_relpath : tests/core/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for property-bag access across object kinds."""

from __future__ import annotations

import types
from types import MappingProxyType, SimpleNamespace

import pytest

from benediction.core.properties import (
    assign,
    binds_on_access,
    enumerable_properties,
    has_own,
    lookup,
    lookup_raw,
    obj_or_prototype,
    own_properties,
)
from benediction.core.proto import Constructor, ProtoObject


class Base:
    inherited = 1
    _private = 2

    def base_method(self):
        return "base"


class Child(Base):
    own = 3

    @staticmethod
    def helper():
        return "helper"


def test_obj_or_prototype() -> None:
    """Constructors resolve to their prototype; everything else to itself."""
    ctor = Constructor()
    assert obj_or_prototype(ctor) is ctor.prototype
    assert obj_or_prototype(Child) is Child
    data: dict[str, int] = {"a": 1}
    assert obj_or_prototype(data) is data
    assert obj_or_prototype(len) is len


def test_class_enumeration_own_first_public_only() -> None:
    """Class bags list their own names first and skip private and builtin names."""
    names: list[str] = enumerable_properties(Child)
    assert names == ["own", "helper", "inherited", "base_method"]
    assert "_private" not in names
    assert "__init__" not in names


def test_instance_enumeration() -> None:
    """Instance attributes come before class attributes."""
    obj = Child()
    obj.extra = 4
    assert enumerable_properties(obj)[0] == "extra"
    assert set(enumerable_properties(obj)) == {"extra", "own", "helper", "inherited", "base_method"}
    assert own_properties(obj) == ["extra"]


def test_builtin_types_contribute_nothing() -> None:
    """Instances of builtin classes only expose their own attributes."""
    assert enumerable_properties(SimpleNamespace(a=1)) == ["a"]
    assert enumerable_properties(object()) == []


def test_mapping_enumeration_skips_non_string_keys() -> None:
    """Mappings enumerate their string keys."""
    assert enumerable_properties({"a": 1, 2: "two", "b": None}) == ["a", "b"]


def test_module_enumeration_honours_all() -> None:
    """Modules enumerate ``__all__`` when declared, else their public globals."""
    mod = types.ModuleType("sample")
    mod.visible = 1
    mod._hidden = 2
    assert enumerable_properties(mod) == ["visible"]
    mod.__all__ = ["_hidden"]
    assert enumerable_properties(mod) == ["_hidden"]


def test_proto_enumeration_skips_constructor() -> None:
    """Prototype enumeration lists own then inherited keys, without ``constructor``."""
    ctor = Constructor()
    ctor.prototype.shared = 1
    obj = ctor()
    obj.own = 2
    assert enumerable_properties(obj) == ["own", "shared"]
    assert own_properties(obj) == ["own"]


def test_has_own() -> None:
    """Own means held directly, never inherited."""
    assert has_own(Child, "own")
    assert not has_own(Child, "inherited")
    assert has_own({"a": None}, "a")
    obj = Child()
    assert not has_own(obj, "own")
    ctor = Constructor()
    assert has_own(ctor.prototype, "constructor")


def test_lookup_absent_is_none() -> None:
    """Missing properties and ``None`` values both read as ``None``."""
    assert lookup({"a": None}, "a") is None
    assert lookup({}, "a") is None
    assert lookup(Child(), "missing") is None
    assert lookup(Child(), "inherited") == 1


def test_lookup_binds_methods_on_instances() -> None:
    """Methods read through an instance come back bound."""
    obj = Child()
    assert lookup(obj, "base_method")() == "base"


def test_lookup_raw_keeps_descriptors() -> None:
    """Raw lookup returns the stored class attribute."""
    assert isinstance(lookup_raw(Child, "helper"), staticmethod)
    assert lookup_raw(Child, "base_method") is Base.__dict__["base_method"]
    assert lookup_raw(Child, "missing") is None
    proto = ProtoObject()
    fn = lambda this: this  # noqa: E731
    proto.fn = fn
    assert lookup_raw(ProtoObject(proto), "fn") is fn


def test_assign() -> None:
    """Assignment writes mapping items or attributes."""
    data: dict[str, int] = {}
    assign(data, "a", 1)
    assert data == {"a": 1}
    ns = SimpleNamespace()
    assign(ns, "b", 2)
    assert ns.b == 2


def test_assign_read_only_mapping() -> None:
    """Read-only mappings refuse assignment."""
    with pytest.raises(TypeError):
        assign(MappingProxyType({}), "a", 1)


def test_binds_on_access() -> None:
    """Only classes and prototype objects re-bind descriptors on access."""
    assert binds_on_access(Child)
    assert binds_on_access(ProtoObject())
    assert not binds_on_access({})
    assert not binds_on_access(Child())
    assert not binds_on_access(types.ModuleType("m"))
