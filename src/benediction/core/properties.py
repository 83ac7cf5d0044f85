# topmark:header:start
#
#   project      : Benediction
#   file         : properties.py
#   file_relpath : src/benediction/core/properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Uniform property access over the kinds of objects the helpers accept.

Every helper treats its arguments as *property bags*. This module defines what a
property is for each kind of bag:

    - ``Mapping``: string keys. All keys are own and enumerable.
    - ``ProtoObject``: own slots, then slots inherited along the prototype chain,
      minus non-enumerable ones.
    - module: public globals, or exactly ``__all__`` when the module declares it.
    - class: public names in the ``__dict__`` of each class on the MRO. Classes
      defined in ``builtins`` contribute nothing, so ``object`` and ``dict``
      methods are never enumerated.
    - any other object: public names of the instance ``__dict__``, then those of
      its class as above.

A property is *absent* when looking it up yields ``None``, whether it is missing
or explicitly set to ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from types import ModuleType
from typing import Any

from benediction.core import proto
from benediction.core.proto import ProtoObject


def _is_public(name: object) -> bool:
    return isinstance(name, str) and not name.startswith("_")


def _unique(names: list[str]) -> list[str]:
    return list(dict.fromkeys(names))


def obj_or_prototype(variant: Any) -> Any:
    """Return the ``prototype`` of a constructor-like callable, else ``variant`` itself.

    A callable whose ``prototype`` attribute is not ``None`` is taken to be a
    constructor, whose instances get their properties from that prototype. Python
    classes carry their own properties, so they resolve to themselves.

    Args:
        variant (Any): The object, class or constructor to resolve.

    Returns:
        Any: The bag whose properties should be used.
    """
    if callable(variant) and not isinstance(variant, type):
        prototype: Any = getattr(variant, "prototype", None)
        if prototype is not None:
            return prototype
    return variant


def _class_names(classes: tuple[type, ...]) -> list[str]:
    names: list[str] = []
    for cls in classes:
        if cls.__module__ == "builtins":
            continue
        names.extend(name for name in vars(cls) if _is_public(name))
    return names


def enumerable_properties(bag: Any) -> list[str]:
    """Return the enumerable property names of ``bag``: own first, then inherited.

    Args:
        bag (Any): The property bag (already resolved, see ``obj_or_prototype``).

    Returns:
        list[str]: Property names, each reported once.
    """
    if isinstance(bag, ProtoObject):
        return proto.enumerable_keys(bag)
    if isinstance(bag, Mapping):
        return [key for key in bag if isinstance(key, str)]
    if isinstance(bag, ModuleType):
        exported: Any = getattr(bag, "__all__", None)
        if exported is not None:
            return _unique([str(name) for name in exported])
        return [name for name in vars(bag) if _is_public(name)]
    if isinstance(bag, type):
        return _unique(_class_names(bag.__mro__))

    names: list[str] = [name for name in getattr(bag, "__dict__", {}) if _is_public(name)]
    names.extend(_class_names(type(bag).__mro__))
    return _unique(names)


def own_properties(bag: Any) -> list[str]:
    """Return the enumerable properties ``bag`` holds directly (not inherited)."""
    if isinstance(bag, ProtoObject):
        return proto.own_keys(bag)
    if isinstance(bag, Mapping):
        return [key for key in bag if isinstance(key, str)]
    if isinstance(bag, ModuleType):
        return enumerable_properties(bag)
    return [name for name in getattr(bag, "__dict__", {}) if _is_public(name)]


def has_own(bag: Any, name: str) -> bool:
    """Return True if ``name`` is held directly by ``bag``.

    Unlike enumeration, this also sees private and non-enumerable names.
    """
    if isinstance(bag, ProtoObject):
        return proto.has_own(bag, name)
    if isinstance(bag, Mapping):
        return name in bag
    return name in getattr(bag, "__dict__", {})


def lookup(bag: Any, name: str) -> Any:
    """Return the value of property ``name`` on ``bag``, or ``None`` when absent.

    Attribute lookup follows the class or prototype chain and the descriptor
    protocol, so a method looked up on an instance or a module comes back bound.
    """
    if isinstance(bag, Mapping):
        return bag.get(name)
    return getattr(bag, name, None)


def lookup_raw(bag: Any, name: str) -> Any:
    """Return property ``name`` of ``bag`` as stored, without descriptor binding.

    For a class this is the ``__dict__`` entry of the first class on the MRO that
    holds ``name`` (a ``staticmethod`` stays a ``staticmethod``). For an instance it
    is the instance ``__dict__`` entry, else the raw class attribute.
    """
    if isinstance(bag, ProtoObject):
        return proto.raw_get(bag, name)
    if isinstance(bag, (Mapping, ModuleType)):
        return lookup(bag, name)
    if not isinstance(bag, type):
        own: Any = getattr(bag, "__dict__", {})
        if name in own:
            return own[name]
    for klass in bag.__mro__ if isinstance(bag, type) else type(bag).__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return None


def assign(bag: Any, name: str, value: Any) -> None:
    """Set property ``name`` of ``bag`` to ``value``.

    Raises:
        TypeError: If ``bag`` is a read-only mapping.
    """
    if isinstance(bag, Mapping):
        if not isinstance(bag, MutableMapping):
            raise TypeError(f"cannot assign {name!r} on read-only mapping {type(bag).__name__}")
        bag[name] = value
        return
    setattr(bag, name, value)


def binds_on_access(bag: Any) -> bool:
    """Return True if attribute access on ``bag`` applies the descriptor protocol.

    Descriptors stored on classes and on prototype objects receive the accessing
    object when read through an instance; values stored on mappings, modules and
    plain instances are returned as-is.
    """
    return isinstance(bag, (type, ProtoObject))
