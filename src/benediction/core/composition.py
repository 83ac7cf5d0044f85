# topmark:header:start
#
#   project      : Benediction
#   file         : composition.py
#   file_relpath : src/benediction/core/composition.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mixins and duck-typed interface checks.

``mixin`` copies properties from any number of sources into a child, in priority
order. A handy use is a short alias combining several helper bags:

```python
_ = mixin({}, benediction, my_helpers)
_["bless"](thing, wotsit)
```

``assert_implements`` checks, right after defining a class, that it provides every
member of a previously documented "interface" bag.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import FunctionType, MethodType, ModuleType
from typing import Any

from benediction.config.logging import BenedictionLogger, get_logger
from benediction.core.delegation import Delegate
from benediction.core.errors import InvalidArgumentError, UnimplementedMemberError
from benediction.core.messages import ErrorKind
from benediction.core.properties import (
    assign,
    binds_on_access,
    enumerable_properties,
    has_own,
    lookup,
    lookup_raw,
    obj_or_prototype,
)

logger: BenedictionLogger = get_logger(__name__)


def _transplant(ingredient: Any, name: str, target: Any) -> Any:
    """Read ``name`` off ``ingredient`` for a ``target`` that does not bind on access.

    Methods of ``ingredient`` come back bound to ``target``, so that calling them
    through the target runs against the target. Mappings and modules hold plain
    functions, which are copied unchanged, as are class methods.
    """
    value: Any = lookup(ingredient, name)
    if isinstance(ingredient, (Mapping, ModuleType)):
        return value
    raw: Any = lookup_raw(ingredient, name)
    if isinstance(raw, classmethod):
        return value
    inherited: bool = binds_on_access(ingredient) or not has_own(ingredient, name)
    if inherited and isinstance(raw, (FunctionType, Delegate)):
        return MethodType(raw, target)
    if isinstance(value, MethodType) and value.__self__ is ingredient:
        return MethodType(value.__func__, target)
    return value


def mixin(child: Any, *sources: Any) -> Any:
    """Copy the enumerable properties of ``sources`` into ``child``.

    Sources are applied left to right and only fill names ``child`` does not hold
    directly: the first source to provide a name wins, and nothing overwrites a
    property ``child`` already owns. Inherited properties of ``child`` do get
    shadowed.

    Args:
        child (Any): Object, class or constructor receiving the properties. A
            constructor is resolved to its prototype. May not be ``None``.
        *sources (Any): Objects, classes or constructors to copy from. ``None``
            entries are skipped.

    Returns:
        Any: The (resolved) child, for chaining.

    Raises:
        InvalidArgumentError: If ``child`` is ``None``.
    """
    if child is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "mixin", "child")
    target: Any = obj_or_prototype(child)
    # Classes and prototypes re-bind on access: copy descriptors as stored.
    rebind: bool = not binds_on_access(target)

    for source in sources:
        if source is None:
            continue
        ingredient: Any = obj_or_prototype(source)
        for name in enumerable_properties(ingredient):
            if has_own(target, name):
                continue
            if rebind:
                value: Any = _transplant(ingredient, name, target)
            else:
                value = lookup_raw(ingredient, name)
            assign(target, name, value)
    return target


def missing_members(child: Any, interf: Any) -> list[str]:
    """Return the enumerable members of ``interf`` that are absent on ``child``.

    Args:
        child (Any): The object expected to satisfy the interface. May not be ``None``.
        interf (Any): Object, class or constructor listing the required members.
            May not be ``None``.

    Returns:
        list[str]: Missing member names, in enumeration order (empty if conformant).

    Raises:
        InvalidArgumentError: If either argument is ``None``.
    """
    if child is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "assert_implements", "child")
    if interf is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "assert_implements", "interf")
    interf = obj_or_prototype(interf)
    return [name for name in enumerable_properties(interf) if lookup(child, name) is None]


def assert_implements(child: Any, interf: Any) -> None:
    """Assert that ``child`` provides every enumerable member of ``interf``.

    A member counts as provided when looking it up on ``child`` (through its class
    or prototype chain) yields anything but ``None``. The check stops at the first
    missing member.

    Args:
        child (Any): The object expected to satisfy the interface. May not be ``None``.
        interf (Any): Object, class or constructor listing the required members.
            May not be ``None``.

    Raises:
        InvalidArgumentError: If either argument is ``None``.
        UnimplementedMemberError: On the first member ``child`` lacks.
    """
    if child is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "assert_implements", "child")
    if interf is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "assert_implements", "interf")
    interf = obj_or_prototype(interf)
    for name in enumerable_properties(interf):
        if lookup(child, name) is None:
            logger.debug("assert_implements: %r lacks %r", child, name)
            raise UnimplementedMemberError(name)
