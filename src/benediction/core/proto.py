# topmark:header:start
#
#   project      : Benediction
#   file         : proto.py
#   file_relpath : src/benediction/core/proto.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A minimal prototype object model.

Python classes resolve attributes through a fixed MRO that cannot be re-linked
in place for ordinary classes. The helpers in this package also need objects whose
lookup chain *can* be spliced after creation (see
[`extend`][benediction.core.inheritance.extend]), so this module provides:

    - ``ProtoObject``: an attribute bag whose failed lookups continue on its
      prototype, recursively. Values found anywhere on the chain honour the
      descriptor protocol against the object that was accessed, so functions
      stored on a prototype behave like methods.
    - ``Constructor``: a callable with a ``prototype`` bag. Calling it creates a
      ``ProtoObject`` linked to that bag and runs the initializer on it.

Example:
    ```python
    @Constructor
    def Point(this, x, y):
        this.x = x
        this.y = y

    Point.prototype.norm2 = lambda this: this.x**2 + this.y**2
    assert Point(3, 4).norm2() == 25
    ```

Module-level functions (``define_property``, ``own_keys``, ...) play the part of
static helpers, so a ``ProtoObject`` exposes no public attribute names of its own
that could shadow user properties.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


def _bind(value: Any, receiver: ProtoObject) -> Any:
    """Apply the descriptor protocol to ``value`` on behalf of ``receiver``."""
    if isinstance(value, type):
        return value
    getter = getattr(type(value), "__get__", None)
    if getter is None:
        return value
    return getter(value, receiver, type(receiver))


class ProtoObject:
    """Attribute bag with a prototype link.

    Args:
        proto (ProtoObject | None): The prototype consulted when a lookup misses.
        **properties (Any): Initial own (enumerable) properties.
    """

    __slots__ = ("_proto", "_slots", "_hidden")

    def __init__(self, proto: ProtoObject | None = None, /, **properties: Any) -> None:
        object.__setattr__(self, "_proto", proto)
        object.__setattr__(self, "_slots", dict(properties))
        object.__setattr__(self, "_hidden", set())

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        node: ProtoObject | None = self
        while node is not None:
            slots: dict[str, Any] = object.__getattribute__(node, "_slots")
            if name in slots:
                return _bind(slots[name], self)
            node = object.__getattribute__(node, "_proto")
        raise AttributeError(f"{type(self).__name__!s} has no property {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        self._slots[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._slots[name]
        except KeyError:
            raise AttributeError(name) from None
        self._hidden.discard(name)

    def __dir__(self) -> list[str]:
        return sorted(set(_chain_keys(self, enumerable_only=False)))

    def __repr__(self) -> str:
        shown: dict[str, Any] = {k: v for k, v in self._slots.items() if k not in self._hidden}
        return f"{type(self).__name__}({shown!r})"


def _chain(obj: ProtoObject) -> Iterator[ProtoObject]:
    node: ProtoObject | None = obj
    while node is not None:
        yield node
        node = node._proto


def _chain_keys(obj: ProtoObject, *, enumerable_only: bool) -> Iterator[str]:
    for node in _chain(obj):
        for key in node._slots:
            if enumerable_only and key in node._hidden:
                continue
            yield key


def get_proto(obj: ProtoObject) -> ProtoObject | None:
    """Return the prototype of ``obj`` (``None`` at the end of the chain)."""
    return obj._proto


def set_proto(obj: ProtoObject, proto: ProtoObject | None) -> None:
    """Re-link ``obj`` to a new prototype."""
    object.__setattr__(obj, "_proto", proto)


def own_keys(obj: ProtoObject, *, enumerable_only: bool = True) -> list[str]:
    """Return the names of the own properties of ``obj``, in insertion order.

    Args:
        obj (ProtoObject): The object to inspect.
        enumerable_only (bool): If True, skip properties defined as non-enumerable.

    Returns:
        list[str]: The own property names.
    """
    return [k for k in obj._slots if not (enumerable_only and k in obj._hidden)]


def enumerable_keys(obj: ProtoObject) -> list[str]:
    """Return own then inherited enumerable property names, each reported once.

    A non-enumerable own property does not hide an enumerable inherited one of the
    same name from the result; the name is still reported only once.
    """
    seen: set[str] = set()
    out: list[str] = []
    for key in _chain_keys(obj, enumerable_only=True):
        if key not in seen:
            seen.add(key)
            out.append(key)
    return out


def has_own(obj: ProtoObject, name: str) -> bool:
    """Return True if ``name`` is an own property of ``obj`` (enumerable or not)."""
    return name in obj._slots


def define_property(obj: ProtoObject, name: str, value: Any, *, enumerable: bool = True) -> None:
    """Set an own property, optionally hidden from enumeration.

    Args:
        obj (ProtoObject): The object to modify.
        name (str): Property name.
        value (Any): Property value.
        enumerable (bool): If False, the property is skipped by enumeration helpers
            but still found by attribute lookup.
    """
    obj._slots[name] = value
    if enumerable:
        obj._hidden.discard(name)
    else:
        obj._hidden.add(name)


class Constructor:
    """A callable that builds ``ProtoObject`` instances sharing one prototype.

    Args:
        init (Callable[..., Any] | None): Initializer called as ``init(this, *args)``.
            If it returns something other than ``None``, that value is returned from
            the construction call instead of the new object.
        name (str | None): Display name; defaults to the initializer's ``__name__``.

    Attributes:
        prototype (ProtoObject): The bag shared by all instances. Its non-enumerable
            ``constructor`` property points back to this constructor.
        parent (Constructor | None): The super-constructor recorded by
            [`extend`][benediction.core.inheritance.extend].
    """

    def __init__(self, init: Callable[..., Any] | None = None, *, name: str | None = None) -> None:
        self.init: Callable[..., Any] | None = init
        self.__name__: str = name or getattr(init, "__name__", type(self).__name__)
        self.__doc__ = getattr(init, "__doc__", None)
        self.parent: Constructor | None = None
        self.prototype: ProtoObject = ProtoObject()
        define_property(self.prototype, "constructor", self, enumerable=False)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        this = ProtoObject(self.prototype)
        result: Any = self.call(this, *args, **kwargs)
        return this if result is None else result

    def call(self, this: Any, *args: Any, **kwargs: Any) -> Any:
        """Run the initializer on an existing object (for super-constructor calls).

        Args:
            this (Any): The object being initialized.
            *args (Any): Positional arguments for the initializer.
            **kwargs (Any): Keyword arguments for the initializer.

        Returns:
            Any: Whatever the initializer returns.
        """
        if self.init is None:
            return None
        return self.init(this, *args, **kwargs)

    def __repr__(self) -> str:
        return f"<Constructor {self.__name__}>"


def is_instance(obj: object, constructor: Constructor) -> bool:
    """Return True if ``constructor.prototype`` is on the prototype chain of ``obj``."""
    if not isinstance(obj, ProtoObject):
        return False
    target: ProtoObject | None = getattr(constructor, "prototype", None)
    proto: ProtoObject | None = obj._proto
    return proto is not None and any(node is target for node in _chain(proto))


def raw_get(obj: ProtoObject, name: str) -> Any:
    """Return the stored value of ``name`` on the chain of ``obj``, unbound.

    Returns:
        Any: The value as stored, or ``None`` if no object on the chain holds it.
    """
    for node in _chain(obj):
        if name in node._slots:
            return node._slots[name]
    return None
