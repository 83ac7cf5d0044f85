# topmark:header:start
#
#   project      : Benediction
#   file         : delegation.py
#   file_relpath : src/benediction/core/delegation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn utility functions into methods.

``un_bind_at`` is the opposite of binding: binding fixes a method's receiver and
yields a plain function, while ``un_bind_at`` takes a plain function and yields a
*delegate* that receives its receiver at call time and slots it into a given
argument position.

Suppose a bag of helpers takes the object they work on as an argument:

```python
class FooUtility:
    @staticmethod
    def util1(foo, a): ...

    @staticmethod
    def util2(foo, a, b): ...
```

``bless(Foo, FooUtility)`` installs delegates so that ``foo.util1(a)`` calls
``FooUtility.util1(foo, a)``. Pass ``LAST_ARG`` (or an index) as ``in_which_arg``
when the receiver belongs somewhere other than the first position.
"""

from __future__ import annotations

import inspect
import math
import numbers
from functools import update_wrapper
from types import MethodType
from typing import Any, Final

from benediction.config.logging import BenedictionLogger, get_logger
from benediction.core.errors import InvalidArgumentError, TypeMismatchError
from benediction.core.messages import ErrorKind
from benediction.core.properties import (
    assign,
    binds_on_access,
    enumerable_properties,
    lookup,
    obj_or_prototype,
)

logger: BenedictionLogger = get_logger(__name__)

#: Name of the attribute that overrides a callable's declared arity for ``LAST_ARG``.
APPLY_LENGTH_ATTR: Final[str] = "_apply_length"


class _LastArg:
    """Type of the ``LAST_ARG`` marker (a singleton)."""

    __slots__ = ()
    _instance: _LastArg | None = None

    def __new__(cls) -> _LastArg:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "LAST_ARG"

    def __reduce__(self) -> str:
        return "LAST_ARG"


#: Marker for ``un_bind_at``/``bless``: put the receiver in the last declared
#: positional parameter of the target function. Compare by identity only.
LAST_ARG: Final[_LastArg] = _LastArg()


def declared_arity(func: Any) -> int:
    """Return the number of positional parameters ``func`` declares.

    The ``_apply_length`` attribute, when present and truthy, overrides the
    signature. Callables without an introspectable signature count as 0.

    Args:
        func (Any): The callable to inspect.

    Returns:
        int: The declared positional arity.

    Raises:
        TypeMismatchError: If ``_apply_length`` is set to something that is not a number.
    """
    override: Any = getattr(func, APPLY_LENGTH_ATTR, None)
    if override:
        return _to_position(override, APPLY_LENGTH_ATTR)
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 0
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
    )


def _to_position(value: object, param: str) -> int:
    # Real numbers and numeric strings, truncated toward zero; bool is not a number here.
    number: float | None = None
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            pass
    if number is None or not math.isfinite(number):
        raise TypeMismatchError.from_kind(
            ErrorKind.NOT_NUMBER, "un_bind_at", param, value, type(value).__name__
        )
    if number < 0:
        raise InvalidArgumentError.from_kind(ErrorKind.NEGATIVE, "un_bind_at", param, value)
    return int(number)


class Delegate:
    """Callable that inserts its receiver into a fixed argument position.

    Calling ``delegate(receiver, *args, **kwargs)`` calls
    ``func(*args[:position], receiver, *args[position:], **kwargs)``. As a
    descriptor, a delegate stored on a class (or a prototype object) is bound to
    the instance it is read from, like a function.

    Attributes:
        owner (Any): The object the function was taken from.
        func (Callable[..., Any]): The wrapped function.
        position (int): Index at which the receiver is inserted.
    """

    def __init__(self, owner: Any, func: Any, position: int) -> None:
        self.owner: Any = owner
        self.func: Any = func
        self.position: int = position
        update_wrapper(self, func, updated=())

    def __call__(self, receiver: Any, /, *args: Any, **kwargs: Any) -> Any:
        arguments: list[Any] = list(args)
        arguments.insert(self.position, receiver)
        return self.func(*arguments, **kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return MethodType(self, instance)

    def bind(self, receiver: Any) -> MethodType:
        """Return this delegate with its receiver fixed to ``receiver``."""
        return MethodType(self, receiver)

    def __repr__(self) -> str:
        name: str = getattr(self.func, "__qualname__", None) or repr(self.func)
        return f"<Delegate {name} receiver@{self.position}>"


def un_bind_at(obj: Any, func: Any, this_arg_number: Any = None) -> Delegate:
    """Create a delegate that slots its receiver into ``func``'s arguments.

    Args:
        obj (Any): The object (or constructor whose prototype) holds the function.
            Named functions are looked up on it, so a method of an instance or a
            module comes back bound to it. May not be ``None``.
        func (Any): The function, or the name of a callable property of ``obj``.
            May not be ``None``.
        this_arg_number (Any): Index the receiver is inserted at. Defaults to 0 when
            ``None``. ``LAST_ARG`` selects the last declared positional parameter.
            Real numbers and numeric strings are truncated toward zero.

    Returns:
        Delegate: The delegate.

    Raises:
        InvalidArgumentError: If ``obj`` or ``func`` is ``None``, or the resolved
            position is negative.
        TypeMismatchError: If ``func`` does not resolve to a callable, or
            ``this_arg_number`` is not a finite number.
    """
    if obj is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "un_bind_at", "obj")
    if func is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "un_bind_at", "func")
    if isinstance(func, str):
        found: Any = lookup(obj, func)
        if not callable(found):
            found = lookup(obj_or_prototype(obj), func)
        if callable(found):
            func = found
    if not callable(func):
        raise TypeMismatchError.from_kind(
            ErrorKind.NOT_FUNC, "un_bind_at", "func", func, type(func).__name__
        )

    if this_arg_number is None:
        position: int = 0
    elif this_arg_number is LAST_ARG:
        position = declared_arity(func) - 1
    else:
        position = _to_position(this_arg_number, "this_arg_number")
    if position < 0:
        raise InvalidArgumentError.from_kind(
            ErrorKind.NEGATIVE, "un_bind_at", "this_arg_number", position
        )

    delegate = Delegate(obj, func, position)
    logger.trace("Created %r", delegate)
    return delegate


def bless(blessee: Any, benediction: Any, in_which_arg: Any = None) -> None:
    """Install delegates on ``blessee`` for the functions of ``benediction``.

    For each enumerable property of ``benediction`` (inherited ones included) that
    is absent on ``blessee``, a callable is installed as
    ``un_bind_at(benediction, name, in_which_arg)`` and any other value is copied.
    Present properties are never overwritten, including ones ``blessee`` inherits.

    Blessing a class (or a constructor's prototype) gives the delegates to every
    instance. Blessing a single object, mapping or module binds the delegates to
    that object.

    Args:
        blessee (Any): Object, class or constructor receiving the delegates.
            May not be ``None``.
        benediction (Any): Object, class or constructor providing the functions.
            May not be ``None``.
        in_which_arg (Any): Position of the receiver in the target functions'
            arguments; see `un_bind_at`. Defaults to 0.

    Raises:
        InvalidArgumentError: If either argument is ``None``.
    """
    if benediction is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "bless", "benediction")
    if blessee is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "bless", "blessee")
    blessee = obj_or_prototype(blessee)
    benediction = obj_or_prototype(benediction)
    bind_now: bool = not binds_on_access(blessee)

    installed: list[str] = []
    for name in enumerable_properties(benediction):
        # Skip what is already there, inherited or not.
        if lookup(blessee, name) is not None:
            continue
        value: Any = lookup(benediction, name)
        if callable(value):
            delegate: Delegate = un_bind_at(benediction, name, in_which_arg)
            value = delegate.bind(blessee) if bind_now else delegate
        assign(blessee, name, value)
        installed.append(name)

    logger.debug("bless: installed %d properties: %s", len(installed), ", ".join(installed))
