# topmark:header:start
#
#   project      : Benediction
#   file         : inheritance.py
#   file_relpath : src/benediction/core/inheritance.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single inheritance between prototype constructors.

``extend(Sub, Base)`` gives ``Sub`` a fresh prototype whose own prototype is
``Base.prototype`` and records ``Sub.parent = Base``. Linking the prototypes is
only half the job; the subclass initializer should also run the parent's:

```python
@Constructor
def Animal(this, name):
    this.name = name

@Constructor
def Dog(this, name):
    Dog.parent.call(this, name)

extend(Dog, Animal)
```

A constructor has a single prototype chain, so extending it twice, or extending
it after its prototype was populated, is treated as a programming error.
"""

from __future__ import annotations

from typing import Any

from benediction.config.logging import BenedictionLogger, get_logger
from benediction.core.errors import AlreadyExtendedError, InvalidArgumentError
from benediction.core.messages import ErrorKind
from benediction.core.properties import lookup, own_properties
from benediction.core.proto import ProtoObject

logger: BenedictionLogger = get_logger(__name__)


def _check_unextended(subclass: Any) -> None:
    prototype: Any = getattr(subclass, "prototype", None)
    if prototype is None or lookup(prototype, "constructor") is not subclass:
        raise AlreadyExtendedError.from_kind(ErrorKind.ALREADY_EXTENDED)
    for name in own_properties(prototype):
        value: Any = lookup(prototype, name)
        raise AlreadyExtendedError.from_kind(
            ErrorKind.EXTENDED_PROP, "extend", name, type(value).__name__
        )


def extend(subclass: Any, superclass: Any) -> None:
    """Make ``subclass`` inherit from ``superclass`` through its prototype.

    Instances created before the call keep the old prototype.

    Args:
        subclass (Any): The constructor to re-link. Its prototype must still be the
            original one (its ``constructor`` points back to it) and carry no own
            enumerable properties. May not be ``None``.
        superclass (Any): The constructor to inherit from. May not be ``None``.

    Raises:
        InvalidArgumentError: If either argument is ``None``.
        AlreadyExtendedError: If ``subclass`` was already extended or its prototype
            already has properties.
    """
    if subclass is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "extend", "subclass")
    if superclass is None:
        raise InvalidArgumentError.from_kind(ErrorKind.UNDEFINED, "extend", "superclass")
    _check_unextended(subclass)

    base: Any = getattr(superclass, "prototype", None)
    subclass.parent = superclass
    subclass.prototype = ProtoObject(base if isinstance(base, ProtoObject) else None)
    logger.debug(
        "extend: %s now inherits from %s",
        getattr(subclass, "__name__", subclass),
        getattr(superclass, "__name__", superclass),
    )
