# topmark:header:start
#
#   project      : Benediction
#   file         : messages.py
#   file_relpath : src/benediction/core/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error-message table and positional template interpolation.

Templates use numbered placeholders (``{0}``, ``{1}``, ...). They are filled by
[`interpolate`][benediction.core.messages.interpolate], which substitutes only the
*first* occurrence of each placeholder:

    >>> interpolate("{0} world", "hello")
    'hello world'
    >>> interpolate("{0} {0}", "z")
    'z {0}'

Callers may rely on the keys of ``ERROR_MESSAGES`` but not on the wording.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from benediction.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping


class ErrorKind(KeyedStrEnum):
    """Symbolic error kinds; `.label` holds the message template.

    Attributes:
        UNDEFINED: A required argument was ``None``.
        NOT_FUNC: A callable (or the name of one) was expected.
        NOT_NUMBER: A numeric position was expected.
        NEGATIVE: A position was below zero.
        UNIMPLEMENTED: An interface member is missing.
        EXTENDED_PROP: A prototype already carries an own property.
        ALREADY_EXTENDED: A prototype was already re-linked.
    """

    UNDEFINED = (
        "undefined",
        "{0}: Bad argument: parameter '{1}' was None.",
    )
    NOT_FUNC = (
        "not_func",
        "{0}: Bad argument: parameter '{1}' should be a callable or the name of one."
        " Was '{2}' (type {3}).",
        ("notFunc",),
    )
    NOT_NUMBER = (
        "not_number",
        "{0}: Bad argument: parameter '{1}' should be a number. Was '{2}' (type {3}).",
        ("notNumber",),
    )
    NEGATIVE = (
        "negative",
        "{0}: Bad argument: parameter '{1}' may not be negative, was '{2}'.",
    )
    UNIMPLEMENTED = (
        "unimplemented",
        "Interface property '{0}' is not implemented.",
    )
    EXTENDED_PROP = (
        "extended_prop",
        "{0}: Already extended: prototype has property '{1}' (type {2}).",
        ("extendedProp",),
    )
    ALREADY_EXTENDED = (
        "already_extended",
        "extend: Already extended.",
        ("alreadyExtended",),
    )


ERROR_MESSAGES: Final[Mapping[str, str]] = MappingProxyType(
    {kind.key: kind.label for kind in ErrorKind}
)


def interpolate(template: str | None, *args: object) -> str | None:
    """Fill the numbered placeholders of ``template`` with ``args``.

    ``{i}`` is replaced by ``str(args[i])`` (``""`` when the argument is ``None``).
    Only the first occurrence of each placeholder is replaced; a template that
    repeats ``{0}`` keeps the later copies verbatim.

    Args:
        template (str | None): The template. ``None`` yields ``None``.
        *args (object): Values for ``{0}``, ``{1}``, ...

    Returns:
        str | None: The filled-in string, or ``None`` if ``template`` is ``None``.
    """
    if template is None:
        return None
    result: str = template
    for index, arg in enumerate(args):
        result = result.replace(f"{{{index}}}", "" if arg is None else str(arg), 1)
    return result


def format_message(kind: ErrorKind, *args: object) -> str:
    """Render the message template of ``kind`` with ``args``."""
    return interpolate(kind.label, *args) or ""
