# topmark:header:start
#
#   project      : Benediction
#   file         : errors.py
#   file_relpath : src/benediction/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Benediction helpers.

Errors produced by the composition helpers carry the symbolic
[`ErrorKind`][benediction.core.messages.ErrorKind] that produced them, so callers can
branch on ``exc.kind`` instead of parsing messages. The concrete classes also derive
from the closest builtin exception (``ValueError``, ``TypeError``, ``AttributeError``)
so generic handlers keep working.

All of these signal programmer errors (precondition violations). They are raised
at the call site that detects them and never caught inside the library.
"""

from __future__ import annotations

from typing import TypeVar

from benediction.core.messages import ErrorKind, format_message

_E = TypeVar("_E", bound="BenedictionError")


class BenedictionError(Exception):
    """Base class for all Benediction errors.

    Attributes:
        kind (ErrorKind | None): The symbolic error kind, if the error came from
            the message table.
        details (tuple[object, ...]): The values interpolated into the message.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        details: tuple[object, ...] = (),
    ) -> None:
        super().__init__(message)
        self.kind: ErrorKind | None = kind
        self.details: tuple[object, ...] = details

    @classmethod
    def from_kind(cls: type[_E], kind: ErrorKind, *details: object) -> _E:
        """Build an error whose message is the template of ``kind`` filled with ``details``.

        Args:
            kind (ErrorKind): The error kind.
            *details (object): Values for the template placeholders.

        Returns:
            _E: The new exception instance (not raised).
        """
        return cls(format_message(kind, *details), kind=kind, details=details)


class InvalidArgumentError(BenedictionError, ValueError):
    """A required argument was ``None``, or a position was negative."""


class TypeMismatchError(BenedictionError, TypeError):
    """An argument was present but of the wrong kind."""


class UnimplementedMemberError(BenedictionError, AttributeError):
    """An object does not provide a member its interface declares.

    Attributes:
        member (str): Name of the missing member.
    """

    def __init__(self, member: str) -> None:
        super().__init__(
            format_message(ErrorKind.UNIMPLEMENTED, member),
            kind=ErrorKind.UNIMPLEMENTED,
            details=(member,),
        )
        self.member: str = member


class AlreadyExtendedError(BenedictionError):
    """A constructor's prototype was already linked or populated."""


class ConfigError(BenedictionError):
    """A configuration source has an invalid shape."""
