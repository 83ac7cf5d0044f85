# topmark:header:start
#
#   project      : Benediction
#   file         : __init__.py
#   file_relpath : src/benediction/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction package.

Benediction is a small object-composition toolkit: it turns utility functions into
methods (``un_bind_at``, ``bless``), links prototype constructors (``extend``),
copies properties between objects in priority order (``mixin``) and checks
duck-typed interfaces (``assert_implements``). A ``benediction`` command line
tool runs interface checks on importable objects.
"""

from __future__ import annotations

from benediction.constants import BENEDICTION_VERSION
from benediction.core.composition import assert_implements, missing_members, mixin
from benediction.core.delegation import LAST_ARG, Delegate, bless, un_bind_at
from benediction.core.errors import (
    AlreadyExtendedError,
    BenedictionError,
    InvalidArgumentError,
    TypeMismatchError,
    UnimplementedMemberError,
)
from benediction.core.inheritance import extend
from benediction.core.messages import ERROR_MESSAGES, ErrorKind, interpolate
from benediction.core.proto import Constructor, ProtoObject

__version__: str = BENEDICTION_VERSION

__all__ = [
    "ERROR_MESSAGES",
    "LAST_ARG",
    "AlreadyExtendedError",
    "BenedictionError",
    "Constructor",
    "Delegate",
    "ErrorKind",
    "InvalidArgumentError",
    "ProtoObject",
    "TypeMismatchError",
    "UnimplementedMemberError",
    "assert_implements",
    "bless",
    "extend",
    "interpolate",
    "missing_members",
    "mixin",
    "un_bind_at",
]
