# topmark:header:start
#
#   project      : Benediction
#   file         : test_messages.py
#   file_relpath : tests/core/test_messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the error-message table and `interpolate`."""

from __future__ import annotations

import pytest

from benediction.core.errors import InvalidArgumentError, TypeMismatchError
from benediction.core.messages import ERROR_MESSAGES, ErrorKind, format_message, interpolate
from tests.conftest import parametrize


def test_interpolate_positional() -> None:
    """Placeholders are filled by argument index."""
    assert interpolate("{0} and {1}", "x", "y") == "x and y"
    assert interpolate("{1} before {0}", "x", "y") == "y before x"


def test_interpolate_none_template() -> None:
    """A ``None`` template yields ``None``."""
    assert interpolate(None) is None
    assert interpolate(None, "x") is None


def test_interpolate_replaces_first_occurrence_only() -> None:
    """Repeated placeholders keep their later copies."""
    assert interpolate("{0} {0}", "z") == "z {0}"


@parametrize(
    ("arg", "expected"),
    [(None, "<>"), (0, "<0>"), (False, "<False>"), ("", "<>"), (3.5, "<3.5>")],
)
def test_interpolate_renders_values(arg: object, expected: str) -> None:
    """Only ``None`` renders as the empty string."""
    assert interpolate("<{0}>", arg) == expected


def test_interpolate_ignores_extra_args_and_missing_placeholders() -> None:
    """Unused arguments are ignored; unfilled placeholders stay."""
    assert interpolate("{0}", "a", "b") == "a"
    assert interpolate("{0} {1}", "a") == "a {1}"


def test_error_messages_keys() -> None:
    """The table exposes one template per error kind."""
    assert set(ERROR_MESSAGES) == {
        "undefined",
        "not_func",
        "not_number",
        "negative",
        "unimplemented",
        "extended_prop",
        "already_extended",
    }
    assert ERROR_MESSAGES["unimplemented"] == ErrorKind.UNIMPLEMENTED.label


def test_error_messages_read_only() -> None:
    """The table cannot be modified."""
    with pytest.raises(TypeError):
        ERROR_MESSAGES["undefined"] = "changed"  # type: ignore[index]


def test_error_kind_parse_accepts_aliases() -> None:
    """Camel-case aliases and member names parse to the same kind."""
    assert ErrorKind.parse("notFunc") is ErrorKind.NOT_FUNC
    assert ErrorKind.parse("NOT_FUNC") is ErrorKind.NOT_FUNC
    assert ErrorKind.parse("already-extended") is ErrorKind.ALREADY_EXTENDED
    assert ErrorKind.parse("nope") is None
    assert ErrorKind.parse(None) is None


def test_error_kind_is_its_key() -> None:
    """Kinds compare equal to their stable key."""
    assert ErrorKind.NEGATIVE == "negative"
    assert ErrorKind.NEGATIVE.key == "negative"
    assert str(ErrorKind.NEGATIVE) == "negative"


def test_format_message() -> None:
    """Messages are the kind's template filled with the details."""
    msg: str = format_message(ErrorKind.UNDEFINED, "bless", "blessee")
    assert msg == "bless: Bad argument: parameter 'blessee' was None."


def test_errors_carry_kind_and_details() -> None:
    """`from_kind` keeps the kind and the interpolated values."""
    exc = TypeMismatchError.from_kind(ErrorKind.NOT_FUNC, "un_bind_at", "func", 42, "int")
    assert exc.kind is ErrorKind.NOT_FUNC
    assert exc.details == ("un_bind_at", "func", 42, "int")
    assert "'42' (type int)" in str(exc)
    assert isinstance(exc, TypeError)
    assert isinstance(InvalidArgumentError.from_kind(ErrorKind.NEGATIVE, "f", "n", -1), ValueError)
