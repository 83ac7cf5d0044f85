# topmark:header:start
#
#   project      : Benediction
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration shared by the whole Benediction test suite.

TRACE logging is enabled for the session so a failing test shows which
delegates were created and what ``bless`` installed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from benediction.config.logging import TRACE_LEVEL, setup_logging
from benediction.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])


def typed_mark(mark: pytest.MarkDecorator) -> Callable[[F], F]:
    """Return ``mark`` typed as a decorator that preserves the test's signature."""
    return cast("Callable[[F], F]", mark)


mark_cli: Callable[[F], F] = typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """`pytest.mark.parametrize`, typed with `typed_mark`."""
    return typed_mark(pytest.mark.parametrize(*args, **kwargs))


@pytest.fixture(autouse=True)
def clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BENEDICTION_LOG_LEVEL from leaking into CLI runs."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging for the whole test session."""
    setup_logging(level=TRACE_LEVEL)
