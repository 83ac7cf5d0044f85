# topmark:header:start
#
#   project      : Benediction
#   file         : options.py
#   file_relpath : src/benediction/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options and their resolution logic."""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from benediction.cli.errors import BenedictionUsageError
from benediction.cli.formats import OutputFormat
from benediction.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Log level per number of -v flags; three or more means TRACE.
_VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    One ``-v`` selects INFO, two DEBUG, three or more TRACE. Any ``-q`` selects
    ERROR. Without either flag the level is WARNING.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The logging level.

    Raises:
        BenedictionUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise BenedictionUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return logging.ERROR
    return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counted ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail.",
    )(f)
    return click.option("-q", "--quiet", count=True, help="Only log errors.")(f)


def _to_output_format(_ctx: click.Context, _param: click.Parameter, value: str) -> OutputFormat:
    return OutputFormat(value.lower())


def format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` option; commands receive an `OutputFormat` member."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
        default=OutputFormat.TEXT.value,
        show_default=True,
        callback=_to_output_format,
        help="Output format.",
    )(f)
