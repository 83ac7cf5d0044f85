# topmark:header:start
#
#   project      : Benediction
#   file         : logging.py
#   file_relpath : src/benediction/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction logging with a TRACE level and colored output.

Library modules obtain loggers through `get_logger` and log at TRACE/DEBUG only;
they never configure handlers. The CLI (and the test suite) call `setup_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Final, cast

from yachalk import chalk

from benediction.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class BenedictionLogger(logging.Logger):
    """`logging.Logger` with a ``trace`` method for the TRACE level."""

    def trace(self, msg: object, *args: object, **kwargs: Any) -> None:
        """Log ``msg % args`` at TRACE level; keyword arguments as for `Logger.debug`."""
        if self.isEnabledFor(TRACE_LEVEL):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE_LEVEL, msg, args, **kwargs)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(BenedictionLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


# Lowest level first; a record takes the style of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color of its level."""
        style: Callable[[str], str] = chalk.dim
        for threshold, candidate in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(super().format(record))


def parse_log_level(value: str | None) -> int | None:
    """Parse a level name ("TRACE", "debug", ...) or a numeric string.

    Returns:
        int | None: The level, or ``None`` if ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment, or None if unset.

    Honors BENEDICTION_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> BenedictionLogger:
    """Retrieve a BenedictionLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        BenedictionLogger: A BenedictionLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("BenedictionLogger", logger)
