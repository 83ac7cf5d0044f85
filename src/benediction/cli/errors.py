# topmark:header:start
#
#   project      : Benediction
#   file         : errors.py
#   file_relpath : src/benediction/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Benediction CLI.

Raise these in commands to abort with a standardized message and exit code. When a
project console is present in the Click context the message is printed through it;
otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from benediction.cli.exit_codes import ExitCode


class BenedictionCliError(click.ClickException):
    """Base class for all Benediction CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class BenedictionUsageError(BenedictionCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BenedictionConfigError(BenedictionCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class BenedictionImportError(BenedictionCliError):
    """Error when an import target cannot be resolved."""

    exit_code = ExitCode.IMPORT_ERROR
