# topmark:header:start
#
#   project      : Benediction
#   file         : console.py
#   file_relpath : src/benediction/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output for CLI commands.

Command results go through a console and diagnostics go through `logging`, which
writes to stderr, so JSON on stdout never contains log lines.
"""

from __future__ import annotations

from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream."""
        ...

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` with `click.style` options applied, if color is on."""
        ...


class ClickConsole:
    """`ConsoleLike` implementation on top of `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styles. When False, `styled` returns its
            input unchanged and echo strips any styles already present.
        out (TextIO | None): Output stream; ``None`` means Click's current stdout.
        err (TextIO | None): Error stream; ``None`` means Click's current stderr.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, file=self.out, nl=nl, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        click.echo(text, file=self.err, nl=nl, err=True, color=self.enable_color)

    def styled(self, text: str, **style: Any) -> str:
        return click.style(text, **style) if self.enable_color else text
