# topmark:header:start
#
#   project      : Benediction
#   file         : version.py
#   file_relpath : src/benediction/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from benediction.cli.formats import OutputFormat
from benediction.cli.options import format_option
from benediction.constants import BENEDICTION_VERSION

if TYPE_CHECKING:
    from benediction.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the installed version of Benediction.",
)
@format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the installed version of Benediction.

    Args:
        output_format (OutputFormat): Plain text or JSON.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": BENEDICTION_VERSION}))
    else:
        console.print(console.styled(BENEDICTION_VERSION, bold=True))
