# topmark:header:start
#
#   project      : Benediction
#   file         : main.py
#   file_relpath : src/benediction/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction CLI entry point.

Group-level options are resolved once and placed into ``ctx.obj`` so subcommands
share the console, verbosity and color settings.
"""

from __future__ import annotations

import click

from benediction.cli.commands.check import check_command
from benediction.cli.commands.members import members_command
from benediction.cli.commands.version import version_command
from benediction.cli.console import ClickConsole
from benediction.cli.options import common_verbose_options, resolve_verbosity
from benediction.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    # The environment wins; otherwise only explicit -v/-q change the default.
    level_env: int | None = resolve_env_log_level()
    level: int | None = level_env if level_env is not None else (
        level_cli if verbose or quiet else None
    )
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    logger.debug("Log level %s (env=%s, -v=%d, -q=%d)", level, level_env, verbose, quiet)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Benediction: interface checks and member listings for Python objects.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Benediction CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'benediction check IMPLEMENTATION INTERFACE' to run a check.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(members_command)

cli.add_command(check_command)

if __name__ == "__main__":
    cli()
