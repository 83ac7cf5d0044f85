# topmark:header:start
#
#   project      : Benediction
#   file         : check.py
#   file_relpath : src/benediction/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction `check` command.

Runs duck-typed interface checks on importable objects. With two arguments the
command checks that pair; without arguments it runs every ``[[checks]]`` entry of
the configuration (``benediction.toml`` or ``[tool.benediction]``).

By default each check stops at the first missing member, like
``assert_implements``; ``--all-missing`` reports every gap instead.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from benediction.cli.errors import (
    BenedictionConfigError,
    BenedictionImportError,
    BenedictionUsageError,
)
from benediction.cli.exit_codes import ExitCode
from benediction.cli.formats import OutputFormat
from benediction.cli.options import format_option
from benediction.config.loaders import load_config
from benediction.config.logging import get_logger
from benediction.config.model import CheckPair
from benediction.core.composition import assert_implements, missing_members
from benediction.core.errors import BenedictionError, ConfigError, UnimplementedMemberError
from benediction.utils.introspection import import_target

if TYPE_CHECKING:
    from benediction.cli.console import ConsoleLike
    from benediction.config.model import Config

logger = get_logger(__name__)


@dataclass
class CheckResult:
    """Outcome of one conformance check."""

    pair: CheckPair
    missing: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no member is missing."""
        return not self.missing

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "implementation": self.pair.implementation,
            "interface": self.pair.interface,
            "ok": self.ok,
            "missing": list(self.missing),
        }


def _resolve(target: str) -> Any:
    try:
        return import_target(target)
    except ImportError as exc:
        raise BenedictionImportError(str(exc)) from exc


def run_check(pair: CheckPair, *, fail_fast: bool) -> CheckResult:
    """Import both sides of ``pair`` and check them.

    Args:
        pair (CheckPair): The pair to check.
        fail_fast (bool): Stop at the first missing member.

    Returns:
        CheckResult: The outcome.

    Raises:
        BenedictionImportError: If either side cannot be imported, or resolves to
            something that cannot be checked (such as ``None``).
    """
    implementation: Any = _resolve(pair.implementation)
    interface: Any = _resolve(pair.interface)
    try:
        if not fail_fast:
            return CheckResult(pair, missing_members(implementation, interface))
        assert_implements(implementation, interface)
    except UnimplementedMemberError as exc:
        return CheckResult(pair, [exc.member])
    except BenedictionError as exc:
        raise BenedictionImportError(f"{pair.label}: {exc}") from exc
    return CheckResult(pair)


def _select_checks(targets: tuple[str, ...], config: Config) -> list[CheckPair]:
    if len(targets) == 2:
        return [CheckPair(implementation=targets[0], interface=targets[1])]
    if targets:
        raise BenedictionUsageError(
            "Expected IMPLEMENTATION and INTERFACE, or no arguments to use the configuration."
        )
    if not config.checks:
        where: str = str(config.source) if config.source else "no configuration file found"
        raise BenedictionConfigError(f"No checks configured ({where}).")
    return list(config.checks)


@click.command(
    name="check",
    help="Check that IMPLEMENTATION provides every member of INTERFACE.",
)
@click.argument("targets", nargs=-1, metavar="[IMPLEMENTATION INTERFACE]")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read checks from this TOML file instead of searching for one.",
)
@click.option(
    "--all-missing/--fail-fast",
    "all_missing",
    default=None,
    help="Report every missing member instead of stopping at the first.",
)
@format_option
def check_command(
    *,
    targets: tuple[str, ...],
    config_path: Path | None,
    all_missing: bool | None,
    output_format: OutputFormat,
) -> None:
    """Run interface-conformance checks.

    Args:
        targets (tuple[str, ...]): Either empty or ``(IMPLEMENTATION, INTERFACE)``.
        config_path (Path | None): Explicit configuration file.
        all_missing (bool | None): Override the configured ``fail_fast`` setting.
        output_format (OutputFormat): Plain text or JSON.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    try:
        config: Config = load_config(config_path)
    except ConfigError as exc:
        raise BenedictionConfigError(str(exc)) from exc

    fail_fast: bool = config.fail_fast if all_missing is None else not all_missing
    results: list[CheckResult] = [
        run_check(pair, fail_fast=fail_fast) for pair in _select_checks(targets, config)
    ]
    failed: int = sum(1 for r in results if not r.ok)
    logger.info("%d checks, %d failed", len(results), failed)

    if output_format == OutputFormat.JSON:
        payload: dict[str, Any] = {
            "fail_fast": fail_fast,
            "results": [r.to_dict() for r in results],
        }
        console.print(json.dumps(payload, indent=2))
    else:
        for r in results:
            if r.ok:
                console.print(f"{console.styled('OK', fg='green')}    {r.pair.label}")
            else:
                console.print(
                    f"{console.styled('FAIL', fg='red')}  {r.pair.label}: "
                    f"missing {', '.join(r.missing)}"
                )

    if failed:
        ctx.exit(ExitCode.FAILURE)
