# topmark:header:start
#
#   project      : Benediction
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for invoking the Benediction CLI under `click.testing.CliRunner`.

`run_cli_in` runs from a given directory, so configuration discovery only sees
the ``benediction.toml``/``pyproject.toml`` files a test writes there.
"""

from __future__ import annotations

import os
from contextlib import chdir
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from benediction.cli.exit_codes import ExitCode
from benediction.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI in the current working directory.

    Suitable for commands that do not look for configuration, e.g. ``version`` or
    ``members``.
    """
    return CliRunner().invoke(cli, list(argv))


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory to run from; configuration discovery starts here.
        argv (Sequence[str]): Arguments, e.g. ``["check", "--format", "json"]``.

    Returns:
        Result: The runner's result; ``output`` holds stdout and stderr.
    """
    with chdir(os.fspath(tmp_path)):
        return run_cli(argv)


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert the exit code, showing the command output on mismatch."""
    assert result.exit_code == expected, (
        f"expected {expected.name} ({int(expected)}), got {result.exit_code}:\n{result.output}"
    )


def assert_SUCCESS(result: Result) -> None:
    """Every check passed (code 0)."""
    assert_exit(result, ExitCode.SUCCESS)


def assert_FAILURE(result: Result) -> None:
    """At least one check found missing members (code 1)."""
    assert_exit(result, ExitCode.FAILURE)


def assert_USAGE_ERROR(result: Result) -> None:
    """Bad arguments or flags (code 64)."""
    assert_exit(result, ExitCode.USAGE_ERROR)


def assert_IMPORT_ERROR(result: Result) -> None:
    """An import target did not resolve (code 69)."""
    assert_exit(result, ExitCode.IMPORT_ERROR)


def assert_CONFIG_ERROR(result: Result) -> None:
    """Missing or malformed configuration (code 78)."""
    assert_exit(result, ExitCode.CONFIG_ERROR)
