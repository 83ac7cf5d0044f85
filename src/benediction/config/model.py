# topmark:header:start
#
#   project      : Benediction
#   file         : model.py
#   file_relpath : src/benediction/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable configuration model for the Benediction CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from benediction.config.keys import Toml
from benediction.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from benediction.config.types import TomlTable


@dataclass(frozen=True)
class CheckPair:
    """One interface-conformance check.

    Attributes:
        implementation (str): Import target of the object under test
            (``package.module:attr``).
        interface (str): Import target of the interface bag.
    """

    implementation: str
    interface: str

    @property
    def label(self) -> str:
        """Human-readable ``implementation -> interface`` label."""
        return f"{self.implementation} -> {self.interface}"


def _check_from_table(index: int, entry: Any) -> CheckPair:
    if not isinstance(entry, dict):
        raise ConfigError(f"checks[{index}]: expected a table, got {type(entry).__name__}")
    values: dict[str, str] = {}
    for key in (Toml.KEY_IMPLEMENTATION, Toml.KEY_INTERFACE):
        value: Any = entry.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"checks[{index}]: '{key}' must be a non-empty string")
        values[key] = value.strip()
    return CheckPair(
        implementation=values[Toml.KEY_IMPLEMENTATION],
        interface=values[Toml.KEY_INTERFACE],
    )


@dataclass(frozen=True)
class Config:
    """Resolved CLI configuration.

    Attributes:
        fail_fast (bool): Stop at the first missing member of each check.
        checks (tuple[CheckPair, ...]): Declared conformance checks.
        source (Path | None): The file the configuration was read from, if any.
    """

    fail_fast: bool = True
    checks: tuple[CheckPair, ...] = ()
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: TomlTable, *, source: Path | None = None) -> Config:
        """Build a config from a parsed TOML table.

        Unknown keys are ignored.

        Args:
            data (TomlTable): The ``[tool.benediction]`` table (or a whole
                ``benediction.toml`` document).
            source (Path | None): Where the table came from.

        Returns:
            Config: The validated configuration.

        Raises:
            ConfigError: If a known key has the wrong shape.
        """
        fail_fast: Any = data.get(Toml.KEY_FAIL_FAST, True)
        if not isinstance(fail_fast, bool):
            raise ConfigError(f"'{Toml.KEY_FAIL_FAST}' must be a boolean")
        raw_checks: Any = data.get(Toml.SECTION_CHECKS, [])
        if not isinstance(raw_checks, list):
            raise ConfigError(f"'{Toml.SECTION_CHECKS}' must be an array of tables")
        checks = tuple(_check_from_table(i, entry) for i, entry in enumerate(raw_checks))
        return cls(fail_fast=fail_fast, checks=checks, source=source)
