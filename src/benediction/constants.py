# topmark:header:start
#
#   project      : Benediction
#   file         : constants.py
#   file_relpath : src/benediction/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    BENEDICTION_VERSION: str = get_version("benediction")
except PackageNotFoundError:  # running from a source checkout
    BENEDICTION_VERSION = "0.0.0"

# Environment variable consulted by `benediction.config.logging.resolve_env_log_level`:
LOG_LEVEL_ENV_VAR: str = "BENEDICTION_LOG_LEVEL"

# Configuration file names, in lookup order within a directory:
TOOL_TOML_NAME: str = "benediction.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Section holding our settings inside `pyproject.toml`:
PYPROJECT_SECTION: tuple[str, ...] = ("tool", "benediction")

# Separator between module path and attribute path in import targets:
TARGET_SEPARATOR: str = ":"
