# topmark:header:start
#
#   project      : Benediction
#   file         : loaders.py
#   file_relpath : src/benediction/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load Benediction configuration from TOML files.

Sources, in order of preference:
    1. an explicit path (``--config``),
    2. the nearest ``benediction.toml``, searching from the start directory upwards,
    3. the nearest ``pyproject.toml`` that has a ``[tool.benediction]`` table.

Within one directory ``benediction.toml`` wins over ``pyproject.toml``. Parsing is
done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from benediction.config.logging import get_logger
from benediction.config.model import Config
from benediction.constants import PYPROJECT_SECTION, PYPROJECT_TOML_NAME, TOOL_TOML_NAME

if TYPE_CHECKING:
    from benediction.config.logging import BenedictionLogger
    from benediction.config.types import TomlTable

logger: BenedictionLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Benediction table of a parsed document, or None if it has none.

    ``benediction.toml`` is the table itself; ``pyproject.toml`` nests it under
    ``[tool.benediction]``.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    node: Any = data
    for part in PYPROJECT_SECTION:
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return cast("TomlTable", node) if isinstance(node, dict) else None


def find_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file at or above ``start``.

    Args:
        start: Directory (or file) to start searching from.

    Returns:
        The path of the config file, or None if no directory up to the filesystem
        root holds one.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        tool_file: Path = directory / TOOL_TOML_NAME
        if tool_file.is_file():
            return tool_file
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file() and extract_table(pyproject, load_toml_dict(pyproject)) is not None:
            return pyproject
    return None


def load_config(path: Path | None = None, *, start: Path | None = None) -> Config:
    """Load the configuration.

    Args:
        path: Explicit configuration file. When None, `find_config_file` searches
            from ``start`` (default: the current directory).
        start: Directory to search from when ``path`` is None.

    Returns:
        The configuration; defaults when no file is found.

    Raises:
        ConfigError: If the configuration table has an invalid shape.
    """
    source: Path | None = path if path is not None else find_config_file(start or Path.cwd())
    if source is None:
        logger.debug("No configuration file found; using defaults")
        return Config()

    table: TomlTable | None = extract_table(source, load_toml_dict(source))
    logger.debug("Loaded configuration from %s", source)
    return Config.from_dict(table or {}, source=source)
