# topmark:header:start
#
#   project      : Benediction
#   file         : keys.py
#   file_relpath : src/benediction/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for Benediction configuration.

Keys defined here are *external configuration API*: renaming or removing one is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys as they appear in ``benediction.toml`` and ``[tool.benediction]``.

    Example:
        ```toml
        [tool.benediction]
        fail_fast = true

        [[tool.benediction.checks]]
        implementation = "mypkg.plugins.csv:CsvExporter"
        interface = "mypkg.api:Exporter"
        ```
    """

    KEY_FAIL_FAST: Final[str] = "fail_fast"

    # [[checks]]
    SECTION_CHECKS: Final[str] = "checks"

    KEY_IMPLEMENTATION: Final[str] = "implementation"
    KEY_INTERFACE: Final[str] = "interface"
