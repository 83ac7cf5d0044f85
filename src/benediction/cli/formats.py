# topmark:header:start
#
#   project      : Benediction
#   file         : formats.py
#   file_relpath : src/benediction/cli/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats for CLI rendering.

The JSON format is intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        JSON: A single JSON document (machine-readable).
    """

    TEXT = "text"
    JSON = "json"
