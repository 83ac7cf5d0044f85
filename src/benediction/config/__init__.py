# topmark:header:start
#
#   project      : Benediction
#   file         : __init__.py
#   file_relpath : src/benediction/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction configuration: logging setup and the ``[tool.benediction]`` TOML table.

Configuration is read from ``benediction.toml`` or from ``[tool.benediction]`` in
``pyproject.toml`` (see [`benediction.config.loaders`][benediction.config.loaders]).
Only the CLI consumes it; the composition helpers take no configuration.
"""

from __future__ import annotations
