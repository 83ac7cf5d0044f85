# topmark:header:start
#
#   project      : Benediction
#   file         : __init__.py
#   file_relpath : src/benediction/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Composition helpers: delegation, prototype inheritance, mixins and interface checks."""

from __future__ import annotations
