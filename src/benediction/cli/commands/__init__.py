# topmark:header:start
#
#   project      : Benediction
#   file         : __init__.py
#   file_relpath : src/benediction/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction CLI subcommands."""
