# topmark:header:start
#
#   project      : Benediction
#   file         : __main__.py
#   file_relpath : src/benediction/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Benediction via ``python -m benediction``.

Delegates to :func:`benediction.cli.main.cli`, the same entry point as the
``benediction`` console script.

Examples:
    Check an implementation against an interface::

        python -m benediction check mypkg.plugins:Csv mypkg.api:ExporterInterface
"""

from __future__ import annotations

from benediction.cli.main import cli

if __name__ == "__main__":
    cli()
