# topmark:header:start
#
#   project      : Benediction
#   file         : exit_codes.py
#   file_relpath : src/benediction/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Benediction CLI.

Values follow the BSD `sysexits` convention where practical, so other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Benediction CLI.

    Attributes:
        SUCCESS: Every check passed.
        FAILURE: At least one conformance check found missing members.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        IMPORT_ERROR: An import target could not be resolved. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    IMPORT_ERROR = 69  # EX_UNAVAILABLE
    CONFIG_ERROR = 78  # EX_CONFIG
