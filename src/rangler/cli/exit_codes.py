# rangler:header:start
#
#   project      : Rangler
#   file         : exit_codes.py
#   file_relpath : src/rangler/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Rangler Authors
#
# rangler:header:end

"""Exit codes for the Rangler CLI.

Rangler aligns with the BSD `sysexits` convention so other tooling can tell a
bad command line from a broken pipe.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Rangler CLI.

    Attributes:
        SUCCESS: The whole input was processed.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid command tokens or options. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: Reading STDIN or writing STDOUT failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Unreadable or malformed config file. Mirrors BSD ``EX_CONFIG (78)``.
        INTERRUPTED: Stopped by SIGINT (128 + 2, as shells report it).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    INTERRUPTED = 130
