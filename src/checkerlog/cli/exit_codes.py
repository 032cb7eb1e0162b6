# topmark:header:start
#
#   project      : CheckerLog
#   file         : exit_codes.py
#   file_relpath : src/checkerlog/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CheckerLog CLI.

CheckerLog aligns with the BSD `sysexits` convention so other tooling can
interpret failures consistently. ``FAILURE`` doubles as the "errors were
reported" status, which is what CI scripts usually key on.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CheckerLog CLI.

    Attributes:
        SUCCESS: No error-level diagnostic was reported.
        FAILURE: At least one error-level diagnostic was reported, or a generic
            failure occurred.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid JSON or UTF-8, or has the wrong shape.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
