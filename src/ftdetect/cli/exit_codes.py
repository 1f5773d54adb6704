# topmark:header:start
#
#   project      : FtDetect
#   file         : exit_codes.py
#   file_relpath : src/ftdetect/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FtDetect CLI.

FtDetect aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. ``FAILURE`` doubles as the
"findings reported" status of the ``audit`` command.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FtDetect CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, or defects reported by ``audit``.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config, or
            override tables that fail to build). Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
