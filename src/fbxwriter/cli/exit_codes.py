# topmark:header:start
#
#   project      : FbxWriter
#   file         : exit_codes.py
#   file_relpath : src/fbxwriter/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes of the FbxWriter CLI, aligned with BSD ``sysexits`` where practical."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line usage (``EX_USAGE``).
        DATA_ERROR (int): The input document could not be written as FBX (``EX_DATAERR``).
        FILE_NOT_FOUND (int): An input file does not exist (``EX_NOINPUT``).
        IO_ERROR (int): Reading or writing failed (``EX_IOERR``).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    DATA_ERROR = 65
    FILE_NOT_FOUND = 66
    IO_ERROR = 74
