# topmark:header:start
#
#   project      : FbxWriter
#   file         : errors.py
#   file_relpath : src/fbxwriter/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FbxWriter CLI.

Commands raise these to report a failure with a standardized message and exit
code. Writer errors are translated at the command boundary with
`from_write_error`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from fbxwriter.cli.exit_codes import ExitCode
from fbxwriter.writer.errors import FbxIoError, FbxWriteError


class FbxCliError(click.ClickException):
    """Base class for all FbxWriter CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Print the error to stderr, in red unless color is disabled."""
        ctx = click.get_current_context(silent=True)
        color: bool | None = ctx.color if ctx is not None else None
        click.secho(f"Error: {self.format_message()}", file=file, err=True, fg="red", color=color)


class FbxUsageError(FbxCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class FbxDataError(FbxCliError):
    """The input document is malformed or cannot be written as FBX."""

    exit_code = ExitCode.DATA_ERROR


class FbxFileNotFoundError(FbxCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FbxCliIOError(FbxCliError):
    """Reading input or writing output failed."""

    exit_code = ExitCode.IO_ERROR


def from_write_error(exc: FbxWriteError) -> FbxCliError:
    """Map a writer error to the CLI error carrying the right exit code."""
    if isinstance(exc, FbxIoError):
        return FbxCliIOError(f"Cannot write FBX output: {exc}")
    return FbxDataError(f"Cannot write FBX document: {exc}")
