# topmark:header:start
#
#   project      : FbxWriter
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FbxWriter in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative input/output paths resolve
there and config discovery only sees files the test created.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from fbxwriter.cli.exit_codes import ExitCode
from fbxwriter.cli.main import cli
from fbxwriter.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-attach the test log handler after each CLI run.

    The CLI configures logging against the runner's temporary stderr, which is
    closed when the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["encode", "in.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["encode", "scene.json"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for commands that do not touch the filesystem (``version``,
    ``--help``). Anything that reads or writes files, or discovers config,
    should go through `run_cli_in`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74)."""
    assert result.exit_code == ExitCode.IO_ERROR, result.output
