# topmark:header:start
#
#   project      : FbxWriter
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FbxWriter test suite.

Sets up verbose logging for test runs and provides small typed helpers and
fixtures shared by the writer, config and CLI tests.

Notes:
    Emitter configurations are immutable. Build variants with
    `MutableEmitterConfig(...).freeze()` or `EmitterConfig.thaw()`, never by
    mutating a frozen `EmitterConfig`.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from fbxwriter.config import logging
from fbxwriter.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class RecordingSink(io.BytesIO):
    """In-memory seekable sink that counts write and seek calls."""

    def __init__(self, initial: bytes = b"") -> None:
        super().__init__(initial)
        self.seek(0, io.SEEK_END)
        self.writes: int = 0
        self.seeks: int = 0

    def write(self, data: Any) -> int:  # type: ignore[override]
        self.writes += 1
        return super().write(data)

    def seek(self, pos: int, whence: int = io.SEEK_SET) -> int:  # type: ignore[override]
        # BytesIO.__init__ does not seek, so the counter may not exist yet.
        self.seeks = getattr(self, "seeks", 0) + 1
        return super().seek(pos, whence)


class FailingSink(io.BytesIO):
    """Sink whose writes fail with ``OSError`` once ``fail_after`` writes succeeded."""

    def __init__(self, fail_after: int = 0) -> None:
        super().__init__()
        self.fail_after: int = fail_after
        self.writes: int = 0

    def write(self, data: Any) -> int:  # type: ignore[override]
        if self.writes >= self.fail_after:
            raise OSError(28, "No space left on device")
        self.writes += 1
        return super().write(data)


@pytest.fixture
def sink() -> RecordingSink:
    """Return an empty recording sink."""
    return RecordingSink()


@pytest.fixture(autouse=True)
def silence_fbxwriter_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
