# topmark:header:start
#
#   project      : FbxWriter
#   file         : logging.py
#   file_relpath : src/fbxwriter/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FbxWriter logging with a TRACE level and colored console output.

Every module obtains its logger through `get_logger(__name__)`. The emitter
reports lenient and strict handling of unwritable events here; the binary
encoder traces node records and offset patches at DEBUG/TRACE level.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from fbxwriter.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class FbxLogger(logging.Logger):
    """`logging.Logger` with a `trace` method for per-record encoder output."""

    def trace(self, msg: object, *args: object, extra: Mapping[str, object] | None = None) -> None:
        """Log at TRACE, the level FbxWriter uses for node record and offset details."""
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(FbxLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


# Highest threshold first.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Color each formatted line by its level; anything below TRACE is dim red."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Parse a level name ("TRACE", "warning") or a numeric string ("10").

    Returns:
        int | None: The logging level, or ``None`` when ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from ``FBXWRITER_LOG_LEVEL`` or None if unset."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Without an explicit ``level``, `FBXWRITER_LOG_LEVEL` decides, and CRITICAL
    applies when that is unset too. Below INFO the format adds file, line and
    function.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)

    # stdout may carry encoded FBX data (`encode -o -`), so logs go to stderr.
    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> FbxLogger:
    """Return the `FbxLogger` for ``name`` (usually the caller's ``__name__``)."""
    return cast("FbxLogger", logging.getLogger(name))
