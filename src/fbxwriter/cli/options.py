# topmark:header:start
#
#   project      : FbxWriter
#   file         : options.py
#   file_relpath : src/fbxwriter/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click option groups and the helpers that resolve them."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click

from fbxwriter.cli.errors import FbxFileNotFoundError
from fbxwriter.config.io import discover_config_files

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

F = TypeVar("F", bound="Callable[..., object]")


def common_verbose_options(f: F) -> F:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counters to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_config_options(f: F) -> F:
    """Add ``--config FILE`` (repeatable) and ``--no-config`` to a command."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False),
        help="Read emitter settings from this TOML file (repeatable; later files win).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Do not pick up pyproject.toml / fbxwriter.toml from the working directory.",
    )(f)
    return f


def resolve_verbosity(verbose: int, quiet: int) -> int:
    """Return the program-output verbosity: negative for quiet, positive for verbose."""
    return verbose - quiet


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the verbosity stored on the root context (0 when unset)."""
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def resolve_config_paths(config_files: Sequence[str], *, no_config: bool) -> list[Path]:
    """Return the config files to load, lowest priority first.

    Discovered files in the working directory come first (unless ``no_config``),
    then the explicit ``--config`` files in command-line order.

    Raises:
        FbxFileNotFoundError: an explicit ``--config`` file does not exist.
    """
    paths: list[Path] = [] if no_config else discover_config_files(Path.cwd())
    for name in config_files:
        path = Path(name)
        if not path.is_file():
            raise FbxFileNotFoundError(f"Config file not found: {name}")
        paths.append(path)
    return paths
