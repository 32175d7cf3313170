# topmark:header:start
#
#   project      : FbxWriter
#   file         : config.py
#   file_relpath : src/fbxwriter/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FbxWriter `config` command.

Prints the effective emitter configuration (defaults merged with discovered
and explicit config files) as TOML.
"""

from __future__ import annotations

import click

from fbxwriter.cli.options import common_config_options, resolve_config_paths
from fbxwriter.config.io import config_to_toml, load_config


@click.command(
    name="config",
    help="Show the effective emitter configuration as TOML.",
)
@common_config_options
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.fbxwriter] for pasting into pyproject.toml.",
)
def config_command(
    *,
    config_files: tuple[str, ...],
    no_config: bool,
    for_pyproject: bool,
) -> None:
    """Print the effective emitter configuration."""
    paths = resolve_config_paths(config_files, no_config=no_config)
    click.echo(config_to_toml(load_config(paths), for_pyproject=for_pyproject), nl=False)
