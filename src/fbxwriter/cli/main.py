# topmark:header:start
#
#   project      : FbxWriter
#   file         : main.py
#   file_relpath : src/fbxwriter/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FbxWriter command group.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

import click

from fbxwriter.cli.commands.config import config_command
from fbxwriter.cli.commands.encode import encode_command
from fbxwriter.cli.commands.version import version_command
from fbxwriter.cli.options import common_verbose_options, resolve_verbosity
from fbxwriter.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    if no_color:
        ctx.color = False
    ctx.obj["color_enabled"] = not no_color
    logger.debug("CLI state: %s", ctx.obj)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Write FBX documents from structured input.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the FbxWriter CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'fbxwriter encode INPUT.json' to write an FBX file.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(encode_command)

if __name__ == "__main__":
    cli()
