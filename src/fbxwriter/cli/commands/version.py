# topmark:header:start
#
#   project      : FbxWriter
#   file         : version.py
#   file_relpath : src/fbxwriter/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FbxWriter `version` command."""

from __future__ import annotations

import click

from fbxwriter.cli.options import get_effective_verbosity
from fbxwriter.constants import FBXWRITER_VERSION


@click.command(
    name="version",
    help="Show the installed version of FbxWriter.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the FbxWriter version as installed in the active environment."""
    if get_effective_verbosity(ctx) > 0:
        click.secho("FbxWriter version:", bold=True, underline=True)
        click.echo(f"    {FBXWRITER_VERSION}")
    else:
        click.echo(FBXWRITER_VERSION)
