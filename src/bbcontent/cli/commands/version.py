# topmark:header:start
#
#   project      : BBContent
#   file         : version.py
#   file_relpath : src/bbcontent/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BBContent `version` command.

Prints the current BBContent version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from bbcontent.cli.console import ClickConsole
from bbcontent.cli.options import OutputFormat
from bbcontent.constants import BBCONTENT_VERSION


@click.command(
    name="version",
    help="Show the current version of BBContent.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: str) -> None:
    """Show the current version of BBContent."""
    console: ClickConsole = ctx.obj["console"]

    if OutputFormat(output_format) is OutputFormat.JSON:
        console.print(json.dumps({"version": BBCONTENT_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("BBContent version:", bold=True, underline=True))
        console.print(f"    {console.styled(BBCONTENT_VERSION, bold=True)}")
    else:
        console.print(console.styled(BBCONTENT_VERSION, bold=True))
