# topmark:header:start
#
#   project      : BBContent
#   file         : main.py
#   file_relpath : src/bbcontent/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``bbcontent`` CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read them from there.
"""

from __future__ import annotations

import click

from bbcontent.cli.commands.resolve import resolve_command
from bbcontent.cli.commands.version import version_command
from bbcontent.cli.console import ClickConsole
from bbcontent.cli.options import common_verbose_options, resolve_verbosity
from bbcontent.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BBContent CLI",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the BBContent CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'bbcontent resolve SCENARIO' to preview content attributes.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(resolve_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
