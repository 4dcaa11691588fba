# topmark:header:start
#
#   project      : BBContent
#   file         : options.py
#   file_relpath : src/bbcontent/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolution helpers."""

from __future__ import annotations

from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output format of the ``resolve`` command."""

    TEXT = "text"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``-1`` when quiet, otherwise the verbose count capped at 2.

    Raises:
        click.UsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise click.UsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
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
        help="Suppress non-essential output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Extra config file(s) merged after discovered ones (in order).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Skip discovery of bbcontent.toml / pyproject.toml.",
    )(f)
    return f
