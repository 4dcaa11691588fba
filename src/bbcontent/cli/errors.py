# topmark:header:start
#
#   project      : BBContent
#   file         : errors.py
#   file_relpath : src/bbcontent/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BBContent CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. Library errors (`bbcontent.errors`) are translated at the command
boundary.
"""

from __future__ import annotations

from typing import IO, Any

import click

from bbcontent.cli.exit_codes import ExitCode


class BBContentCliError(click.ClickException):
    """Base class for all BBContent CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class BBContentConfigError(BBContentCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class BBContentScenarioError(BBContentCliError):
    """Error for unreadable or malformed scenario files."""

    exit_code = ExitCode.SCENARIO_ERROR


class BBContentResolutionError(BBContentCliError):
    """Error for aborted resolutions (invalid options, missing node, authorization)."""

    exit_code = ExitCode.RESOLUTION_ERROR
