# topmark:header:start
#
#   project      : BBContent
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running BBContent through `click.testing.CliRunner`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from bbcontent.cli.exit_codes import ExitCode
from bbcontent.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

PLAIN_SCENARIO = """
[target]
node = "hero"

[render]
mode = "edit"

[session]
active = true

[nodes.hero]
uid = "p1"
type = 'BackBee\\ClassContent\\Block\\Hero'
"""


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def write_scenario(tmp_path: Path, text: str = PLAIN_SCENARIO, name: str = "scenario.toml") -> Path:
    """Write a scenario file under ``tmp_path`` and return its path."""
    path: Path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output
