# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BBContent CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    bbcontent = "bbcontent.cli.main:cli"

All subcommands live in [`bbcontent.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
