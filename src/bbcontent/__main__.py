# topmark:header:start
#
#   project      : BBContent
#   file         : __main__.py
#   file_relpath : src/bbcontent/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BBContent via ``python -m bbcontent``.

Delegates directly to :func:`bbcontent.cli.main.cli`, the same entry point as
the ``bbcontent`` console script.

Examples:
    Resolve a scenario using the module interface::

        python -m bbcontent resolve scenario.toml
"""

from __future__ import annotations

from bbcontent.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
