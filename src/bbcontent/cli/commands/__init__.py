# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``bbcontent`` CLI."""
