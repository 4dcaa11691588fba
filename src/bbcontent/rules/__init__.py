# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute rules applied on the full (not granted) resolution path."""

from __future__ import annotations

from bbcontent.rules.ruleset import DEFAULT_RULES

__all__: list[str] = [
    "DEFAULT_RULES",
]
