# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/resolver/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute resolution engine.

Import the engine from [`bbcontent.resolver.engine`][]; options and per-call
state live in [`bbcontent.resolver.options`][] and [`bbcontent.resolver.state`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .engine at module import time: rules import resolver.options.
