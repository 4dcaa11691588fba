# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for BBContent.

Re-exports the immutable `Config` snapshot and its `MutableConfig` builder.
TOML parsing lives in `bbcontent.config.io`; logging setup in
`bbcontent.config.logging`.
"""

from __future__ import annotations

from bbcontent.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "MutableConfig",
]
