# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/render/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render-side inputs of a resolution (explicit render context)."""

from __future__ import annotations

from bbcontent.render.context import RenderContext

__all__: list[str] = [
    "RenderContext",
]
