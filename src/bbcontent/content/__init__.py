# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/content/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content node model and the structural contract the resolver depends on."""

from __future__ import annotations

from bbcontent.content.contracts import ContentLike
from bbcontent.content.model import ContentKind, ContentNode

__all__: list[str] = [
    "ContentKind",
    "ContentLike",
    "ContentNode",
]
