# topmark:header:start
#
#   project      : BBContent
#   file         : keys.py
#   file_relpath : src/bbcontent/attributes/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute names and class tokens emitted by the resolver.

Keep this module behavior-free; it is a pure namespace for constants.
"""

from __future__ import annotations

from typing import Final


class AttrKey:
    """HTML attribute names written into the accumulator."""

    CLASS: Final[str] = "class"
    IDENTIFIER: Final[str] = "data-bb-identifier"
    MAX_ENTRY: Final[str] = "data-bb-maxentry"
    RENDER_MODE: Final[str] = "data-rendermode"
    ACCEPT: Final[str] = "data-accept"
    RTE_CONFIG: Final[str] = "data-rteconfig"


class ClassToken:
    """CSS class tokens understood by the in-place editor."""

    CONTENT: Final[str] = "bb-content"
    DROPPABLE: Final[str] = "bb-droppable"
    DND: Final[str] = "bb-dnd"
