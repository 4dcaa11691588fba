# topmark:header:start
#
#   project      : BBContent
#   file         : rendermode.py
#   file_relpath : src/bbcontent/rules/rendermode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render-mode rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbcontent.attributes.keys import AttrKey
from bbcontent.rules.base import BaseRule

if TYPE_CHECKING:
    from bbcontent.resolver.state import ResolutionState


class RenderModeRule(BaseRule):
    """Set ``data-rendermode`` to the current mode, or ``""`` when there is none.

    Writes:
      - data-rendermode
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, state: ResolutionState) -> None:
        mode: str | None = state.context.mode
        state.attributes.set(AttrKey.RENDER_MODE, mode if mode is not None else "")
