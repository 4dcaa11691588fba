# topmark:header:start
#
#   project      : BBContent
#   file         : maxentry.py
#   file_relpath : src/bbcontent/rules/maxentry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Max-entry rule: expose a container's maximum child count."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbcontent.attributes.keys import AttrKey
from bbcontent.rules.base import BaseRule

if TYPE_CHECKING:
    from bbcontent.resolver.state import ResolutionState


class MaxEntryRule(BaseRule):
    """Set ``data-bb-maxentry`` on containers (0 means unbounded).

    Writes:
      - data-bb-maxentry
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, state: ResolutionState) -> bool:
        """Only containers carry a max entry count."""
        return state.node.is_container

    def run(self, state: ResolutionState) -> None:
        """Set ``data-bb-maxentry`` to the container's ``max_entries``."""
        state.attributes.set(AttrKey.MAX_ENTRY, state.node.max_entries)
