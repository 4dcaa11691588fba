# topmark:header:start
#
#   project      : BBContent
#   file         : accept.py
#   file_relpath : src/bbcontent/rules/accept.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accept rule: list the child types a container accepts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbcontent.attributes.keys import AttrKey
from bbcontent.rules.base import BaseRule

if TYPE_CHECKING:
    from bbcontent.resolver.state import ResolutionState


class AcceptRule(BaseRule):
    """Set ``data-accept`` to the comma-joined accepted child types.

    Writes:
      - data-accept
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, state: ResolutionState) -> bool:
        """Only containers with a non-empty whitelist."""
        return state.node.is_container and len(state.node.accepted_child_types) > 0

    def run(self, state: ResolutionState) -> None:
        """Join accepted child types with commas, preserving their order."""
        state.attributes.set(AttrKey.ACCEPT, ",".join(state.node.accepted_child_types))
