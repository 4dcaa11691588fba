# topmark:header:start
#
#   project      : BBContent
#   file         : identifier.py
#   file_relpath : src/bbcontent/rules/identifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identifier rule: ``data-bb-identifier="<Type/Name>(<uid>)"``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbcontent.attributes.keys import AttrKey
from bbcontent.content.types import normalize_type_name
from bbcontent.rules.base import BaseRule

if TYPE_CHECKING:
    from bbcontent.content.contracts import ContentLike
    from bbcontent.resolver.state import ResolutionState


def format_identifier(node: ContentLike) -> str:
    r"""Return the editor identifier of ``node``.

    Example:
        A node of type ``Foo\Bar\Baz`` with uid ``abc123`` yields ``Foo/Bar/Baz(abc123)``.
    """
    return f"{normalize_type_name(node.type_name)}({node.uid})"


class IdentifierRule(BaseRule):
    """Set the editor identifier.

    Writes:
      - data-bb-identifier
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, state: ResolutionState) -> None:
        """Set ``data-bb-identifier`` from the node type and uid."""
        state.attributes.set(AttrKey.IDENTIFIER, format_identifier(state.node))
