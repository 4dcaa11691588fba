# topmark:header:start
#
#   project      : BBContent
#   file         : contracts.py
#   file_relpath : src/bbcontent/content/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contract for content nodes (resolver-facing).

Content nodes are owned by the surrounding CMS; the resolver only reads them.
Any object exposing the members below can be resolved, which keeps the engine
independent from how content is persisted or loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


@runtime_checkable
class ContentLike(Protocol):
    """Protocol for a renderable content node.

    Attributes:
        uid (str): Opaque, stable identifier.
        type_name (str): Fully-qualified type identifier (backslash-separated).
        is_container (bool): True for collection types holding an ordered list of children.
        is_element_content (bool): True for leaf element types.
        accepted_child_types (Sequence[str]): Whitelisted child type names (containers only).
        max_entries (int): Maximum number of children (containers only); 0 is unbounded.
    """

    uid: str
    type_name: str
    is_container: bool
    is_element_content: bool
    accepted_child_types: Sequence[str]
    max_entries: int

    def get_element(self, name: str) -> ContentLike | None:
        """Return the node occupying slot ``name``, or None.

        Args:
            name (str): Slot name.

        Returns:
            ContentLike | None: The child node, if any.
        """
        ...

    def get_default_options(self) -> Mapping[str, Mapping[str, Any]]:
        """Return the per-slot default configuration.

        Returns:
            Mapping[str, Mapping[str, Any]]: Slot name to its default configuration.
        """
        ...
