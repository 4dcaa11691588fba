# topmark:header:start
#
#   project      : BBContent
#   file         : model.py
#   file_relpath : src/bbcontent/content/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory content node implementation.

`ContentNode` is the reference implementation of
[`ContentLike`][bbcontent.content.contracts.ContentLike], used by the scenario
loader and the test suite. Template integrations may pass their own objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from bbcontent.constants import UNBOUNDED_MAX_ENTRIES

if TYPE_CHECKING:
    from collections.abc import Mapping


class ContentKind(str, Enum):
    """Structural kind of a content node.

    Kinds are mutually exclusive: a node is either a container, an element leaf,
    or plain (composite) content.
    """

    CONTAINER = "container"
    ELEMENT = "element"
    PLAIN = "plain"

    @classmethod
    def parse(cls, raw: str | None) -> ContentKind | None:
        """Parse a kind token (case-insensitive), returning None on miss."""
        if raw is None:
            return None
        token: str = raw.strip().lower()
        for member in cls:
            if token in (member.value, member.name.lower()):
                return member
        return None


@dataclass(eq=False)
class ContentNode:
    """A content node with optional named child slots.

    Attributes:
        uid (str): Opaque, stable identifier.
        type_name (str): Fully-qualified type identifier.
        kind (ContentKind): Structural kind (see `ContentKind`).
        accepted_child_types (tuple[str, ...]): Accepted child types (containers only).
        max_entries (int): Maximum entry count (containers only); 0 is unbounded.
        elements (dict[str, ContentNode]): Slot name to the node occupying it.
        default_options (dict[str, dict[str, Any]]): Slot name to its default
            configuration, e.g. ``{"title": {"parameters": {"rte": "lite"}}}``.
    """

    uid: str
    type_name: str
    kind: ContentKind = ContentKind.PLAIN
    accepted_child_types: tuple[str, ...] = ()
    max_entries: int = UNBOUNDED_MAX_ENTRIES
    elements: dict[str, ContentNode] = field(default_factory=lambda: {})
    default_options: dict[str, dict[str, Any]] = field(default_factory=lambda: {})

    @property
    def is_container(self) -> bool:
        """Whether this node holds an ordered list of children."""
        return self.kind is ContentKind.CONTAINER

    @property
    def is_element_content(self) -> bool:
        """Whether this node is a leaf element."""
        return self.kind is ContentKind.ELEMENT

    def get_element(self, name: str) -> ContentNode | None:
        """Return the node occupying slot ``name``, or None."""
        return self.elements.get(name)

    def get_default_options(self) -> Mapping[str, Mapping[str, Any]]:
        """Return the per-slot default configuration."""
        return self.default_options

    def __repr__(self) -> str:
        return f"ContentNode(uid={self.uid!r}, type_name={self.type_name!r}, kind={self.kind.value})"
