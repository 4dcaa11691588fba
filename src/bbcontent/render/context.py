# topmark:header:start
#
#   project      : BBContent
#   file         : context.py
#   file_relpath : src/bbcontent/render/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render context passed explicitly to every resolution.

The template engine owns the render state (current mode, the parent being
rendered, the slot being rendered within it). Instead of reading that state from
a shared renderer, callers snapshot it into a `RenderContext` and hand it to
[`AttributeResolver.resolve`][bbcontent.resolver.engine.AttributeResolver.resolve].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from bbcontent.content.contracts import ContentLike

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class RenderContext:
    """Immutable snapshot of the render state for one resolution.

    Attributes:
        mode (str | None): Current render mode label (e.g. ``"edit"``), if any.
        container_node (object | None): The node being rendered as the enclosing
            parent. Typically a `ContentLike`, but templates may set other objects.
        current_slot_name (str | None): Name of the slot being rendered within
            ``container_node``.
        current_object (ContentLike | None): The node currently being rendered; used
            when ``resolve`` is called without an explicit node.
        params (Mapping[str, Any]): Arbitrary named render params (e.g. ``class``).
    """

    mode: str | None = None
    container_node: object | None = None
    current_slot_name: str | None = None
    current_object: ContentLike | None = None
    params: Mapping[str, Any] = field(default_factory=lambda: {})

    def get_param(self, name: str) -> Any | None:
        """Return render param ``name``, or None when unset."""
        return self.params.get(name)

    def current_default_node(self) -> ContentLike | None:
        """Return the node occupying the current slot of the container node.

        Returns:
            ContentLike | None: The slot's node, or None when there is no content
            container, no current slot, or the slot is empty.
        """
        container: object | None = self.container_node
        if not isinstance(container, ContentLike) or self.current_slot_name is None:
            return None
        return container.get_element(self.current_slot_name)
