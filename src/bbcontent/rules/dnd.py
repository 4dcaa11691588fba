# topmark:header:start
#
#   project      : BBContent
#   file         : dnd.py
#   file_relpath : src/bbcontent/rules/dnd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Drag-and-drop rule.

Two independent flags are computed:

- *droppable*: the node is a container and the ``dropzone`` option is not False.
- *draggable*: the node type is neither in the element namespace nor exactly the
  base container type, and the ``draggable`` option is not False.

Containers always receive ``bb-droppable``, whatever ``dropzone`` says; the
droppable flag only contributes to ``bb-dnd``. ``bb-dnd`` is appended when either
flag holds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbcontent.attributes.keys import ClassToken
from bbcontent.content.types import is_container_base_type, is_element_type
from bbcontent.rules.base import BaseRule

if TYPE_CHECKING:
    from bbcontent.resolver.state import ResolutionState


def is_droppable(state: ResolutionState) -> bool:
    """Whether the node accepts dropped children."""
    return state.node.is_container and state.options.dropzone is not False


def is_draggable(state: ResolutionState) -> bool:
    """Whether the node can be dragged around by the editor.

    Element leaves and the base container type are matched by type name, not by
    capability: subtypes of the base container remain draggable.
    """
    type_name: str = state.node.type_name
    if is_element_type(type_name, state.config) or is_container_base_type(type_name, state.config):
        return False
    return state.options.draggable is not False


class DragAndDropRule(BaseRule):
    """Append drag-and-drop class tokens.

    Writes:
      - class (append): ``bb-droppable``, ``bb-dnd``
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, state: ResolutionState) -> None:
        """Append ``bb-droppable`` for containers, then ``bb-dnd`` when applicable.

        Args:
            state (ResolutionState): The per-call resolution state.
        """
        droppable: bool = is_droppable(state)
        if state.node.is_container:
            state.attributes.add_class(ClassToken.DROPPABLE)

        if droppable or is_draggable(state):
            state.attributes.add_class(ClassToken.DND)
