# topmark:header:start
#
#   project      : BBContent
#   file         : rte.py
#   file_relpath : src/bbcontent/rules/rte.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rich-text-editor rule.

A rich-text editor config is only exposed when the node is rendered as the exact
default element of its declared slot. All of the following must hold:

1. the render context has a container node that is a content node but not a
   container type;
2. a current slot name is set;
3. the node occupying that slot exists and has the same uid as the node being
   resolved;
4. the node is element content.

The config itself is read from the slot's default options at
``[<slot>]["parameters"][<rte_parameter>]``; when missing nothing is written.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from bbcontent.attributes.keys import AttrKey
from bbcontent.config.logging import get_logger
from bbcontent.content.contracts import ContentLike
from bbcontent.rules.base import BaseRule

if TYPE_CHECKING:
    from bbcontent.config.logging import BBContentLogger
    from bbcontent.resolver.state import ResolutionState

logger: BBContentLogger = get_logger(__name__)

PARAMETERS_KEY = "parameters"


def lookup_rte_config(container: ContentLike, slot_name: str, rte_parameter: str) -> Any | None:
    """Return ``default_options[slot]["parameters"][rte_parameter]`` or None.

    Args:
        container (ContentLike): The parent content node.
        slot_name (str): Slot name.
        rte_parameter (str): Key of the editor config under ``parameters``.

    Returns:
        Any | None: The configured value, or None at the first missing level.
    """
    slot_options: Any = container.get_default_options().get(slot_name)
    if not isinstance(slot_options, Mapping):
        return None
    parameters: Any = slot_options.get(PARAMETERS_KEY)
    if not isinstance(parameters, Mapping):
        return None
    return parameters.get(rte_parameter)


class RteRule(BaseRule):
    """Set ``data-rteconfig`` for default slot elements.

    Writes:
      - data-rteconfig
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def may_proceed(self, state: ResolutionState) -> bool:
        """Check conditions 1-4 from the module docstring."""
        container: object | None = state.context.container_node
        if not isinstance(container, ContentLike) or container.is_container:
            return False
        if state.context.current_slot_name is None:
            return False

        default_node: ContentLike | None = state.context.current_default_node()
        if default_node is None or default_node.uid != state.node.uid:
            return False
        return state.node.is_element_content

    def run(self, state: ResolutionState) -> None:
        container: ContentLike = cast("ContentLike", state.context.container_node)
        slot_name: str = cast("str", state.context.current_slot_name)
        value: Any | None = lookup_rte_config(container, slot_name, state.config.rte_parameter)
        if value is None:
            logger.debug("No rich-text config declared for slot '%s'", slot_name)
            return
        state.attributes.set(AttrKey.RTE_CONFIG, value)
