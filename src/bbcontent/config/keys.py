# topmark:header:start
#
#   project      : BBContent
#   file         : keys.py
#   file_relpath : src/bbcontent/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names for BBContent configuration.

Keep this module behavior-free; it is a pure namespace for constants so it can be
imported from anywhere without causing cycles.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Canonical TOML section and key names.

    Layout:

        [content]
        namespace = "BackBee\\\\ClassContent\\\\"
        element_namespace = "Element\\\\"
        container_type = "ContentSet"

        [security]
        view_action = "VIEW"

        [render]
        class_param = "class"
        rte_parameter = "rte"
    """

    SECTION_CONTENT: Final[str] = "content"
    KEY_NAMESPACE: Final[str] = "namespace"
    KEY_ELEMENT_NAMESPACE: Final[str] = "element_namespace"
    KEY_CONTAINER_TYPE: Final[str] = "container_type"

    SECTION_SECURITY: Final[str] = "security"
    KEY_VIEW_ACTION: Final[str] = "view_action"

    SECTION_RENDER: Final[str] = "render"
    KEY_CLASS_PARAM: Final[str] = "class_param"
    KEY_RTE_PARAMETER: Final[str] = "rte_parameter"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
