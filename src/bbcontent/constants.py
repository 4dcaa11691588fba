# topmark:header:start
#
#   project      : BBContent
#   file         : constants.py
#   file_relpath : src/bbcontent/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BBContent Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

BBCONTENT_VERSION: str = get_version("bbcontent")

# Config file names looked up during discovery (nearest directory wins):
CONFIG_FILE_NAME: str = "bbcontent.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "bbcontent"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "BBCONTENT_LOG_LEVEL"

# Content type naming defaults
DEFAULT_CONTENT_NAMESPACE: Final[str] = "BackBee\\ClassContent\\"
DEFAULT_ELEMENT_NAMESPACE: Final[str] = "Element\\"
DEFAULT_CONTAINER_TYPE: Final[str] = "ContentSet"

# Authorization
DEFAULT_VIEW_ACTION: Final[str] = "VIEW"

# Render context lookups
DEFAULT_CLASS_PARAM: Final[str] = "class"
DEFAULT_RTE_PARAMETER: Final[str] = "rte"

# A container whose max entry count is 0 accepts any number of children.
UNBOUNDED_MAX_ENTRIES: Final[int] = 0

