# topmark:header:start
#
#   project      : BBContent
#   file         : io.py
#   file_relpath : src/bbcontent/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and query TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Getters
never raise: ill-typed values are logged and replaced by ``None`` or an empty
table so that user mistakes do not crash resolution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from bbcontent.config.keys import Toml
from bbcontent.config.logging import get_logger
from bbcontent.constants import (
    DEFAULT_CLASS_PARAM,
    DEFAULT_CONTAINER_TYPE,
    DEFAULT_CONTENT_NAMESPACE,
    DEFAULT_ELEMENT_NAMESPACE,
    DEFAULT_RTE_PARAMETER,
    DEFAULT_VIEW_ACTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from bbcontent.config.logging import BBContentLogger

TomlTable = dict[str, Any]

logger: BBContentLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return BBContent's runtime defaults as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.

    Returns:
        TomlTable: A TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.SECTION_CONTENT: {
            Toml.KEY_NAMESPACE: DEFAULT_CONTENT_NAMESPACE,
            Toml.KEY_ELEMENT_NAMESPACE: DEFAULT_ELEMENT_NAMESPACE,
            Toml.KEY_CONTAINER_TYPE: DEFAULT_CONTAINER_TYPE,
        },
        Toml.SECTION_SECURITY: {
            Toml.KEY_VIEW_ACTION: DEFAULT_VIEW_ACTION,
        },
        Toml.SECTION_RENDER: {
            Toml.KEY_CLASS_PARAM: DEFAULT_CLASS_PARAM,
            Toml.KEY_RTE_PARAMETER: DEFAULT_RTE_PARAMETER,
        },
    }


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        TomlkitParseError: If the document is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``bbcontent.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: The sub-table, or an empty dict when missing or not a table.
    """
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for [%s], got %r; ignoring", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring", key, value)
    return None
