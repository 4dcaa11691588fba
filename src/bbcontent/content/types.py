# topmark:header:start
#
#   project      : BBContent
#   file         : types.py
#   file_relpath : src/bbcontent/content/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for fully-qualified content type names.

Type names use backslash namespace separators (``BackBee\\ClassContent\\Element\\Text``).
Comparisons are made on names normalized to forward slashes so that both
spellings are accepted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bbcontent.config import Config


def normalize_type_name(type_name: str) -> str:
    """Return ``type_name`` with namespace separators normalized to ``/``."""
    return type_name.replace("\\", "/")


def is_element_type(type_name: str, config: Config) -> bool:
    """Return True if ``type_name`` lives in the element namespace.

    This is a namespace check, not a capability check: it matches any type whose
    name contains the configured element prefix, mirroring how element types are
    declared in the CMS.

    Args:
        type_name (str): Fully-qualified type name.
        config (Config): Runtime configuration providing the namespaces.

    Returns:
        bool: True for element namespace types.
    """
    return normalize_type_name(config.element_type_prefix) in normalize_type_name(type_name)


def is_container_base_type(type_name: str, config: Config) -> bool:
    """Return True if ``type_name`` is exactly the base container type (not a subtype)."""
    return normalize_type_name(type_name) == normalize_type_name(config.container_type_name)
