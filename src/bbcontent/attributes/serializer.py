# topmark:header:start
#
#   project      : BBContent
#   file         : serializer.py
#   file_relpath : src/bbcontent/attributes/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render an accumulator into an HTML attribute string.

Each set attribute renders as `` name="value"`` (note the leading space), so
the result can be appended directly after a tag name. Values are not escaped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bbcontent.attributes.accumulator import AttributeAccumulator, AttributeValue


def format_attribute_value(value: AttributeValue) -> str:
    """Format a single attribute value.

    Args:
        value (AttributeValue): A non-None attribute value.

    Returns:
        str: ``"true"``/``"false"`` for booleans, space-joined tokens for lists,
        ``str(value)`` otherwise.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return " ".join(str(token) for token in value)
    return str(value)


def serialize_attributes(attributes: AttributeAccumulator) -> str:
    """Serialize every set attribute of ``attributes``.

    Args:
        attributes (AttributeAccumulator): The accumulator to render.

    Returns:
        str: The concatenated `` name="value"`` pairs; unset keys are omitted.
    """
    return "".join(
        f' {key}="{format_attribute_value(value)}"'
        for key, value in attributes.items()
        if value is not None
    )
