# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/attributes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute accumulation and serialization."""

from __future__ import annotations

from bbcontent.attributes.accumulator import AttributeAccumulator, AttributeValue
from bbcontent.attributes.keys import AttrKey, ClassToken
from bbcontent.attributes.serializer import format_attribute_value, serialize_attributes

__all__: list[str] = [
    "AttrKey",
    "AttributeAccumulator",
    "AttributeValue",
    "ClassToken",
    "format_attribute_value",
    "serialize_attributes",
]
