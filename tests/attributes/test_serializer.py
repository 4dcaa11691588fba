# topmark:header:start
#
#   project      : BBContent
#   file         : test_serializer.py
#   file_relpath : tests/attributes/test_serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the attribute serializer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbcontent.attributes.accumulator import AttributeAccumulator
from bbcontent.attributes.keys import AttrKey
from bbcontent.attributes.serializer import format_attribute_value, serialize_attributes
from tests.conftest import parametrize

if TYPE_CHECKING:
    from bbcontent.attributes.accumulator import AttributeValue


@parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (5, "5"),
        (0, "0"),
        (1.5, "1.5"),
        ("edit", "edit"),
        ("", ""),
        (["a", "b", "c"], "a b c"),
        ([], ""),
    ],
)
def test_format_attribute_value(value: AttributeValue, expected: str) -> None:
    """Booleans become literals, lists are space-joined, scalars are stringified."""
    assert format_attribute_value(value) == expected


def test_fresh_accumulator_renders_empty_class() -> None:
    """An empty class list still renders; unset keys are omitted."""
    assert serialize_attributes(AttributeAccumulator()) == ' class=""'


def test_serialize_in_insertion_order_with_leading_spaces() -> None:
    """Each pair is rendered as ` name="value"` in accumulator order."""
    acc = AttributeAccumulator()
    acc.add_class("bb-droppable", "bb-dnd")
    acc.set(AttrKey.IDENTIFIER, "Foo/Bar(1)")
    acc.set(AttrKey.MAX_ENTRY, 3)
    acc.set(AttrKey.RENDER_MODE, "")
    acc.set("data-flag", True)
    assert serialize_attributes(acc) == (
        ' class="bb-droppable bb-dnd"'
        ' data-bb-identifier="Foo/Bar(1)"'
        ' data-bb-maxentry="3"'
        ' data-rendermode=""'
        ' data-flag="true"'
    )


def test_values_are_not_escaped() -> None:
    """Values are emitted verbatim."""
    acc = AttributeAccumulator()
    acc.set(AttrKey.RTE_CONFIG, "a&b")
    assert ' data-rteconfig="a&b"' in serialize_attributes(acc)
