# topmark:header:start
#
#   project      : BBContent
#   file         : accumulator.py
#   file_relpath : src/bbcontent/attributes/accumulator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered attribute accumulator.

The accumulator is seeded with ``class`` (empty list), ``data-bb-identifier`` and
``data-bb-maxentry`` (both unset), so these always serialize first and in that
order. Other keys are appended in the order rules first write them.

``class`` is append-only and keeps duplicates; every other key is overwritten
on write.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union, cast

from bbcontent.attributes.keys import AttrKey

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

AttributeValue = Union[None, bool, int, float, str, list[str]]


class AttributeAccumulator:
    """Mapping of attribute name to value, created fresh for each resolution."""

    def __init__(self) -> None:
        self._values: dict[str, AttributeValue] = {
            AttrKey.CLASS: [],
            AttrKey.IDENTIFIER: None,
            AttrKey.MAX_ENTRY: None,
        }

    @property
    def classes(self) -> list[str]:
        """A copy of the accumulated class tokens."""
        return list(self._class_list())

    def _class_list(self) -> list[str]:
        return cast("list[str]", self._values[AttrKey.CLASS])

    def add_class(self, *tokens: str) -> None:
        """Append class tokens (duplicates are kept)."""
        self._class_list().extend(tokens)

    def extend_classes(self, tokens: Iterable[str]) -> None:
        """Append every token of ``tokens`` to ``class``."""
        self._class_list().extend(tokens)

    def set(self, key: str, value: AttributeValue) -> None:
        """Set ``key`` to ``value``, overwriting any previous value.

        Raises:
            ValueError: If ``key`` is ``class`` (use `add_class`).
        """
        if key == AttrKey.CLASS:
            raise ValueError("'class' is append-only; use add_class()")
        self._values[key] = value

    def get(self, key: str) -> AttributeValue:
        """Return the value of ``key`` or None when unset."""
        value: AttributeValue = self._values.get(key)
        return list(value) if isinstance(value, list) else value

    def items(self) -> Iterator[tuple[str, AttributeValue]]:
        """Iterate over ``(name, value)`` pairs in insertion order, unset keys included."""
        for key in self._values:
            yield key, self.get(key)

    def as_dict(self) -> dict[str, AttributeValue]:
        """Return a detached copy of the set attributes (unset keys dropped)."""
        return {key: value for key, value in self.items() if value is not None}

    def __contains__(self, key: object) -> bool:
        return self._values.get(key) is not None if isinstance(key, str) else False

    def __repr__(self) -> str:
        return f"AttributeAccumulator({self.as_dict()!r})"
