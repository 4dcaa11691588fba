# topmark:header:start
#
#   project      : BBContent
#   file         : options.py
#   file_relpath : src/bbcontent/resolver/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call resolution options.

Template helpers pass options as a plain mapping (``{"class": "a b", "dropzone":
False}``). `ResolutionOptions.from_mapping` validates that mapping up front and
fails fast with `InvalidOptionsError` instead of coercing unexpected shapes.
The only sanctioned flexibility is ``class`` given either as a whitespace
separated string or as a list of tokens.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, cast

from bbcontent.errors import InvalidOptionsError

OPTION_CLASS: Final[str] = "class"
OPTION_DROPZONE: Final[str] = "dropzone"
OPTION_DRAGGABLE: Final[str] = "draggable"

KNOWN_OPTIONS: Final[frozenset[str]] = frozenset({OPTION_CLASS, OPTION_DROPZONE, OPTION_DRAGGABLE})


def normalize_class_tokens(value: object, *, source: str) -> list[str] | None:
    """Normalize a class value to a token list.

    Args:
        value (object): ``None``, a whitespace separated string, or a list/tuple of strings.
        source (str): Where the value comes from, used in error messages.

    Returns:
        list[str] | None: The tokens, or None when ``value`` is None.

    Raises:
        InvalidOptionsError: If ``value`` has any other shape.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        items: list[Any] = list(cast("list[Any] | tuple[Any, ...]", value))
        if all(isinstance(item, str) for item in items):
            return [str(item) for item in items]
    raise InvalidOptionsError(
        f"Invalid {source}: expected a string or a list of strings, got {value!r}"
    )


def _optional_bool(options: Mapping[str, Any], key: str) -> bool | None:
    value: Any | None = options.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise InvalidOptionsError(f"Invalid option '{key}': expected a boolean, got {value!r}")


@dataclass(frozen=True)
class ResolutionOptions:
    """Validated per-call options.

    Attributes:
        css_class (tuple[str, ...] | None): Extra class tokens (the ``class`` option).
        dropzone (bool | None): Whether a container accepts drops; None means default (True).
        draggable (bool | None): Whether the node can be dragged; None means default (True).
    """

    css_class: tuple[str, ...] | None = None
    dropzone: bool | None = None
    draggable: bool | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | ResolutionOptions | None) -> ResolutionOptions:
        """Build validated options from a caller mapping.

        Args:
            options (Mapping[str, Any] | ResolutionOptions | None): Raw options; an
                existing `ResolutionOptions` is returned as is.

        Returns:
            ResolutionOptions: The validated options.

        Raises:
            InvalidOptionsError: On unknown keys or ill-typed values.
        """
        if options is None:
            return cls()
        if isinstance(options, ResolutionOptions):
            return options
        if not isinstance(options, Mapping):
            raise InvalidOptionsError(f"Invalid options: expected a mapping, got {options!r}")

        unknown: list[str] = sorted(str(k) for k in options if k not in KNOWN_OPTIONS)
        if unknown:
            raise InvalidOptionsError(f"Invalid options: unknown key(s) {', '.join(unknown)}")

        tokens: list[str] | None = normalize_class_tokens(
            options.get(OPTION_CLASS), source=f"option '{OPTION_CLASS}'"
        )
        return cls(
            css_class=tuple(tokens) if tokens is not None else None,
            dropzone=_optional_bool(options, OPTION_DROPZONE),
            draggable=_optional_bool(options, OPTION_DRAGGABLE),
        )
