# topmark:header:start
#
#   project      : BBContent
#   file         : classes.py
#   file_relpath : src/bbcontent/rules/classes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class rule: merge caller and render-param class tokens.

Tokens are appended in this order: tokens already present, the ``class`` option,
then the render-context class param. Nothing is written when neither the option
nor the param is set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bbcontent.resolver.options import normalize_class_tokens
from bbcontent.rules.base import BaseRule

if TYPE_CHECKING:
    from bbcontent.resolver.state import ResolutionState


class ClassRule(BaseRule):
    """Append caller-supplied class tokens.

    Writes:
      - class (append)
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__)

    def run(self, state: ResolutionState) -> None:
        """Append option and render-param class tokens.

        Args:
            state (ResolutionState): The per-call resolution state.

        Raises:
            InvalidOptionsError: If the render param has an unsupported shape.
        """
        option_tokens: tuple[str, ...] | None = state.options.css_class
        param_name: str = state.config.class_param
        param_tokens: list[str] | None = normalize_class_tokens(
            state.context.get_param(param_name), source=f"render param '{param_name}'"
        )
        if option_tokens is None and param_tokens is None:
            return

        state.attributes.extend_classes(option_tokens or ())
        state.attributes.extend_classes(param_tokens or ())
