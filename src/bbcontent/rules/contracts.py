# topmark:header:start
#
#   project      : BBContent
#   file         : contracts.py
#   file_relpath : src/bbcontent/rules/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contract for attribute rules (resolver-facing).

Rules are instantiated objects that are *callable*; the resolver invokes them as
``rule(state)`` where ``state`` is a `ResolutionState`.

Lifecycle
---------
1) ``rule.may_proceed(state)`` gates execution.
2) If allowed, ``rule.run(state)`` writes into ``state.attributes``.

Rules never raise for expected control flow and never depend on one another's
output, except that ``class`` tokens accumulate in rule order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bbcontent.resolver.state import ResolutionState


class Rule(Protocol):
    """Protocol for a single attribute rule.

    Implementations typically subclass [`bbcontent.rules.base.BaseRule`][].
    """

    name: str

    def may_proceed(self, state: ResolutionState) -> bool:
        """Return whether the rule applies to the current state."""
        ...

    def run(self, state: ResolutionState) -> None:
        """Write the rule's attributes into ``state.attributes``."""
        ...

    def __call__(self, state: ResolutionState) -> ResolutionState:
        """Run the rule lifecycle: gate → run (optional).

        Args:
            state (ResolutionState): The per-call resolution state.

        Returns:
            ResolutionState: The same state object, for chaining.
        """
        ...
