# topmark:header:start
#
#   project      : BBContent
#   file         : base.py
#   file_relpath : src/bbcontent/rules/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based attribute rules.

The resolver invokes rules as *callables*. `BaseRule` implements the common
lifecycle:

    state = rule(state)  # internally: may_proceed → run?

Design goals
------------
- Single place for per-rule bookkeeping (applied rule names, tracing).
- Clear separation of concerns: gating in ``may_proceed()``, writes in ``run()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bbcontent.config.logging import get_logger

if TYPE_CHECKING:
    from bbcontent.config.logging import BBContentLogger
    from bbcontent.resolver.state import ResolutionState

logger: BBContentLogger = get_logger(__name__)


@dataclass
class BaseRule:
    """Reusable foundation for attribute rules.

    Subclass this to implement a concrete rule by overriding ``may_proceed()``
    and ``run()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable rule identifier for logs and ``state.applied_rules``.
    """

    name: str

    def __call__(self, state: ResolutionState) -> ResolutionState:
        """Invoke the rule lifecycle: gate → run (if allowed).

        Args:
            state (ResolutionState): The per-call resolution state.

        Returns:
            ResolutionState: The same state instance after mutation.
        """
        if not self.may_proceed(state):
            logger.trace("Rule %s skipped for %s", self.name, state.node.uid)
            return state

        self.run(state)
        state.applied_rules.append(self.name)
        logger.trace("Rule %s applied for %s: %r", self.name, state.node.uid, state.attributes)
        return state

    def may_proceed(self, state: ResolutionState) -> bool:
        """Return whether the rule should run given the current state.

        Default: ``True`` (always run).

        Args:
            state (ResolutionState): The per-call resolution state.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return True

    def run(self, state: ResolutionState) -> None:
        """Perform the rule's work, writing into ``state.attributes``.

        Args:
            state (ResolutionState): The per-call resolution state.
        """
        pass
