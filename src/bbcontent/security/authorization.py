# topmark:header:start
#
#   project      : BBContent
#   file         : authorization.py
#   file_relpath : src/bbcontent/security/authorization.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Authorization service contract.

The CMS security layer is an external collaborator. BBContent only needs to
know whether an actor session exists and whether an action is granted on a node.
A distinct `CredentialsNotFoundError` signals "no credentials available", which
callers must be able to tell apart from a denial or a failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from bbcontent.errors import BBContentError


class CredentialsNotFoundError(BBContentError):
    """The authorization service has no credentials to evaluate the request."""


class AuthorizationService(Protocol):
    """Protocol for the external authorization service."""

    def has_active_session(self) -> bool:
        """Return whether a valid actor session/token exists.

        Raises:
            CredentialsNotFoundError: If no token storage is available.
        """
        ...

    def is_granted(self, action: str, subject: object) -> bool:
        """Return whether ``action`` is granted on ``subject``.

        Args:
            action (str): Action name (e.g. ``"VIEW"``).
            subject (object): The object the action applies to.

        Returns:
            bool: True if granted.

        Raises:
            CredentialsNotFoundError: When no credentials are available.
        """
        ...


@dataclass
class StaticAuthorizationService:
    """In-memory authorization service with a fixed decision table.

    Used by scenario files and tests. Grants are keyed by node ``uid``.

    Attributes:
        session (bool): Whether an actor session is active.
        grant_all (bool): Grant every action on every subject.
        granted_uids (frozenset[str]): Subjects on which every action is granted.
        credentials_missing (bool): Raise `CredentialsNotFoundError` on every check.
    """

    session: bool = True
    grant_all: bool = False
    granted_uids: frozenset[str] = field(default_factory=lambda: frozenset[str]())
    credentials_missing: bool = False

    def has_active_session(self) -> bool:
        """Return whether an actor session is active."""
        return self.session

    def is_granted(self, action: str, subject: object) -> bool:
        """Return whether ``action`` is granted on ``subject``.

        Raises:
            CredentialsNotFoundError: If configured with ``credentials_missing``.
        """
        if self.credentials_missing:
            raise CredentialsNotFoundError(f"No credentials available to check {action!r}")
        if self.grant_all:
            return True
        uid: object | None = getattr(subject, "uid", None)
        return isinstance(uid, str) and uid in self.granted_uids
