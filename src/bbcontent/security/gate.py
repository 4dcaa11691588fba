# topmark:header:start
#
#   project      : BBContent
#   file         : gate.py
#   file_relpath : src/bbcontent/security/gate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Permission gate selecting the resolution mode.

The gate answers a single question: may the current actor view this node?
Missing credentials are a normal condition (anonymous visitors) and yield
False; any other failure of the authorization service propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bbcontent.config.logging import get_logger
from bbcontent.constants import DEFAULT_VIEW_ACTION
from bbcontent.security.authorization import CredentialsNotFoundError

if TYPE_CHECKING:
    from bbcontent.config.logging import BBContentLogger
    from bbcontent.content.contracts import ContentLike
    from bbcontent.security.authorization import AuthorizationService

logger: BBContentLogger = get_logger(__name__)


@dataclass(frozen=True)
class PermissionGate:
    """Decide whether the current actor may view a content node.

    Attributes:
        authorization (AuthorizationService): External authorization service.
        action (str): Action checked on the node.
    """

    authorization: AuthorizationService
    action: str = DEFAULT_VIEW_ACTION

    def is_granted(self, node: ContentLike) -> bool:
        """Return whether ``action`` is granted on ``node`` for the current actor.

        Args:
            node (ContentLike): The node being resolved.

        Returns:
            bool: False without an active session or without credentials,
            otherwise the authorization service's decision.
        """
        try:
            if not self.authorization.has_active_session():
                logger.debug("No active session; %s not granted on %s", self.action, node.uid)
                return False
            granted: bool = self.authorization.is_granted(self.action, node)
        except CredentialsNotFoundError as e:
            logger.debug("Credentials not found while checking %s on %s: %s", self.action, node.uid, e)
            return False

        logger.trace("%s on %s: granted=%s", self.action, node.uid, granted)
        return granted
