# topmark:header:start
#
#   project      : BBContent
#   file         : __init__.py
#   file_relpath : src/bbcontent/security/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Authorization contract and the permission gate built on top of it."""

from __future__ import annotations

from bbcontent.security.authorization import (
    AuthorizationService,
    CredentialsNotFoundError,
    StaticAuthorizationService,
)
from bbcontent.security.gate import PermissionGate

__all__: list[str] = [
    "AuthorizationService",
    "CredentialsNotFoundError",
    "PermissionGate",
    "StaticAuthorizationService",
]
