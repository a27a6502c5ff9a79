"""
Sessions module.

Stateless session tokens for app users, bound to each user's last login.

Public API:
- ISessionService: Interface for the session lifecycle
- SessionCodec, derive_fingerprint: Token signing and fingerprinting
- SessionToken, SessionPayload, LogoutResult: Data models
- Session exceptions: UnauthorizedError, SessionExpiredError, SessionInvalidError
"""

from .interfaces import ISessionService
from .codec import SessionCodec, derive_fingerprint, NO_LOGIN_MARKER
from .models import (
    LogInRequest,
    LogoutResult,
    SessionPayload,
    SessionToken,
)
from .exceptions import (
    UnauthorizedError,
    SessionExpiredError,
    SessionInvalidError,
)

__all__ = [
    # Interface
    "ISessionService",
    # Codec
    "SessionCodec",
    "derive_fingerprint",
    "NO_LOGIN_MARKER",
    # Models
    "LogInRequest",
    "LogoutResult",
    "SessionPayload",
    "SessionToken",
    # Exceptions
    "UnauthorizedError",
    "SessionExpiredError",
    "SessionInvalidError",
]
