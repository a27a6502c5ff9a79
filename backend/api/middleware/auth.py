"""
Request gate for app clients and user sessions.

Two headers are recognised:
- clientSecret: shared secret of the third-party app, checked on log-in only
- userAccessToken: session token, checked on every user endpoint
"""

import hmac
from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader

from shared.config import get_settings
from shared.models import UserAccess
from modules.sessions.interfaces import ISessionService
from modules.sessions.exceptions import UnauthorizedError

from ..dependencies import get_session_service

CLIENT_SECRET_HEADER = "clientSecret"
USER_ACCESS_TOKEN_HEADER = "userAccessToken"

# Header extractors; missing headers are reported by our own errors
client_secret_scheme = APIKeyHeader(name=CLIENT_SECRET_HEADER, auto_error=False)
user_access_token_scheme = APIKeyHeader(name=USER_ACCESS_TOKEN_HEADER, auto_error=False)


async def require_client_app(
    client_secret: Optional[str] = Depends(client_secret_scheme),
) -> None:
    """
    Dependency that requires the app's client secret.

    Runs before the request body is acted on, so a wrong secret never
    reaches humanID.
    """
    expected = get_settings().client_app_secret
    if not expected:
        raise UnauthorizedError("Client authentication not configured")

    if client_secret is None or not hmac.compare_digest(
        client_secret.encode("utf-8"), expected.encode("utf-8")
    ):
        raise UnauthorizedError("Invalid client credentials")


async def get_user_access(
    user_access_token: Optional[str] = Depends(user_access_token_scheme),
    sessions: ISessionService = Depends(get_session_service),
) -> UserAccess:
    """
    Dependency that requires a live user session.

    Usage:
        @router.get("/profile")
        async def get_profile(user: UserAccess = Depends(get_user_access)):
            return {"user_id": user.ext_id}
    """
    return await sessions.validate(user_access_token)


async def get_user_access_token(
    user_access_token: Optional[str] = Depends(user_access_token_scheme),
) -> Optional[str]:
    """Dependency that passes the raw session token through unchecked."""
    return user_access_token


# Type aliases for cleaner route definitions
RequireClientApp = Depends(require_client_app)
RequireSession = Depends(get_user_access)
