"""
Session module interface.

The API layer depends on ISessionService, not the concrete implementation.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import UserAccess

from .models import LogoutResult, SessionToken


@runtime_checkable
class ISessionService(Protocol):
    """
    Interface for the session lifecycle.

    A user has at most one live session token. Starting a new session
    (login or refresh) or logging out invalidates every earlier token.
    """

    async def login(self, exchange_token: str) -> SessionToken:
        """
        Redeem a humanID exchange token into a new session.

        Creates the user on first login.

        Raises:
            RequiredFieldError: If exchange_token is empty
            IdentityVerificationFailedError: If humanID rejects the token
        """
        ...

    async def rotate_session(self, user_id: int, ext_id: str, timestamp: int) -> SessionToken:
        """
        Start a new session for a user, ending any previous one.

        Args:
            user_id: Internal user ID
            ext_id: User external ID
            timestamp: Login time in epoch seconds
        """
        ...

    async def validate(self, token: Optional[str]) -> UserAccess:
        """
        Resolve a session token to its user.

        Raises:
            UnauthorizedError: If the token is missing, invalid, expired,
                superseded by a newer session, or its user is unknown
        """
        ...

    async def refresh(self, user: UserAccess) -> SessionToken:
        """Replace the (already validated) session of a user with a new one."""
        ...

    async def end_session(self, user_id: int) -> None:
        """Invalidate every token of a user."""
        ...

    async def logout(self, token: Optional[str]) -> LogoutResult:
        """
        Log out the session behind a token.

        Never raises for an invalid session; reports it instead.
        """
        ...
