"""
Session service implementation.

Orchestrates humanID login, session rotation, validation and logout on top
of the stateless SessionCodec. The only state is each user's
``last_log_in`` column in the user directory.

Concurrent logins or refreshes for the same user race on ``last_log_in``;
the last write wins and the other freshly minted token is already stale.
That is accepted: there is at most one live session per user.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from shared.exceptions import RequiredFieldError
from shared.models import UserAccess
from modules.identity.interfaces import IIdentityVerifier
from modules.users.interfaces import IUserDirectory
from modules.users.models import to_unix_time
from modules.users.names import generate_display_name

from .codec import SessionCodec
from .interfaces import ISessionService
from .models import LogoutResult, SessionToken
from .exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def generate_ext_id(timestamp: int) -> str:
    """
    External ID for a new user: the creation time in epoch seconds.

    Two first-time logins within the same second get the same value.
    """
    return str(int(timestamp))


class SessionService(ISessionService):
    """
    Session lifecycle backed by the user directory.

    Implements ISessionService.
    """

    def __init__(
        self,
        codec: SessionCodec,
        users: IUserDirectory,
        identity: IIdentityVerifier,
        ttl_seconds: int,
        clock: Callable[[], float] = time.time,
        name_generator: Callable[[], str] = generate_display_name,
    ):
        self._codec = codec
        self._users = users
        self._identity = identity
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._name_generator = name_generator

    def _now(self) -> int:
        # Truncated: tokens are checked against the current whole second,
        # so iat must never lie ahead of it
        return int(self._clock())

    async def login(self, exchange_token: str) -> SessionToken:
        """Redeem a humanID exchange token into a new session."""
        if not exchange_token:
            raise RequiredFieldError("exchangeToken")

        user_hash = await self._identity.verify_exchange_token(exchange_token)

        now = self._now()
        user = self._users.find_or_create(
            user_hash,
            ext_id=generate_ext_id(now),
            full_name=self._name_generator(),
        )

        return await self.rotate_session(user.id, user.ext_id, now)

    async def rotate_session(self, user_id: int, ext_id: str, timestamp: int) -> SessionToken:
        """
        Start a new session for a user, ending any previous one.

        Writing ``last_log_in`` changes the user's fingerprint, which is what
        invalidates tokens minted before this call.
        """
        logged_in_at = datetime.fromtimestamp(timestamp, tz=timezone.utc)
        self._users.update_by_id(user_id, last_log_in=logged_in_at, updated_at=logged_in_at)

        fingerprint = self._codec.derive_fingerprint(ext_id, timestamp)
        session = self._codec.mint_token(ext_id, fingerprint, timestamp, self._ttl_seconds)

        logger.info(f"Started session for user id={user_id} expiredAt={session.expired_at}")
        return session

    async def validate(self, token: Optional[str]) -> UserAccess:
        """Resolve a session token to its user."""
        payload = self._codec.parse_token(token)

        user = self._users.find_by_ext_id(payload.user_id)
        if user is None:
            raise UnauthorizedError("Unknown user")

        if not self._codec.fingerprint_matches(
            payload.session_id, user.ext_id, to_unix_time(user.last_log_in)
        ):
            raise UnauthorizedError("Session is no longer active")

        return UserAccess(id=user.id, ext_id=user.ext_id)

    async def refresh(self, user: UserAccess) -> SessionToken:
        """Replace the (already validated) session of a user with a new one."""
        return await self.rotate_session(user.id, user.ext_id, self._now())

    async def end_session(self, user_id: int) -> None:
        """Clear ``last_log_in`` so no existing token matches any more."""
        self._users.update_by_id(
            user_id,
            last_log_in=None,
            updated_at=datetime.fromtimestamp(self._now(), tz=timezone.utc),
        )
        logger.info(f"Ended session for user id={user_id}")

    async def logout(self, token: Optional[str]) -> LogoutResult:
        """Log out the session behind a token, ignoring invalid sessions."""
        try:
            user = await self.validate(token)
        except UnauthorizedError as e:
            logger.error(f"failed to validate user session. Error={e.message}")
            return LogoutResult.IGNORED_INVALID_SESSION

        await self.end_session(user.id)
        return LogoutResult.OK
