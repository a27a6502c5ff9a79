"""
Profile operations for authenticated users.

Callers must have validated the session first; these methods trust the
user ID they are given.
"""

import logging

from shared.exceptions import RequiredFieldError

from .interfaces import IUserDirectory, IUserService
from .models import UserProfile, to_unix_time
from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Reads and edits the profile of the current user."""

    def __init__(self, users: IUserDirectory):
        self._users = users

    async def get_profile(self, user_id: int) -> UserProfile:
        """Get the public profile of a user."""
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return UserProfile(
            id=user.ext_id,
            full_name=user.full_name,
            updated_at=to_unix_time(user.updated_at) or 0,
        )

    async def update_profile(self, user_id: int, full_name: str) -> None:
        """
        Change the user's display name.

        Only ``full_name`` is written; ``last_log_in`` is left alone so the
        caller's session stays valid.
        """
        full_name = (full_name or "").strip()
        if not full_name:
            raise RequiredFieldError("fullName")

        self._users.update_by_id(user_id, full_name=full_name)
        logger.debug(f"Updated profile of user id={user_id}")
