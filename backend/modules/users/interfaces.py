"""
Users module interfaces.

The session module depends on IUserDirectory rather than the Supabase
repository, so it can be exercised against an in-memory directory.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import AppUser, UserProfile


@runtime_checkable
class IUserDirectory(Protocol):
    """
    Storage contract for app users.

    Lookups return None when the user does not exist.
    """

    def find_by_id(self, user_id: int) -> Optional[AppUser]:
        ...

    def find_by_ext_id(self, ext_id: str) -> Optional[AppUser]:
        ...

    def find_by_user_hash(self, user_hash: str) -> Optional[AppUser]:
        ...

    def find_or_create(self, user_hash: str, ext_id: str, full_name: str) -> AppUser:
        """
        Get the user for ``user_hash``, creating it with the given
        ``ext_id`` and ``full_name`` when none exists yet.
        """
        ...

    def update_by_id(self, user_id: int, **fields: Any) -> None:
        """
        Update the given columns of one user.

        datetime values are stored as UTC timestamps; None clears a column.
        """
        ...


@runtime_checkable
class IUserService(Protocol):
    """Profile operations for an already authenticated user."""

    async def get_profile(self, user_id: int) -> UserProfile:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def update_profile(self, user_id: int, full_name: str) -> None:
        """
        Raises:
            RequiredFieldError: If full_name is blank
        """
        ...
