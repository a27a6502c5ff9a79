"""
User directory backed by the Supabase ``app_users`` table.
"""

import logging
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import AppUser

logger = logging.getLogger(__name__)

# Postgres unique_violation
_UNIQUE_VIOLATION = "23505"


class UserRepository(BaseRepository[AppUser]):
    """
    Repository for app user records.

    Implements IUserDirectory. All lookups return AppUser models or None.

    Note: This repository does NOT check sessions. The session service is
    responsible for deciding who may read or write a record.
    """

    table_name = "app_users"

    def find_by_id(self, user_id: int) -> Optional[AppUser]:
        """Get a user by internal ID."""
        rows = self._select_where("id", user_id)
        return self._map_to_user(rows[0]) if rows else None

    def find_by_ext_id(self, ext_id: str) -> Optional[AppUser]:
        """Get a user by external ID."""
        rows = self._select_where("ext_id", ext_id)
        return self._map_to_user(rows[0]) if rows else None

    def find_by_user_hash(self, user_hash: str) -> Optional[AppUser]:
        """Get a user by humanID user hash."""
        rows = self._select_where("user_hash", user_hash)
        return self._map_to_user(rows[0]) if rows else None

    def find_or_create(self, user_hash: str, ext_id: str, full_name: str) -> AppUser:
        """
        Get the user for a humanID user hash, creating it if absent.

        A concurrent insert for the same hash loses on the unique index;
        the loser re-reads and returns the winner's row.

        Args:
            user_hash: Identity handle returned by humanID.
            ext_id: External ID to assign when creating.
            full_name: Display name to assign when creating.

        Returns:
            The existing or newly created user.
        """
        existing = self.find_by_user_hash(user_hash)
        if existing:
            return existing

        try:
            row = self._insert({
                "ext_id": ext_id,
                "user_hash": user_hash,
                "full_name": full_name,
            })
        except APIError as e:
            if e.code != _UNIQUE_VIOLATION:
                raise
            logger.debug("Concurrent insert for the same user hash, re-reading")
            existing = self.find_by_user_hash(user_hash)
            if existing is None:
                raise
            return existing

        logger.info(f"Created app user id={row['id']} ext_id={row['ext_id']}")
        return self._map_to_user(row)

    def update_by_id(self, user_id: int, **fields: Any) -> None:
        """Update the given columns of one user."""
        count = self._update_where("id", user_id, fields)
        logger.debug(f"Updated app user id={user_id} fields={sorted(fields)} rows={count}")

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_user(self, data: dict[str, Any]) -> AppUser:
        """Map database row to AppUser model."""
        return AppUser(
            id=int(data["id"]),
            ext_id=str(data["ext_id"]),
            user_hash=data["user_hash"],
            full_name=data.get("full_name"),
            last_log_in=data.get("last_log_in"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
