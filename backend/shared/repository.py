"""
Base repository class for database access.

Wraps the Supabase client so that table access and row mapping live in
one place per aggregate.
"""

from datetime import datetime, timezone
from typing import Any, TypeVar, Generic
from supabase import Client


T = TypeVar("T")


def to_db_value(value: Any) -> Any:
    """Serialize a Python value for a Supabase insert/update payload."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    return value


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses set ``table_name`` and implement domain-specific data access
    methods, mapping rows to Pydantic models internally.

    Example:
        class UserRepository(BaseRepository[AppUser]):
            table_name = "app_users"

            def find_by_id(self, user_id: int) -> Optional[AppUser]:
                rows = self._select_where("id", user_id)
                return self._map_to_user(rows[0]) if rows else None
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        return self._db.table(self.table_name)

    def _select_where(self, column: str, value: Any) -> list[dict[str, Any]]:
        """Select all columns of rows where ``column`` equals ``value``."""
        result = self._table().select("*").eq(column, value).limit(1).execute()
        return result.data or []

    def _insert(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert one row and return it as stored."""
        payload = {key: to_db_value(value) for key, value in data.items()}
        result = self._table().insert(payload).execute()
        return result.data[0]

    def _update_where(self, column: str, value: Any, data: dict[str, Any]) -> int:
        """Update rows where ``column`` equals ``value``; returns the row count."""
        payload = {key: to_db_value(v) for key, v in data.items()}
        result = self._table().update(payload).eq(column, value).execute()
        return len(result.data or [])
