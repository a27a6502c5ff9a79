"""
Users module data models.

AppUser mirrors a row of the ``app_users`` table. The profile models are
what the API exposes; they serialize with camelCase keys to match the
client contract (``fullName``, ``updatedAt``).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AppUser(BaseModel):
    """A user of the third-party app, as stored in the user directory."""

    id: int = Field(..., description="Internal surrogate key")
    ext_id: str = Field(..., description="External ID handed to clients")
    user_hash: str = Field(..., description="Stable identity handle from humanID")
    full_name: Optional[str] = Field(None, description="Display name")
    last_log_in: Optional[datetime] = Field(
        None, description="Last login time, None when logged out or never logged in"
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore")


class UserProfile(BaseModel):
    """Public profile of the current user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="User external identifier")
    full_name: Optional[str] = Field(None, description="User full name")
    updated_at: int = Field(..., description="Updated at timestamp in Unix epoch")


class UpdateProfileRequest(BaseModel):
    """Request body for updating the current user's profile."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str = Field(..., min_length=1, max_length=255, description="New full name")


def to_unix_time(value: Optional[datetime]) -> Optional[int]:
    """Round a datetime to whole seconds of Unix epoch."""
    if value is None:
        return None
    return int(round(value.timestamp()))
