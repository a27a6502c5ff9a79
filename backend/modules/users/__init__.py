"""
Users module.

Owns the user directory (app_users table) and profile operations.

Public API:
- IUserDirectory: Storage contract used by the session module
- IUserService: Profile operations
- AppUser, UserProfile: Data models
- UserNotFoundError
"""

from .interfaces import IUserDirectory, IUserService
from .models import AppUser, UserProfile, UpdateProfileRequest, to_unix_time
from .exceptions import UserNotFoundError

__all__ = [
    # Interfaces
    "IUserDirectory",
    "IUserService",
    # Models
    "AppUser",
    "UserProfile",
    "UpdateProfileRequest",
    "to_unix_time",
    # Exceptions
    "UserNotFoundError",
]
