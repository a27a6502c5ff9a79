"""
Shared infrastructure for MovieDB backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- logging: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings, parse_duration
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    MovieDBError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    RequiredFieldError,
)
from .models import UserAccess

__all__ = [
    "Settings",
    "get_settings",
    "parse_duration",
    "get_supabase_client",
    "reset_client_cache",
    "MovieDBError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "RequiredFieldError",
    "UserAccess",
]
