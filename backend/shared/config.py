"""
Centralized configuration for the MovieDB backend.

All settings are loaded from environment variables with sensible defaults.
Integration-specific settings are namespaced (e.g., SUPABASE_*, HUMANID_*).
"""

import re
from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DURATION_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-z]*)\s*$", re.IGNORECASE)

_DURATION_UNITS = {
    "": 1,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "h": 3600,
    "hr": 3600,
    "hrs": 3600,
    "hour": 3600,
    "hours": 3600,
    "d": 86400,
    "day": 86400,
    "days": 86400,
    "w": 604800,
    "week": 604800,
    "weeks": 604800,
}


def parse_duration(value: str) -> int:
    """
    Convert a duration string to whole seconds.

    Accepts a number followed by an optional unit, e.g. "900", "30m",
    "12h", "1d" or "2 weeks". A bare number is read as seconds.

    Raises:
        ValueError: If the value cannot be parsed or is not positive
    """
    match = _DURATION_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")

    amount, unit = match.groups()
    multiplier = _DURATION_UNITS.get(unit.lower())
    if multiplier is None:
        raise ValueError(f"Unknown duration unit: {unit!r}")

    seconds = int(float(amount) * multiplier)
    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return seconds


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "MovieDB.API"
    app_version: str = "0.0.1"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (user directory)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, migrations only

    # Client app credentials and session signing
    client_app_secret: str = ""
    jwt_secret: str = ""
    jwt_lifetime: str = "1d"
    session_id_secret: str = ""

    # humanID
    humanid_base_url: str = "https://core.human-id.org/v0.0.3"
    humanid_app_id: str = ""
    humanid_app_secret: str = ""
    humanid_timeout: float = 10.0  # seconds

    @field_validator("jwt_lifetime")
    @classmethod
    def validate_jwt_lifetime(cls, v: str) -> str:
        """Reject lifetimes that cannot be turned into seconds at load time."""
        parse_duration(v)
        return v.strip()

    @field_validator("humanid_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return (v or "").strip().rstrip("/")

    @property
    def jwt_lifetime_seconds(self) -> int:
        """Session token lifetime in whole seconds."""
        return parse_duration(self.jwt_lifetime)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
