"""
Session module data models.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SessionToken(BaseModel):
    """A freshly minted session token and its expiry."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    token: str = Field(..., description="Signed session JWT")
    expired_at: int = Field(..., description="Token expiry in Unix epoch seconds")


class SessionData(BaseModel):
    """The ``data`` claim of a session JWT."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str = Field(..., min_length=1, description="User external ID")
    session_id: str = Field(..., min_length=1, description="Session fingerprint")


class SessionClaims(BaseModel):
    """Decoded session JWT claims: ``{iat, exp, data: {userId, sessionId}}``."""

    iat: int
    exp: int
    data: SessionData


class SessionPayload(BaseModel):
    """The verified contents of a session token."""

    model_config = {"frozen": True}

    user_id: str = Field(..., description="User external ID")
    session_id: str = Field(..., description="Session fingerprint")
    issued_at: int
    expired_at: int


class LogInRequest(BaseModel):
    """Request body for logging in with a humanID exchange token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    exchange_token: str = Field(..., min_length=1, description="humanID exchange token")


class LogoutResult(str, Enum):
    """Outcome of a logout request."""

    OK = "ok"
    IGNORED_INVALID_SESSION = "ignored_invalid_session"
