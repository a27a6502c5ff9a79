"""
humanID wire models for the exchange token verification call.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VerifyExchangeTokenRequest(BaseModel):
    """Body of ``POST /mobile/users/verifyExchangeToken``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    app_id: str
    app_secret: str
    exchange_token: str


class VerifiedUser(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    user_hash: str = Field(..., min_length=1)


class VerifyExchangeTokenResponse(BaseModel):
    """humanID response envelope; ``data`` is only present on success."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    code: Optional[str] = None
    message: Optional[str] = None
    data: Optional[VerifiedUser] = None
