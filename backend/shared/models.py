"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class UserAccess(BaseModel):
    """
    The user behind a validated session.

    Produced by the session validation step and attached to every
    authenticated request via dependency injection.
    """

    id: int = Field(..., description="Internal user ID (primary key)")
    ext_id: str = Field(..., description="External user ID handed to clients")

    model_config = {"frozen": True}  # Make immutable for safety
