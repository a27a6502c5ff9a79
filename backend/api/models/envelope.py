"""
REST response envelope.

Every response, success or failure, is wrapped as
``{"success": ..., "code": ..., "message": ..., "data": ...}``.
"""

from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")

OK_CODE = "OK"
OK_MESSAGE = "Success"


class OkResponse(BaseModel):
    """Success response without data."""

    success: bool = True
    code: str = OK_CODE
    message: str = OK_MESSAGE


class DataResponse(OkResponse, Generic[T]):
    """Success response carrying data."""

    data: T


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    code: str
    message: str
