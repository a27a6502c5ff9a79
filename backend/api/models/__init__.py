"""API models package."""

from .envelope import DataResponse, ErrorResponse, OkResponse

__all__ = [
    "DataResponse",
    "ErrorResponse",
    "OkResponse",
]
