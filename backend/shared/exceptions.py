"""
Base exception classes for the MovieDB backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status and a response envelope.
"""

from typing import Optional, Any


class MovieDBError(Exception):
    """
    Base exception for all MovieDB errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(MovieDBError):
    """Resource not found."""

    pass


class ValidationError(MovieDBError):
    """Input validation failed."""

    pass


class AuthenticationError(MovieDBError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when a required input field is missing or blank."""

    def __init__(self, field: str):
        super().__init__(
            f"Missing required field: {field}",
            code="VALIDATION_FAILED",
            details={"field": field},
        )
