"""
Session module exceptions.

Every session failure is an UnauthorizedError. The expired and invalid
variants keep their own codes so clients can tell "log in again" from
"refresh failed".
"""

from shared.exceptions import AuthenticationError


class UnauthorizedError(AuthenticationError):
    """Raised when a request cannot be tied to a live session or client app."""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(message, code=code)


class SessionExpiredError(UnauthorizedError):
    """Raised when a session token is correctly signed but past its expiry."""

    def __init__(self, message: str = "Session has expired"):
        super().__init__(message, code="SESSION_EXPIRED")


class SessionInvalidError(UnauthorizedError):
    """Raised when a session token is missing, malformed, or badly signed."""

    def __init__(self, message: str = "Invalid session token"):
        super().__init__(message, code="SESSION_INVALID")
