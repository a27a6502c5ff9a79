"""
Identity module exceptions.
"""

from typing import Optional

from shared.exceptions import AuthenticationError


class IdentityVerificationFailedError(AuthenticationError):
    """
    Raised when humanID rejects an exchange token or cannot be reached.

    The client has to restart the humanID flow to get a new exchange token.
    """

    def __init__(self, reason: str = "Exchange token rejected", original_error: Optional[str] = None):
        super().__init__(
            f"Identity verification failed: {reason}",
            code="IDENTITY_VERIFICATION_FAILED",
            details={
                "service": "humanid",
                "original_error": original_error,
            },
        )
