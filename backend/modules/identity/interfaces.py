"""
Identity module interface.

The session module depends on IIdentityVerifier, not on the humanID
HTTP client, so login can be tested without network access.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IIdentityVerifier(Protocol):
    """Redeems one-time exchange tokens into stable user handles."""

    async def verify_exchange_token(self, exchange_token: str) -> str:
        """
        Verify an exchange token with the identity provider.

        Args:
            exchange_token: One-time token issued to the client by humanID

        Returns:
            Stable opaque user hash identifying the person

        Raises:
            IdentityVerificationFailedError: If the token is rejected or the
                provider cannot be reached
        """
        ...
