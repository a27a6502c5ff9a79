"""
humanID client.

Calls the humanID ``verifyExchangeToken`` endpoint with the app
credentials. There are no retries: a failed call surfaces immediately as
IdentityVerificationFailedError and the client restarts its humanID flow.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .interfaces import IIdentityVerifier
from .models import VerifyExchangeTokenRequest, VerifyExchangeTokenResponse
from .exceptions import IdentityVerificationFailedError

logger = logging.getLogger(__name__)


class HumanIDVerifier(IIdentityVerifier):
    """
    Identity verifier backed by the humanID REST API.

    API Endpoint: {base_url}/mobile/users/verifyExchangeToken
    Success body: {"success": true, "data": {"userHash": "..."}}
    """

    VERIFY_PATH = "/mobile/users/verifyExchangeToken"

    def __init__(
        self,
        base_url: str,
        app_id: str,
        app_secret: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the humanID client.

        Args:
            base_url: humanID API base URL, without trailing slash.
            app_id: humanID application ID.
            app_secret: humanID application secret.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self._base_url = base_url.rstrip("/")
        self._app_id = app_id
        self._app_secret = app_secret
        self._timeout = timeout
        self._transport = transport

    @property
    def verify_url(self) -> str:
        return self._base_url + self.VERIFY_PATH

    async def verify_exchange_token(self, exchange_token: str) -> str:
        """Verify an exchange token and return the humanID user hash."""
        body = VerifyExchangeTokenRequest(
            app_id=self._app_id,
            app_secret=self._app_secret,
            exchange_token=exchange_token,
        )

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.post(
                    self.verify_url,
                    json=body.model_dump(by_alias=True),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.warning(f"humanID request failed: {e.__class__.__name__}")
            raise IdentityVerificationFailedError("humanID unreachable", original_error=str(e))

        try:
            result = VerifyExchangeTokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.debug(f"Received unparsable response. Status={response.status_code}")
            raise IdentityVerificationFailedError("Invalid response from humanID", original_error=str(e))

        if not result.success or result.data is None:
            logger.debug(f"Received error response. Status={response.status_code} Body={response.text}")
            raise IdentityVerificationFailedError(result.message or "Exchange token rejected")

        return result.data.user_hash
