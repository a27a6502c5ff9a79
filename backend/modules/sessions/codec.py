# -----------------------------------------------------------------------------
# Session codec
# -----------------------------------------------------------------------------
# Builds and verifies session tokens. Nothing here touches storage.
#
# Token: HS256 JWT
#
#     {"iat": <issued at>, "exp": <expires at>,
#      "data": {"userId": <ext_id>, "sessionId": <fingerprint>}}
#
# Fingerprint:
#
#     hex( HMAC-SHA256(session_id_secret, "<ext_id>-<last login marker>") )
#
# The marker is the user's last login time in epoch seconds, or -1 when the
# user is logged out. Every login, refresh and logout rewrites it, so a token
# minted against an older marker stops matching without any revocation list.
# -----------------------------------------------------------------------------

import hashlib
import hmac
from typing import Optional

import jwt
from pydantic import ValidationError

from .models import SessionClaims, SessionPayload, SessionToken
from .exceptions import SessionExpiredError, SessionInvalidError

JWT_ALGORITHM = "HS256"

# Marker for a user with no recorded login (never logged in, or logged out)
NO_LOGIN_MARKER = -1


def derive_fingerprint(ext_id: str, last_log_in: Optional[int], secret: str) -> str:
    """
    Derive the session fingerprint for a user's login state.

    Deterministic for the same inputs; any change of ``last_log_in`` yields
    a different value.

    Args:
        ext_id: User external ID
        last_log_in: Last login in epoch seconds, or None/-1 when unset
        secret: Process-wide fingerprint key
    """
    marker = NO_LOGIN_MARKER if last_log_in is None else int(last_log_in)
    raw = f"{ext_id}-{marker}"
    return hmac.new(secret.encode("utf-8"), raw.encode("utf-8"), hashlib.sha256).hexdigest()


class SessionCodec:
    """Signs and verifies session tokens with process-wide secrets."""

    def __init__(self, jwt_secret: str, session_id_secret: str):
        if not jwt_secret or not session_id_secret:
            raise ValueError("Session secrets are not configured")
        self._jwt_secret = jwt_secret
        self._session_id_secret = session_id_secret

    def derive_fingerprint(self, ext_id: str, last_log_in: Optional[int]) -> str:
        return derive_fingerprint(ext_id, last_log_in, self._session_id_secret)

    def mint_token(
        self,
        ext_id: str,
        fingerprint: str,
        issued_at: int,
        ttl_seconds: int,
    ) -> SessionToken:
        """
        Sign a session token.

        Args:
            ext_id: User external ID, stored as ``data.userId``
            fingerprint: Session fingerprint, stored as ``data.sessionId``
            issued_at: Issue time in epoch seconds
            ttl_seconds: Lifetime in seconds

        Returns:
            The token and its expiry (``issued_at + ttl_seconds``)
        """
        expired_at = int(issued_at) + int(ttl_seconds)
        claims = SessionClaims.model_validate({
            "iat": int(issued_at),
            "exp": expired_at,
            "data": {"userId": ext_id, "sessionId": fingerprint},
        })
        token = jwt.encode(
            claims.model_dump(by_alias=True),
            self._jwt_secret,
            algorithm=JWT_ALGORITHM,
        )
        return SessionToken(token=token, expired_at=expired_at)

    def parse_token(self, token: Optional[str]) -> SessionPayload:
        """
        Verify a session token's signature and expiry.

        Raises:
            SessionExpiredError: Signature is valid but ``exp`` has passed
            SessionInvalidError: Token is absent, malformed, or badly signed
        """
        if not token:
            raise SessionInvalidError("Missing session token")

        try:
            raw = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise SessionExpiredError()
        except jwt.InvalidTokenError as e:
            raise SessionInvalidError(f"Invalid session token: {e}")

        try:
            claims = SessionClaims.model_validate(raw)
        except ValidationError:
            raise SessionInvalidError("Invalid session token: unexpected claims")

        return SessionPayload(
            user_id=claims.data.user_id,
            session_id=claims.data.session_id,
            issued_at=claims.iat,
            expired_at=claims.exp,
        )

    def fingerprint_matches(self, fingerprint: str, ext_id: str, last_log_in: Optional[int]) -> bool:
        """Check a token fingerprint against the user's current login state."""
        current = self.derive_fingerprint(ext_id, last_log_in)
        return hmac.compare_digest(current, fingerprint)
