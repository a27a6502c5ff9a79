"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory user directory, a scripted identity verifier, and a clock the
tests can move forward.
"""

import time
from datetime import datetime, timezone
from typing import Any, Optional

import pytest

from api.dependencies import reset_container
from shared.config import get_settings
from modules.identity.exceptions import IdentityVerificationFailedError
from modules.sessions.codec import SessionCodec
from modules.sessions.service import SessionService
from modules.users.models import AppUser
from modules.users.service import UserService


# Secrets used only by the tests
TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"
TEST_SESSION_ID_SECRET = "test-session-id-secret-for-testing-only"
TEST_CLIENT_SECRET = "test-client-secret"
TEST_TTL_SECONDS = 3600


class InMemoryUserDirectory:
    """User directory keeping AppUser records in a dict."""

    def __init__(self) -> None:
        self.users: dict[int, AppUser] = {}
        self._next_id = 1

    def find_by_id(self, user_id: int) -> Optional[AppUser]:
        return self.users.get(user_id)

    def find_by_ext_id(self, ext_id: str) -> Optional[AppUser]:
        return next((u for u in self.users.values() if u.ext_id == ext_id), None)

    def find_by_user_hash(self, user_hash: str) -> Optional[AppUser]:
        return next((u for u in self.users.values() if u.user_hash == user_hash), None)

    def find_or_create(self, user_hash: str, ext_id: str, full_name: str) -> AppUser:
        existing = self.find_by_user_hash(user_hash)
        if existing:
            return existing
        now = datetime.now(timezone.utc)
        user = AppUser(
            id=self._next_id,
            ext_id=ext_id,
            user_hash=user_hash,
            full_name=full_name,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        self._next_id += 1
        return user

    def update_by_id(self, user_id: int, **fields: Any) -> None:
        user = self.users.get(user_id)
        if user is not None:
            self.users[user_id] = user.model_copy(update=fields)


class StubVerifier:
    """Identity verifier that knows a fixed set of exchange tokens."""

    def __init__(self, tokens: Optional[dict[str, str]] = None) -> None:
        self.tokens = dict(tokens or {})
        self.calls: list[str] = []

    async def verify_exchange_token(self, exchange_token: str) -> str:
        self.calls.append(exchange_token)
        if exchange_token not in self.tokens:
            raise IdentityVerificationFailedError()
        return self.tokens[exchange_token]


class FakeClock:
    """
    Steppable clock for the session service.

    PyJWT checks ``iat`` and ``exp`` against the real time, so the clock
    starts ten minutes back and ``advance()`` can move it forward without
    overtaking the wall clock. Tests that need the real clock build a
    SessionService with its default clock.
    """

    def __init__(self, start: Optional[float] = None) -> None:
        self.now = start if start is not None else time.time() - 600

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 1) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and settings cache around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def user_directory() -> InMemoryUserDirectory:
    return InMemoryUserDirectory()


@pytest.fixture
def verifier() -> StubVerifier:
    return StubVerifier({"tok-A": "h1", "tok-A2": "h1", "tok-B": "h2"})


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def codec() -> SessionCodec:
    return SessionCodec(TEST_JWT_SECRET, TEST_SESSION_ID_SECRET)


@pytest.fixture
def session_service(codec, user_directory, verifier, clock) -> SessionService:
    return SessionService(
        codec=codec,
        users=user_directory,
        identity=verifier,
        ttl_seconds=TEST_TTL_SECONDS,
        clock=clock,
        name_generator=lambda: "Admiring Hopper",
    )


@pytest.fixture
def user_service(user_directory) -> UserService:
    return UserService(user_directory)
