"""Tests for the session service."""

import time

import pytest

from shared.exceptions import RequiredFieldError
from shared.models import UserAccess
from modules.identity.exceptions import IdentityVerificationFailedError
from modules.sessions.models import LogoutResult
from modules.sessions.service import SessionService, generate_ext_id
from modules.sessions.exceptions import (
    SessionExpiredError,
    SessionInvalidError,
    UnauthorizedError,
)
from modules.users.models import to_unix_time

from tests.conftest import TEST_TTL_SECONDS, FakeClock


class TestGenerateExtId:
    def test_is_decimal_timestamp(self):
        assert generate_ext_id(1589009542) == "1589009542"


class TestLogin:
    @pytest.mark.asyncio
    async def test_creates_user_on_first_login(self, session_service, user_directory, clock):
        """First login for a new handle should create the user."""
        session = await session_service.login("tok-A")

        user = user_directory.find_by_user_hash("h1")
        assert user is not None
        assert user.ext_id == str(int(clock.now))
        assert user.full_name == "Admiring Hopper"
        assert session.expired_at == int(clock.now) + TEST_TTL_SECONDS

    @pytest.mark.asyncio
    async def test_records_last_login(self, session_service, user_directory, clock):
        await session_service.login("tok-A")

        user = user_directory.find_by_user_hash("h1")
        assert to_unix_time(user.last_log_in) == int(clock.now)
        assert to_unix_time(user.updated_at) == int(clock.now)

    @pytest.mark.asyncio
    async def test_same_handle_resolves_to_same_user(self, session_service, user_directory, clock):
        """Two exchange tokens for the same handle should not create two users."""
        await session_service.login("tok-A")
        first = user_directory.find_by_user_hash("h1")

        clock.advance(5)
        await session_service.login("tok-A2")
        second = user_directory.find_by_user_hash("h1")

        assert len(user_directory.users) == 1
        assert second.id == first.id
        assert second.ext_id == first.ext_id

    @pytest.mark.asyncio
    async def test_different_handles_create_different_users(self, session_service, user_directory, clock):
        await session_service.login("tok-A")
        clock.advance(1)
        await session_service.login("tok-B")

        assert len(user_directory.users) == 2

    @pytest.mark.asyncio
    async def test_login_token_validates(self, session_service, user_directory):
        session = await session_service.login("tok-A")

        access = await session_service.validate(session.token)

        user = user_directory.find_by_user_hash("h1")
        assert access == UserAccess(id=user.id, ext_id=user.ext_id)

    @pytest.mark.asyncio
    async def test_rejected_exchange_token(self, session_service, user_directory):
        with pytest.raises(IdentityVerificationFailedError):
            await session_service.login("tok-unknown")
        assert user_directory.users == {}

    @pytest.mark.asyncio
    async def test_missing_exchange_token(self, session_service, verifier):
        """An empty exchange token should fail before calling humanID."""
        with pytest.raises(RequiredFieldError):
            await session_service.login("")
        assert verifier.calls == []


class TestValidate:
    @pytest.mark.asyncio
    async def test_missing_token(self, session_service):
        with pytest.raises(SessionInvalidError):
            await session_service.validate(None)

    @pytest.mark.asyncio
    async def test_garbage_token(self, session_service):
        with pytest.raises(UnauthorizedError):
            await session_service.validate("garbage")

    @pytest.mark.asyncio
    async def test_unknown_user(self, session_service, codec):
        """A well-signed token for a user that does not exist is rejected."""
        now = int(time.time())
        token = codec.mint_token("no-such-user", codec.derive_fingerprint("no-such-user", now), now, 60).token

        with pytest.raises(UnauthorizedError, match="Unknown user"):
            await session_service.validate(token)

    @pytest.mark.asyncio
    async def test_forged_fingerprint(self, session_service, codec, user_directory):
        session = await session_service.login("tok-A")
        user = user_directory.find_by_user_hash("h1")
        payload = codec.parse_token(session.token)

        forged = codec.mint_token(user.ext_id, "0" * 64, payload.issued_at, 3600).token

        with pytest.raises(UnauthorizedError, match="no longer active"):
            await session_service.validate(forged)

    @pytest.mark.asyncio
    async def test_expired_token_with_matching_fingerprint(self, codec, user_directory, verifier):
        """Expiry wins even when the fingerprint still matches."""
        clock = FakeClock(time.time() - 7200)
        service = SessionService(codec, user_directory, verifier, ttl_seconds=3600, clock=clock)

        session = await service.login("tok-A")

        with pytest.raises(SessionExpiredError):
            await service.validate(session.token)


class TestSingleActiveSession:
    @pytest.mark.asyncio
    async def test_second_login_invalidates_first(self, session_service, clock):
        first = await session_service.login("tok-A")
        clock.advance(1)
        second = await session_service.login("tok-A2")

        with pytest.raises(UnauthorizedError):
            await session_service.validate(first.token)
        assert await session_service.validate(second.token)

    @pytest.mark.asyncio
    async def test_refresh_invalidates_previous_token(self, session_service, clock):
        first = await session_service.login("tok-A")
        access = await session_service.validate(first.token)

        clock.advance(1)
        refreshed = await session_service.refresh(access)

        with pytest.raises(UnauthorizedError):
            await session_service.validate(first.token)
        assert await session_service.validate(refreshed.token) == access

    @pytest.mark.asyncio
    async def test_refresh_extends_expiry(self, session_service, clock):
        first = await session_service.login("tok-A")
        access = await session_service.validate(first.token)

        clock.advance(30)
        refreshed = await session_service.refresh(access)

        assert refreshed.expired_at == first.expired_at + 30

    @pytest.mark.asyncio
    async def test_sessions_of_other_users_are_untouched(self, session_service, clock):
        alice = await session_service.login("tok-A")
        clock.advance(1)
        await session_service.login("tok-B")

        assert await session_service.validate(alice.token)


class TestLogout:
    @pytest.mark.asyncio
    async def test_logout_invalidates_token(self, session_service, user_directory):
        session = await session_service.login("tok-A")

        result = await session_service.logout(session.token)

        assert result is LogoutResult.OK
        assert user_directory.find_by_user_hash("h1").last_log_in is None
        with pytest.raises(UnauthorizedError):
            await session_service.validate(session.token)

    @pytest.mark.asyncio
    async def test_logout_with_invalid_token_is_ignored(self, session_service):
        result = await session_service.logout("garbage")
        assert result is LogoutResult.IGNORED_INVALID_SESSION

    @pytest.mark.asyncio
    async def test_logout_without_token_is_ignored(self, session_service):
        result = await session_service.logout(None)
        assert result is LogoutResult.IGNORED_INVALID_SESSION

    @pytest.mark.asyncio
    async def test_second_logout_is_ignored(self, session_service):
        """Logging out twice with the same token reports the stale session."""
        session = await session_service.login("tok-A")

        assert await session_service.logout(session.token) is LogoutResult.OK
        assert await session_service.logout(session.token) is LogoutResult.IGNORED_INVALID_SESSION

    @pytest.mark.asyncio
    async def test_logout_with_superseded_token_keeps_new_session(self, session_service, clock):
        old = await session_service.login("tok-A")
        clock.advance(1)
        new = await session_service.login("tok-A")

        assert await session_service.logout(old.token) is LogoutResult.IGNORED_INVALID_SESSION
        assert await session_service.validate(new.token)

    @pytest.mark.asyncio
    async def test_login_after_logout(self, session_service, clock):
        """The cycle NoSession -> Active -> NoSession -> Active repeats."""
        first = await session_service.login("tok-A")
        await session_service.logout(first.token)

        clock.advance(1)
        second = await session_service.login("tok-A")

        assert await session_service.validate(second.token)


class TestWallClock:
    """Sessions minted with the real clock must validate straight away."""

    @pytest.fixture
    def late_in_second(self):
        # Always three quarters into the current real second
        return lambda: int(time.time()) + 0.75

    @pytest.mark.asyncio
    async def test_token_validates_immediately_late_in_second(
        self, codec, user_directory, verifier, late_in_second
    ):
        service = SessionService(codec, user_directory, verifier, ttl_seconds=3600, clock=late_in_second)

        session = await service.login("tok-A")

        assert await service.validate(session.token)

    @pytest.mark.asyncio
    async def test_issued_at_is_never_ahead_of_real_time(
        self, codec, user_directory, verifier, late_in_second
    ):
        service = SessionService(codec, user_directory, verifier, ttl_seconds=3600, clock=late_in_second)

        session = await service.login("tok-A")

        assert codec.parse_token(session.token).issued_at <= time.time()

    @pytest.mark.asyncio
    async def test_refreshed_token_validates_immediately(
        self, codec, user_directory, verifier, late_in_second
    ):
        service = SessionService(codec, user_directory, verifier, ttl_seconds=3600, clock=late_in_second)
        access = await service.validate((await service.login("tok-A")).token)

        refreshed = await service.refresh(access)

        assert await service.validate(refreshed.token) == access

    @pytest.mark.asyncio
    async def test_default_clock(self, codec, user_directory, verifier):
        service = SessionService(codec, user_directory, verifier, ttl_seconds=3600)

        session = await service.login("tok-A")

        assert await service.validate(session.token)
