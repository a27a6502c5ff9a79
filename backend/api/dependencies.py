"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.identity.interfaces import IIdentityVerifier
    from modules.sessions.interfaces import ISessionService
    from modules.users.interfaces import IUserDirectory, IUserService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._user_directory: "IUserDirectory | None" = None
        self._identity_verifier: "IIdentityVerifier | None" = None
        self._session_service: "ISessionService | None" = None
        self._user_service: "IUserService | None" = None

    @property
    def user_directory(self) -> "IUserDirectory":
        """Get the user directory (Supabase repository)."""
        if self._user_directory is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_directory = UserRepository(get_supabase_client())
        return self._user_directory

    @property
    def identity(self) -> "IIdentityVerifier":
        """Get the humanID verifier."""
        if self._identity_verifier is None:
            from modules.identity.client import HumanIDVerifier
            settings = get_settings()
            self._identity_verifier = HumanIDVerifier(
                base_url=settings.humanid_base_url,
                app_id=settings.humanid_app_id,
                app_secret=settings.humanid_app_secret,
                timeout=settings.humanid_timeout,
            )
        return self._identity_verifier

    @property
    def sessions(self) -> "ISessionService":
        """Get the session service instance."""
        if self._session_service is None:
            from modules.sessions.codec import SessionCodec
            from modules.sessions.service import SessionService
            settings = get_settings()
            self._session_service = SessionService(
                codec=SessionCodec(settings.jwt_secret, settings.session_id_secret),
                users=self.user_directory,
                identity=self.identity,
                ttl_seconds=settings.jwt_lifetime_seconds,
            )
        return self._session_service

    @property
    def users(self) -> "IUserService":
        """Get the user profile service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_directory)
        return self._user_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_directory = None
        self._identity_verifier = None
        self._session_service = None
        self._user_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_service() -> "ISessionService":
    """FastAPI dependency for session service."""
    return get_container().sessions


def get_user_service() -> "IUserService":
    """FastAPI dependency for user profile service."""
    return get_container().users
