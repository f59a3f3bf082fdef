"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from pymongo.database import Database
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenService
    from modules.chats.interfaces import IChatService
    from modules.chats.repository import ChatRepository
    from modules.media.interfaces import IImageStorage
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._database: "Database | None" = None
        self._user_repository: "UserRepository | None" = None
        self._chat_repository: "ChatRepository | None" = None
        self._tokens: "TokenService | None" = None
        self._image_storage: "IImageStorage | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._chat_service: "IChatService | None" = None

    @property
    def database(self) -> "Database":
        """Get the MongoDB database handle."""
        if self._database is None:
            from shared.database import get_database
            self._database = get_database()
        return self._database

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.database)
        return self._user_repository

    @property
    def chat_repository(self) -> "ChatRepository":
        if self._chat_repository is None:
            from modules.chats.repository import ChatRepository
            self._chat_repository = ChatRepository(self.database)
        return self._chat_repository

    @property
    def tokens(self) -> "TokenService":
        """Get the token service. Fails if the signing secrets are missing."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            from shared.config import get_settings
            self._tokens = TokenService.from_settings(get_settings())
        return self._tokens

    @property
    def image_storage(self) -> "IImageStorage":
        if self._image_storage is None:
            from modules.media.storage import CloudinaryImageStorage
            from shared.config import get_settings
            self._image_storage = CloudinaryImageStorage.from_settings(get_settings())
        return self._image_storage

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from shared.config import get_settings
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
                moderator_emails=get_settings().moderator_emails,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository)
        return self._user_service

    @property
    def chats(self) -> "IChatService":
        """Get the chat service instance."""
        if self._chat_service is None:
            from modules.chats.service import ChatService
            self._chat_service = ChatService(
                chats=self.chat_repository,
                users=self.user_repository,
            )
        return self._chat_service

    def startup(self) -> None:
        """
        Build the token service and create repository indexes.

        Raises RuntimeError when signing secrets or MONGO_URI are missing.
        """
        # Constructing the token service validates the signing secrets.
        _ = self.tokens
        self.user_repository.ensure_indexes()
        self.chat_repository.ensure_indexes()

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._database = None
        self._user_repository = None
        self._chat_repository = None
        self._tokens = None
        self._image_storage = None
        self._auth_service = None
        self._user_service = None
        self._chat_service = None


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

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_image_storage() -> "IImageStorage":
    """FastAPI dependency for image storage."""
    return get_container().image_storage


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_chat_service() -> "IChatService":
    """FastAPI dependency for chat service."""
    return get_container().chats
