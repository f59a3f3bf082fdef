"""
Authentication module interface.

Routes depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import TokenPair


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account authentication operations.

    Token verification for individual requests is not part of this
    interface; the session guard talks to TokenService directly.
    """

    async def register(self, name: str, email: str, password: str) -> TokenPair:
        """
        Create an account and start a session.

        Args:
            name: Display name
            email: Email, normalized to lowercase before storage
            password: Plain-text password, stored as an Argon2 hash

        Returns:
            Access and refresh tokens for the new account

        Raises:
            EmailTakenError: If the normalized email is already registered
        """
        ...

    async def login(self, email: str, password: str) -> TokenPair:
        """
        Start a session for an existing account.

        Raises:
            EmailNotFoundError: If no account has the email
            InvalidPasswordError: If the password doesn't match
        """
        ...

    async def refresh(self, refresh_token: Optional[str]) -> str:
        """
        Mint a new access token from a refresh token.

        Raises:
            MissingTokenError: If no refresh token was sent
            ExpiredTokenError / InvalidTokenError: If it fails verification
        """
        ...
