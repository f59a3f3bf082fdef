"""
Session token issuing and verification.

Two HS256 JWTs per session, each signed with its own secret:

- access token  {sub, email}, 30 days, sent as the bearer credential
- refresh token {sub}, 7 days, used only to mint new access tokens

Access tokens minted from a refresh token carry only {sub} and expire
after 15 minutes. Refresh tokens are not rotated: one stays usable
until its own expiry. There is no revocation list.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from shared.config import Settings
from modules.users.models import UserRecord

from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import AccessClaims, RefreshClaims, TokenPair


class TokenService:
    """Issues, verifies and refreshes session tokens."""

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(days=30),
        refresh_ttl: timedelta = timedelta(days=7),
        refreshed_access_ttl: timedelta = timedelta(minutes=15),
    ):
        if not access_secret or not refresh_secret:
            raise RuntimeError(
                "Token signing secrets missing. "
                "Set ACCESS_SECRET and REFRESH_SECRET environment variables."
            )
        if access_secret == refresh_secret:
            raise RuntimeError("ACCESS_SECRET and REFRESH_SECRET must differ.")

        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._algorithm = algorithm
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._refreshed_access_ttl = refreshed_access_ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            access_secret=settings.access_secret,
            refresh_secret=settings.refresh_secret,
            algorithm=settings.jwt_algorithm,
            access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
            refresh_ttl=timedelta(days=settings.refresh_token_expire_days),
            refreshed_access_ttl=timedelta(
                minutes=settings.refreshed_access_token_expire_minutes
            ),
        )

    def issue_session_tokens(self, user: UserRecord) -> TokenPair:
        """Sign a fresh access/refresh pair for a user."""
        access_token = self._encode(
            {"sub": user.id, "email": user.email},
            self._access_secret,
            self._access_ttl,
        )
        refresh_token = self._encode(
            {"sub": user.id},
            self._refresh_secret,
            self._refresh_ttl,
        )
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def verify_access(self, token: str) -> AccessClaims:
        """
        Verify an access token.

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the signature or format is bad
        """
        return AccessClaims(**self._decode(token, self._access_secret))

    def verify_refresh(self, token: str) -> RefreshClaims:
        """
        Verify a refresh token.

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the signature or format is bad
        """
        return RefreshClaims(**self._decode(token, self._refresh_secret))

    def refresh_access(self, refresh_token: str) -> str:
        """Mint a short-lived access token ({sub} only) from a refresh token."""
        claims = self.verify_refresh(refresh_token)
        return self._encode(
            {"sub": claims.sub},
            self._access_secret,
            self._refreshed_access_ttl,
        )

    def _encode(self, claims: dict[str, Any], secret: str, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + ttl}
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def _decode(self, token: str, secret: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Failed to authenticate token: {e}")
