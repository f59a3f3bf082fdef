"""
Session guard.

Extracts the bearer token from the Authorization header, verifies it
with the token service, and hands route handlers an AuthenticatedUser.
Every authenticated endpoint depends on get_current_user; none parses
tokens itself.
"""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.models import AccessClaims
from modules.auth.tokens import TokenService
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_user_from_claims(claims: AccessClaims) -> AuthenticatedUser:
    """
    Convert access token claims to AuthenticatedUser model.

    Args:
        claims: Verified access token claims

    Returns:
        AuthenticatedUser instance
    """
    return AuthenticatedUser(id=claims.sub, email=claims.email)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Missing header: 401 MISSING_TOKEN. Token present but expired or
    invalid: 403 TOKEN_EXPIRED / INVALID_TOKEN.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    claims = tokens.verify_access(credentials.credentials)
    return get_user_from_claims(claims)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.
    A bad token is treated as anonymous rather than rejected.
    """
    if credentials is None:
        return None

    try:
        claims = tokens.verify_access(credentials.credentials)
    except AuthenticationError as e:
        logger.debug("Ignoring unusable optional token: %s", e.code)
        return None
    return get_user_from_claims(claims)
