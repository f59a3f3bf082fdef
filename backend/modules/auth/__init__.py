"""
Authentication module.

Handles registration, login, password hashing, and session tokens.

Public API:
- IAuthService: Interface for auth operations
- TokenService: Issues and verifies access/refresh tokens
- TokenPair / AccessClaims / RefreshClaims: Token models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .tokens import TokenService
from .models import TokenPair, AccessClaims, RefreshClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    EmailNotFoundError,
    InvalidPasswordError,
)

__all__ = [
    # Interface
    "IAuthService",
    "TokenService",
    # Models
    "TokenPair",
    "AccessClaims",
    "RefreshClaims",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "EmailNotFoundError",
    "InvalidPasswordError",
]
