"""
Shared infrastructure for Altairis backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_mongo_client,
    get_database,
    mongo_now,
    normalize_id,
    reset_client_cache,
    to_object_id,
)
from .exceptions import (
    AltairisError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import ApiModel, AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_mongo_client",
    "get_database",
    "reset_client_cache",
    "to_object_id",
    "normalize_id",
    "mongo_now",
    "AltairisError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "ApiModel",
    "AuthenticatedUser",
]
