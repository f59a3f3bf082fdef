"""
Users module.

Handles profiles, embedded posts and the global feed.

Public API:
- IUserService: Interface for profile and post operations
- UserRecord / UserProfile / PublicProfile: Stored record and its projections
- Role / Capability: Role-based permissions
- Users exceptions: UserNotFoundError, EmailTakenError, etc.
"""

from .interfaces import IUserService
from .models import (
    Post,
    FeedPost,
    Role,
    UserRecord,
    UserProfile,
    PublicProfile,
    ParticipantSummary,
    ProfileView,
    FeedResponse,
)
from .permissions import Capability, has_capability
from .exceptions import (
    UserNotFoundError,
    EmailTakenError,
    PostNotFoundError,
    InvalidUserIdError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "Post",
    "FeedPost",
    "Role",
    "UserRecord",
    "UserProfile",
    "PublicProfile",
    "ParticipantSummary",
    "ProfileView",
    "FeedResponse",
    # Permissions
    "Capability",
    "has_capability",
    # Exceptions
    "UserNotFoundError",
    "EmailTakenError",
    "PostNotFoundError",
    "InvalidUserIdError",
]
