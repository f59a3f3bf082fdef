"""
Users service implementation.

Profile reads and updates, post append/removal, and the global feed.
"""

import logging
from typing import Optional

from bson import ObjectId

from shared.database import mongo_now, normalize_id, to_object_id
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .exceptions import InvalidUserIdError, PostNotFoundError, UserNotFoundError
from .interfaces import IUserService
from .models import (
    FeedResponse,
    Post,
    ProfileView,
    PublicProfile,
    UserProfile,
    UserRecord,
)
from .permissions import Capability, has_capability
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User service backed by the users collection."""

    def __init__(self, repository: UserRepository):
        self._users = repository

    async def get_own_profile(self, user_id: str) -> UserProfile:
        return UserProfile.from_record(self._require_user(user_id))

    async def get_other_profile(
        self,
        target_id: str,
        viewer: Optional[AuthenticatedUser] = None,
    ) -> ProfileView:
        normalized = normalize_id(target_id)
        if normalized is None:
            raise InvalidUserIdError(target_id)
        target_id = normalized

        if viewer is not None and normalize_id(viewer.id) == target_id:
            return ProfileView(same_user=True)

        target = self._require_user(target_id)

        if viewer is not None and self._can_view_private(viewer.id):
            return ProfileView(user=UserProfile.from_record(target))

        return ProfileView(user=PublicProfile.from_record(target))

    async def update_email(self, user_id: str, email: str) -> str:
        if not isinstance(email, str) or not email.strip():
            raise ValidationError("Invalid email", code="INVALID_EMAIL")

        normalized = email.strip().lower()
        user = self._users.update_email(user_id, normalized)
        if user is None:
            raise UserNotFoundError(user_id)

        logger.info("User %s changed email", user_id)
        return user.email

    async def update_status(self, user_id: str, status: str) -> str:
        if not isinstance(status, str):
            raise ValidationError("Invalid status", code="INVALID_STATUS")

        user = self._users.update_status(user_id, status)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.status

    async def update_avatar(self, user_id: str, avatar_url: str) -> str:
        user = self._users.update_avatar(user_id, avatar_url)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.avatar

    async def create_post(
        self,
        user_id: str,
        image_ref: Optional[str],
        description: Optional[str],
    ) -> Post:
        # An empty description is a valid post; a missing one is not.
        if not image_ref or description is None:
            raise ValidationError(
                "Missing image or description",
                code="MISSING_POST_FIELDS",
            )

        post = Post(
            id=str(ObjectId()),
            image=image_ref,
            description=description,
            date=mongo_now(),
        )
        if not self._users.push_post(user_id, post):
            raise UserNotFoundError(user_id)
        return post

    async def delete_post(self, user_id: str, post_id: str) -> None:
        if to_object_id(post_id) is None:
            raise ValidationError(
                "Invalid post id",
                code="INVALID_POST_ID",
                details={"post_id": post_id},
            )
        if not self._users.pull_post(user_id, post_id):
            raise PostNotFoundError(post_id)

    async def list_feed(self, page: int = 1, limit: int = 10) -> FeedResponse:
        if page < 1 or limit < 1:
            raise ValidationError(
                "page and limit must be positive",
                code="INVALID_PAGINATION",
                details={"page": page, "limit": limit},
            )

        posts = self._users.list_all_posts()
        posts.sort(key=lambda p: p.date, reverse=True)

        skip = (page - 1) * limit
        return FeedResponse(
            posts=posts[skip:skip + limit],
            total=len(posts),
            page=page,
            limit=limit,
        )

    async def delete_account(self, user_id: str) -> None:
        if not self._users.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("User %s deleted their account", user_id)

    def _require_user(self, user_id: str) -> UserRecord:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def _can_view_private(self, viewer_id: str) -> bool:
        viewer = self._users.get_by_id(viewer_id)
        return viewer is not None and has_capability(
            viewer.role, Capability.VIEW_PRIVATE_PROFILES
        )
