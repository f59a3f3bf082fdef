"""
Users module interface.

The API layer depends on IUserService for profile, post and feed
operations.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import FeedResponse, Post, ProfileView, UserProfile


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for profile and post operations.

    All methods taking `user_id` act on the caller's own record.
    """

    async def get_own_profile(self, user_id: str) -> UserProfile:
        """
        Get the caller's profile without the password hash.

        Raises:
            UserNotFoundError: If the record no longer exists
        """
        ...

    async def get_other_profile(
        self,
        target_id: str,
        viewer: Optional[AuthenticatedUser] = None,
    ) -> ProfileView:
        """
        View another user's profile.

        Returns a same-user signal when the viewer asks for themselves,
        the full profile when the viewer's role grants
        VIEW_PRIVATE_PROFILES, and the public projection otherwise.

        Raises:
            InvalidUserIdError: If target_id is not a valid id
            UserNotFoundError: If the target doesn't exist
        """
        ...

    async def update_email(self, user_id: str, email: str) -> str:
        """
        Change the caller's email.

        Returns:
            The stored (normalized) email

        Raises:
            ValidationError: If email is blank or not a string
            EmailTakenError: If another account holds the email
            UserNotFoundError: If the record no longer exists
        """
        ...

    async def update_status(self, user_id: str, status: str) -> str:
        """Change the caller's free-text status."""
        ...

    async def update_avatar(self, user_id: str, avatar_url: str) -> str:
        """Store a new avatar URL on the caller's record."""
        ...

    async def create_post(
        self,
        user_id: str,
        image_ref: Optional[str],
        description: Optional[str],
    ) -> Post:
        """
        Append a post to the caller's record.

        Raises:
            ValidationError: If the image or description is missing
            UserNotFoundError: If the record no longer exists
        """
        ...

    async def delete_post(self, user_id: str, post_id: str) -> None:
        """
        Remove one of the caller's own posts.

        Raises:
            PostNotFoundError: If the caller has no post with that id
        """
        ...

    async def list_feed(self, page: int = 1, limit: int = 10) -> FeedResponse:
        """All users' posts, newest first, one page at a time."""
        ...

    async def delete_account(self, user_id: str) -> None:
        """
        Hard-delete the caller's record.

        Chats the user took part in are left untouched.

        Raises:
            UserNotFoundError: If the record no longer exists
        """
        ...
