"""
Users module data models.

UserRecord and Post mirror the stored documents. The remaining models
are the projections and request/response bodies exposed over the API.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, EmailStr, Field

from shared.models import ApiModel


class Role(str, Enum):
    """Role stored on the user record."""

    USER = "user"
    MODERATOR = "moderator"


class Post(ApiModel):
    """A post embedded in its author's user document."""

    id: str = Field(..., description="Post sub-document ID")
    image: str = Field(..., description="Image URL")
    description: str = Field(..., description="Post text, may be empty")
    date: datetime = Field(..., description="Creation time (UTC)")


class UserRecord(BaseModel):
    """
    Full stored user, including the password hash.

    Never returned from an endpoint directly; use one of the
    profile projections below.
    """

    id: str
    name: str
    email: str
    password_hash: str
    avatar: str = ""
    status: str = ""
    role: Role = Role.USER
    posts: list[Post] = Field(default_factory=list)


class UserProfile(ApiModel):
    """Everything about a user except the password hash."""

    id: str
    name: str
    email: str
    avatar: str = ""
    status: str = ""
    role: Role = Role.USER
    posts: list[Post] = Field(default_factory=list)

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserProfile":
        return cls(**user.model_dump(exclude={"password_hash"}))


class PublicProfile(ApiModel):
    """What other users see: no email, no role."""

    id: str
    name: str
    avatar: str = ""
    status: str = ""
    posts: list[Post] = Field(default_factory=list)

    @classmethod
    def from_record(cls, user: UserRecord) -> "PublicProfile":
        return cls(
            id=user.id,
            name=user.name,
            avatar=user.avatar,
            status=user.status,
            posts=user.posts,
        )


class ParticipantSummary(ApiModel):
    """Minimal user info shown next to posts and chats."""

    id: str
    name: str
    avatar: str = ""


DELETED_USER_NAME = "Deleted user"


def deleted_user_summary(user_id: str) -> ParticipantSummary:
    """Placeholder for a user id whose record no longer exists."""
    return ParticipantSummary(id=user_id, name=DELETED_USER_NAME, avatar="")


class FeedPost(Post):
    """A post in the global feed, annotated with its author."""

    author: ParticipantSummary


# ---------------------------------------------------------------------------
# Request / response bodies
# ---------------------------------------------------------------------------


class ProfileResponse(ApiModel):
    success: bool = True
    user: UserProfile


class ProfileView(ApiModel):
    """
    Response for viewing another user's profile.

    When the viewer asks for their own id, `same_user` is set and
    `user` is omitted; the client is expected to show /profile instead.
    """

    success: bool = True
    same_user: bool = False
    user: Optional[Union[UserProfile, PublicProfile]] = None


class UpdateEmailRequest(ApiModel):
    email: EmailStr


class EmailResponse(ApiModel):
    success: bool = True
    message: str = "Email updated successfully"
    email: str


class UpdateStatusRequest(ApiModel):
    status: str


class StatusResponse(ApiModel):
    success: bool = True
    message: str = "Status updated successfully"
    status: str


class AvatarResponse(ApiModel):
    success: bool = True
    avatar: str


class PostResponse(ApiModel):
    success: bool = True
    post: Post


class DeletePostRequest(ApiModel):
    id: str = Field(..., description="ID of the post to delete")


class FeedResponse(ApiModel):
    success: bool = True
    posts: list[FeedPost]
    total: int
    page: int
    limit: int


class MessageResponse(ApiModel):
    """Plain acknowledgement."""

    success: bool = True
    message: str
