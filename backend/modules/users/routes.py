"""
Profile, post and feed API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.concurrency import run_in_threadpool

from api.dependencies import get_image_storage, get_user_service
from api.middleware.auth import get_current_user, get_optional_user
from modules.media.interfaces import IImageStorage
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import (
    AvatarResponse,
    DeletePostRequest,
    EmailResponse,
    FeedResponse,
    MessageResponse,
    PostResponse,
    ProfileResponse,
    ProfileView,
    StatusResponse,
    UpdateEmailRequest,
    UpdateStatusRequest,
)

router = APIRouter()


async def _read_upload(upload: Optional[UploadFile]) -> Optional[bytes]:
    if upload is None:
        return None
    data = await upload.read()
    return data or None


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> ProfileResponse:
    """Get the caller's own profile."""
    profile = await service.get_own_profile(user.id)
    return ProfileResponse(user=profile)


@router.get("/user-profile/{user_id}", response_model=ProfileView)
async def get_user_profile(
    user_id: str,
    viewer: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IUserService = Depends(get_user_service),
) -> ProfileView:
    """
    View another user's profile.

    Authentication is optional. A caller requesting their own id gets
    `{"sameUser": true}` and should be redirected to /profile.
    """
    return await service.get_other_profile(user_id, viewer)


@router.patch("/upload-avatar", response_model=AvatarResponse)
async def upload_avatar(
    avatar: Optional[UploadFile] = File(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
    storage: IImageStorage = Depends(get_image_storage),
) -> AvatarResponse:
    """Replace the caller's avatar with an uploaded image."""
    data = await _read_upload(avatar)
    if data is None:
        raise ValidationError("No file uploaded", code="MISSING_FILE")

    # Make sure the user still exists before paying for the upload.
    await service.get_own_profile(user.id)

    url = await run_in_threadpool(
        storage.upload, data, "avatars", f"avatar_{user.id}"
    )
    stored = await service.update_avatar(user.id, url)
    return AvatarResponse(avatar=stored)


@router.patch("/update-email", response_model=EmailResponse)
async def update_email(
    request: UpdateEmailRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> EmailResponse:
    email = await service.update_email(user.id, request.email)
    return EmailResponse(email=email)


@router.patch("/update-status", response_model=StatusResponse)
async def update_status(
    request: UpdateStatusRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> StatusResponse:
    status = await service.update_status(user.id, request.status)
    return StatusResponse(status=status)


@router.delete("/delete-account", response_model=MessageResponse)
async def delete_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Delete the caller's account.

    Existing chats keep the deleted user's id and messages.
    """
    await service.delete_account(user.id)
    return MessageResponse(message="Account deleted successfully")


@router.post("/create-post", response_model=PostResponse, status_code=201)
async def create_post(
    image: Optional[UploadFile] = File(default=None),
    description: Optional[str] = Form(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
    storage: IImageStorage = Depends(get_image_storage),
) -> PostResponse:
    """Publish a post with an image and a (possibly empty) description."""
    data = await _read_upload(image)
    if data is None or description is None:
        raise ValidationError(
            "Missing image or description",
            code="MISSING_POST_FIELDS",
        )

    await service.get_own_profile(user.id)

    url = await run_in_threadpool(storage.upload, data, "posts")
    post = await service.create_post(user.id, url, description)
    return PostResponse(post=post)


@router.get("/posts", response_model=FeedResponse)
async def list_posts(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, description="Posts per page"),
    service: IUserService = Depends(get_user_service),
) -> FeedResponse:
    """
    Global feed: every user's posts, newest first.
    """
    return await service.list_feed(page, limit)


@router.delete("/delete-post", response_model=MessageResponse)
async def delete_post(
    request: DeletePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete one of the caller's own posts."""
    await service.delete_post(user.id, request.id)
    return MessageResponse(message="Post deleted successfully")
