"""
Chat API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_chat_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IChatService
from .models import ChatListResponse, SendMessageRequest, SendMessageResponse

router = APIRouter()


@router.get("/chats", response_model=ChatListResponse)
async def list_chats(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
) -> ChatListResponse:
    """List the caller's chats with full message history."""
    chats = await service.list_chats(user.id)
    return ChatListResponse(chats=chats, user_id=user.id)


@router.post("/send-message", response_model=SendMessageResponse)
async def send_message(
    request: SendMessageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IChatService = Depends(get_chat_service),
) -> SendMessageResponse:
    """
    Send a message to another user.

    Starts the chat if this is the pair's first message.
    """
    message = await service.send_message(user.id, request.user_id, request.message)
    return SendMessageResponse(message=message)
