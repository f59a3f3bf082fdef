"""
Chat service implementation.
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId

from shared.database import mongo_now, normalize_id
from modules.users.exceptions import InvalidUserIdError, UserNotFoundError
from modules.users.models import deleted_user_summary
from modules.users.repository import UserRepository

from .exceptions import MissingMessageFieldsError, SelfMessageError
from .interfaces import IChatService
from .models import ChatRecord, ChatView, Message
from .repository import ChatRepository

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class ChatService(IChatService):
    """Chat service backed by the chats and users collections."""

    def __init__(self, chats: ChatRepository, users: UserRepository):
        self._chats = chats
        self._users = users

    async def list_chats(self, user_id: str) -> list[ChatView]:
        records = self._chats.list_for_user(user_id)
        records.sort(key=lambda c: c.last_activity or _EPOCH, reverse=True)

        participant_ids = {p for chat in records for p in chat.participants}
        summaries = self._users.get_summaries(sorted(participant_ids))

        return [self._to_view(chat, summaries) for chat in records]

    async def send_message(
        self,
        user_id: str,
        recipient_id: Optional[str],
        text: Optional[str],
    ) -> Message:
        if not recipient_id or not text:
            raise MissingMessageFieldsError()
        normalized = normalize_id(recipient_id)
        if normalized is None:
            raise InvalidUserIdError(recipient_id)
        recipient_id = normalized
        user_id = normalize_id(user_id) or user_id
        if recipient_id == user_id:
            raise SelfMessageError(user_id)
        if self._users.get_by_id(recipient_id) is None:
            raise UserNotFoundError(recipient_id)

        message = Message(
            id=str(ObjectId()),
            sender=user_id,
            text=text,
            date=mongo_now(),
        )
        self._chats.append_message(user_id, recipient_id, message)
        return message

    def _to_view(self, chat: ChatRecord, summaries: dict) -> ChatView:
        return ChatView(
            id=chat.id,
            participants=[
                summaries.get(p) or deleted_user_summary(p)
                for p in chat.participants
            ],
            messages=chat.messages,
        )
