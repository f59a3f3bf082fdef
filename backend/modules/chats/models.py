"""
Chats module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import ApiModel
from modules.users.models import ParticipantSummary


def canonical_pair(user_a: str, user_b: str) -> tuple[str, str]:
    """Order two participant ids so (a, b) and (b, a) name the same chat."""
    first, second = sorted((user_a, user_b))
    return first, second


def pair_key(user_a: str, user_b: str) -> str:
    """Unique lookup key for the chat between two users."""
    return ":".join(canonical_pair(user_a, user_b))


class Message(ApiModel):
    """A message embedded in a chat. Immutable once appended."""

    id: str = Field(..., description="Message sub-document ID")
    sender: str = Field(..., description="Sender user ID")
    text: str
    date: datetime = Field(..., description="Append time (UTC)")


class ChatRecord(BaseModel):
    """Stored chat with raw participant ids."""

    id: str
    participants: list[str]
    messages: list[Message] = Field(default_factory=list)

    @property
    def last_activity(self) -> Optional[datetime]:
        return self.messages[-1].date if self.messages else None


class ChatView(ApiModel):
    """Chat as returned to a participant, with resolved user summaries."""

    id: str
    participants: list[ParticipantSummary]
    messages: list[Message] = Field(default_factory=list)


class ChatListResponse(ApiModel):
    success: bool = True
    chats: list[ChatView]
    user_id: str


class SendMessageRequest(ApiModel):
    user_id: Optional[str] = Field(None, description="Recipient user ID")
    message: Optional[str] = Field(None, description="Message text")


class SendMessageResponse(ApiModel):
    success: bool = True
    message: Message
