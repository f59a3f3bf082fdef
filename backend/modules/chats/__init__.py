"""
Chats module.

Two-party conversations stored as one document per pair of users,
with an append-only message list.

Public API:
- IChatService: Interface for chat operations
- ChatView / Message: Chat models
- canonical_pair / pair_key: Order-independent chat identity
"""

from .interfaces import IChatService
from .models import (
    ChatRecord,
    ChatView,
    ChatListResponse,
    Message,
    SendMessageRequest,
    canonical_pair,
    pair_key,
)
from .exceptions import MissingMessageFieldsError, SelfMessageError

__all__ = [
    # Interface
    "IChatService",
    # Models
    "ChatRecord",
    "ChatView",
    "ChatListResponse",
    "Message",
    "SendMessageRequest",
    "canonical_pair",
    "pair_key",
    # Exceptions
    "MissingMessageFieldsError",
    "SelfMessageError",
]
