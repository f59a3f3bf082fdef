"""
Chats module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import ChatView, Message


@runtime_checkable
class IChatService(Protocol):
    """Interface for two-party chat operations."""

    async def list_chats(self, user_id: str) -> list[ChatView]:
        """
        List the chats a user participates in, most recently active first.

        Participants are resolved to {id, name, avatar}; users whose
        accounts were deleted appear as a "Deleted user" placeholder.
        """
        ...

    async def send_message(
        self,
        user_id: str,
        recipient_id: Optional[str],
        text: Optional[str],
    ) -> Message:
        """
        Append a message to the chat between sender and recipient.

        The chat is created on the first message between the pair.

        Returns:
            The appended message (not the whole chat)

        Raises:
            ValidationError: If recipient or text is missing or invalid
            UserNotFoundError: If the recipient doesn't exist
        """
        ...
