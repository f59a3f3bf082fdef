"""
Chats module exceptions.
"""

from shared.exceptions import ValidationError


class MissingMessageFieldsError(ValidationError):
    """Raised when a message has no recipient or no text."""

    def __init__(self):
        super().__init__(
            "Recipient and message are required",
            code="MISSING_MESSAGE_FIELDS",
        )


class SelfMessageError(ValidationError):
    """Raised when a user tries to message themselves."""

    def __init__(self, user_id: str):
        super().__init__(
            "Cannot send a message to yourself",
            code="SELF_MESSAGE",
            details={"user_id": user_id},
        )
