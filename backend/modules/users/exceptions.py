"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user record doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailTakenError(ConflictError):
    """Raised when another account already holds the email."""

    def __init__(self, email: str):
        super().__init__(
            "Email already in use",
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class PostNotFoundError(NotFoundError):
    """Raised when the caller has no post with the given ID."""

    def __init__(self, post_id: str):
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class InvalidUserIdError(ValidationError):
    """Raised when a path or body user ID is not a valid ObjectId."""

    def __init__(self, user_id: str):
        super().__init__(
            "Invalid user id",
            code="INVALID_USER_ID",
            details={"user_id": user_id},
        )
