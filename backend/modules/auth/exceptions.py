"""
Authentication module exceptions.

These exceptions are raised by the auth module and rendered by the
API error handlers. A missing token is a 401; a token that is present
but fails verification is a 403, with distinct codes for expiry and
invalid signature/format so clients know when refreshing can help.
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    status_code = 403

    def __init__(self, message: str = "Failed to authenticate token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    status_code = 403

    def __init__(self, message: str = "Token expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No token provided"):
        super().__init__(message, code="MISSING_TOKEN")


class EmailNotFoundError(AuthenticationError):
    """Raised at login when no account has the email."""

    def __init__(self, email: str):
        super().__init__(
            "Email not found",
            code="EMAIL_NOT_FOUND",
            details={"email": email},
        )


class InvalidPasswordError(AuthenticationError):
    """Raised at login when the password doesn't match."""

    def __init__(self):
        super().__init__("Invalid password", code="INVALID_PASSWORD")
