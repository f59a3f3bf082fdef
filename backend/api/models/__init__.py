"""API models package."""

from .errors import ErrorResponse, ValidationErrorResponse, SERVER_ERROR

__all__ = [
    "ErrorResponse",
    "ValidationErrorResponse",
    "SERVER_ERROR",
]
