"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ValidationErrorResponse(BaseModel):
    """Request body/query validation error format."""

    success: bool = False
    error: str = "VALIDATION_ERROR"
    message: str = "Invalid request"
    detail: list[dict]


SERVER_ERROR = ErrorResponse(error="SERVER_ERROR", message="Server error")
