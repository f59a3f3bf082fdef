"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for request/response bodies: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from access token claims and made available
    to route handlers via dependency injection.

    Access tokens minted by the refresh endpoint carry no email,
    so email is optional.
    """

    id: str = Field(..., description="User ID (MongoDB ObjectId hex)")
    email: Optional[str] = Field(None, description="User's email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra claims
    }
