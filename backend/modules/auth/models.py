"""
Authentication module data models.

These models define the token claims and the register/login/refresh
request and response bodies.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from shared.models import ApiModel


class AccessClaims(BaseModel):
    """
    Decoded access token payload.

    Tokens issued at login carry the email; tokens minted by the
    refresh endpoint do not.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class RefreshClaims(BaseModel):
    """Decoded refresh token payload. Carries only the subject."""

    sub: str = Field(..., description="Subject (user ID)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class TokenPair(ApiModel):
    """Access and refresh tokens returned by register and login."""

    success: bool = True
    access_token: str = Field(..., description="Bearer token for API requests")
    refresh_token: str = Field(..., description="Token for minting new access tokens")


class AccessTokenResponse(ApiModel):
    success: bool = True
    access_token: str


class RegisterRequest(ApiModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(ApiModel):
    email: str
    password: str


class RefreshRequest(ApiModel):
    refresh_token: Optional[str] = None
