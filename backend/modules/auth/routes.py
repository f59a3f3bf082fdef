"""
Registration, login and token refresh endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import (
    AccessTokenResponse,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenPair,
)

router = APIRouter()


@router.post("/register", response_model=TokenPair)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenPair:
    """Create an account and return a session token pair."""
    return await service.register(request.name, request.email, request.password)


@router.post("/login", response_model=TokenPair)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenPair:
    return await service.login(request.email, request.password)


@router.post("/refresh-token", response_model=AccessTokenResponse)
async def refresh_token(
    request: RefreshRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AccessTokenResponse:
    """
    Exchange a refresh token for a new 15-minute access token.

    The refresh token itself stays valid until it expires.
    """
    access_token = await service.refresh(request.refresh_token)
    return AccessTokenResponse(access_token=access_token)
