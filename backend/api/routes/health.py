"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pymongo.database import Database
from pymongo.errors import PyMongoError

from shared.config import get_settings
from ..dependencies import get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


def get_db() -> Database:
    return get_container().database


@router.get("/")
async def root() -> dict[str, str]:
    return {"message": "Server is running"}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(db: Database = Depends(get_db)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Pings MongoDB; reports "unavailable" instead of failing.
    """
    try:
        db.command("ping")
    except PyMongoError as e:
        logger.warning("Readiness check: database ping failed: %s", e)
        return ReadinessResponse(status="not ready", database="unavailable")
    return ReadinessResponse(status="ready", database="connected")
