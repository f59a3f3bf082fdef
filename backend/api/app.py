"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from modules.auth.routes import router as auth_router
from modules.chats.routes import router as chats_router
from modules.users.routes import router as users_router

from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup fails if the token secrets or MongoDB settings are missing,
    and makes sure the unique indexes exist before serving requests.
    """
    # Startup
    settings = get_settings()
    get_container().startup()
    logger.info("Starting Altairis API on %s:%s", settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down Altairis API")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Social profile, feed and chat API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(users_router, tags=["users"])
    app.include_router(chats_router, tags=["chats"])

    return app


# Application instance for uvicorn
app = create_app()
