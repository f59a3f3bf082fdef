"""
Centralized configuration for the Altairis backend.

All settings are loaded from environment variables with sensible defaults.
Collaborator-specific settings are namespaced (e.g., MONGO_*, CLOUDINARY_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Altairis API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5005
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "https://altairis.vercel.app"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # MongoDB
    mongo_uri: str = ""
    mongo_db_name: str = "altairis"
    mongo_timeout_ms: int = 5000

    # Session tokens
    access_secret: str = ""
    refresh_secret: str = ""
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30 * 24 * 60  # 30 days
    refreshed_access_token_expire_minutes: int = 15
    refresh_token_expire_days: int = 7

    # Accounts created with one of these emails get the moderator role
    moderator_emails: list[str] = []

    # Cloudinary (avatar and post images)
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
