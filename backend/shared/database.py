"""
Database client factory for MongoDB.

Provides a process-wide MongoClient and the application database handle.
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database

from .config import get_settings

# Module-level client cache
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """
    Get the shared MongoDB client.

    The client maintains its own connection pool, so one instance
    is reused for the whole process.

    Returns:
        MongoClient configured from MONGO_URI
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.mongo_uri:
            raise RuntimeError(
                "MongoDB configuration missing. "
                "Set the MONGO_URI environment variable."
            )
        _client = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            tz_aware=True,
        )

    return _client


def get_database() -> Database:
    """
    Get the application database.

    Returns:
        Database named by MONGO_DB_NAME on the shared client
    """
    settings = get_settings()
    return get_mongo_client()[settings.mongo_db_name]


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Parse a hex string id, returning None when it is not a valid ObjectId."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def normalize_id(value: Optional[str]) -> Optional[str]:
    """Canonical lowercase hex form of an id, or None when it is not a valid ObjectId."""
    oid = to_object_id(value)
    return str(oid) if oid is not None else None


def mongo_now() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def reset_client_cache() -> None:
    """
    Close and reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _client
    if _client is not None:
        _client.close()
    _client = None
