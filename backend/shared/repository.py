"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB collection access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic
from pymongo.collection import Collection
from pymongo.database import Database


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - MongoDB database access via self._db
    - The repository's own collection via self._collection
    - Generic type parameter for model type hints

    Subclasses set `collection_name` and handle document-to-Pydantic
    model mapping internally.

    Example:
        class UserRepository(BaseRepository[UserRecord]):
            collection_name = "users"

            def get_by_id(self, user_id: str) -> Optional[UserRecord]:
                doc = self._collection.find_one({"_id": to_object_id(user_id)})
                return self._map_to_user(doc) if doc else None
    """

    collection_name: str = ""

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a MongoDB database.

        Args:
            db: Database handle for data operations.
        """
        self._db = db

    @property
    def _collection(self) -> Collection:
        return self._db[self.collection_name]

    def ensure_indexes(self) -> None:
        """Create the indexes the repository relies on. Idempotent."""
        return None
