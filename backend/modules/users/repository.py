"""
User repository for database access.

Encapsulates all MongoDB queries and data mapping for the `users`
collection, including the embedded `posts` array.
"""

from typing import Optional, Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from shared.database import to_object_id
from shared.repository import BaseRepository
from .exceptions import EmailTakenError
from .models import FeedPost, ParticipantSummary, Post, Role, UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Email uniqueness is enforced by a unique index, so create and
    update_email fail atomically instead of relying on a prior lookup.

    Note: This repository does NOT perform authorization checks.
    The service layer decides which user a request may touch.
    """

    collection_name = "users"

    def ensure_indexes(self) -> None:
        self._collection.create_index("email", unique=True)

    # -------------------------------------------------------------------------
    # User CRUD operations
    # -------------------------------------------------------------------------

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.USER,
    ) -> UserRecord:
        """
        Insert a new user.

        Raises:
            EmailTakenError: If the unique email index rejects the insert.
        """
        doc: dict[str, Any] = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "avatar": "",
            "status": "",
            "role": role.value,
            "posts": [],
        }
        try:
            result = self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise EmailTakenError(email)
        doc["_id"] = result.inserted_id
        return self._map_to_user(doc)

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        doc = self._collection.find_one({"_id": oid})
        return self._map_to_user(doc) if doc else None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        doc = self._collection.find_one({"email": email})
        return self._map_to_user(doc) if doc else None

    def update_email(self, user_id: str, email: str) -> Optional[UserRecord]:
        """
        Change a user's email.

        Raises:
            EmailTakenError: If another user already holds the email.
        """
        try:
            return self._set_fields(user_id, {"email": email})
        except DuplicateKeyError:
            raise EmailTakenError(email)

    def update_status(self, user_id: str, status: str) -> Optional[UserRecord]:
        return self._set_fields(user_id, {"status": status})

    def update_avatar(self, user_id: str, avatar: str) -> Optional[UserRecord]:
        return self._set_fields(user_id, {"avatar": avatar})

    def delete(self, user_id: str) -> bool:
        """
        Hard-delete a user.

        Returns:
            True if a document was removed.
        """
        oid = to_object_id(user_id)
        if oid is None:
            return False
        result = self._collection.delete_one({"_id": oid})
        return result.deleted_count > 0

    # -------------------------------------------------------------------------
    # Post operations
    # -------------------------------------------------------------------------

    def push_post(self, user_id: str, post: Post) -> bool:
        """
        Append a post to the user's posts array.

        Returns:
            True if the user exists.
        """
        oid = to_object_id(user_id)
        if oid is None:
            return False
        result = self._collection.update_one(
            {"_id": oid},
            {"$push": {"posts": self._post_to_doc(post)}},
        )
        return result.matched_count > 0

    def pull_post(self, user_id: str, post_id: str) -> bool:
        """
        Remove one of the user's own posts.

        Returns:
            True if a post was removed.
        """
        oid = to_object_id(user_id)
        pid = to_object_id(post_id)
        if oid is None or pid is None:
            return False
        result = self._collection.update_one(
            {"_id": oid, "posts._id": pid},
            {"$pull": {"posts": {"_id": pid}}},
        )
        return result.modified_count > 0

    def list_all_posts(self) -> list[FeedPost]:
        """
        Collect every user's posts, each annotated with its author.

        Order is unspecified; the service sorts.
        """
        cursor = self._collection.find(
            {"posts.0": {"$exists": True}},
            {"name": 1, "avatar": 1, "posts": 1},
        )
        feed: list[FeedPost] = []
        for doc in cursor:
            author = self._map_to_summary(doc)
            for post_doc in doc.get("posts", []):
                post = self._map_to_post(post_doc)
                feed.append(FeedPost(**post.model_dump(), author=author))
        return feed

    def get_summaries(self, user_ids: list[str]) -> dict[str, ParticipantSummary]:
        """Look up name/avatar for a set of user ids. Missing users are absent."""
        oids = [oid for oid in (to_object_id(uid) for uid in user_ids) if oid]
        if not oids:
            return {}
        cursor = self._collection.find(
            {"_id": {"$in": oids}},
            {"name": 1, "avatar": 1},
        )
        return {str(doc["_id"]): self._map_to_summary(doc) for doc in cursor}

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _set_fields(self, user_id: str, fields: dict[str, Any]) -> Optional[UserRecord]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        doc = self._collection.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_user(doc) if doc else None

    def _post_to_doc(self, post: Post) -> dict[str, Any]:
        return {
            "_id": ObjectId(post.id),
            "image": post.image,
            "description": post.description,
            "date": post.date,
        }

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        return Post(
            id=str(data["_id"]),
            image=data.get("image", ""),
            description=data.get("description", ""),
            date=data["date"],
        )

    def _map_to_summary(self, data: dict[str, Any]) -> ParticipantSummary:
        return ParticipantSummary(
            id=str(data["_id"]),
            name=data.get("name", ""),
            avatar=data.get("avatar", ""),
        )

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map a stored document to UserRecord."""
        return UserRecord(
            id=str(data["_id"]),
            name=data.get("name", ""),
            email=data["email"],
            password_hash=data["password_hash"],
            avatar=data.get("avatar", ""),
            status=data.get("status", ""),
            role=Role(data.get("role", Role.USER.value)),
            posts=[self._map_to_post(p) for p in data.get("posts", [])],
        )
