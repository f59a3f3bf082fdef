"""
Chat repository for database access.

Encapsulates MongoDB queries for the `chats` collection. Each document
holds exactly one pair of participants and an append-only messages
array.
"""

import logging
from typing import Any

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from shared.database import to_object_id
from shared.repository import BaseRepository
from .models import ChatRecord, Message, canonical_pair, pair_key

logger = logging.getLogger(__name__)


class ChatRepository(BaseRepository[ChatRecord]):
    """
    Repository for chat data access.

    `pair_key` (the sorted participant ids joined by ":") carries a
    unique index, which guarantees a single chat per pair of users.
    A unique index on the `participants` array itself would not: it
    would let each user appear in only one chat.
    """

    collection_name = "chats"

    def ensure_indexes(self) -> None:
        self._collection.create_index("pair_key", unique=True)
        self._collection.create_index("participants")

    def append_message(self, user_a: str, user_b: str, message: Message) -> None:
        """
        Append a message to the chat between two users, creating it if needed.

        Lookup-or-create is a single upsert. When two first messages race,
        the loser hits the unique pair_key index; retrying turns its upsert
        into a plain append on the chat the winner created.
        """
        first, second = canonical_pair(user_a, user_b)
        query = {"pair_key": pair_key(first, second)}
        update = {
            "$setOnInsert": {
                "participants": [ObjectId(first), ObjectId(second)],
            },
            "$push": {"messages": self._message_to_doc(message)},
        }
        try:
            self._collection.update_one(query, update, upsert=True)
        except DuplicateKeyError:
            logger.debug("Concurrent chat creation for %s, retrying as append", query["pair_key"])
            self._collection.update_one(query, update, upsert=True)

    def list_for_user(self, user_id: str) -> list[ChatRecord]:
        """All chats the user participates in."""
        oid = to_object_id(user_id)
        if oid is None:
            return []
        cursor = self._collection.find({"participants": oid})
        return [self._map_to_chat(doc) for doc in cursor]

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _message_to_doc(self, message: Message) -> dict[str, Any]:
        return {
            "_id": ObjectId(message.id),
            "sender": ObjectId(message.sender),
            "text": message.text,
            "date": message.date,
        }

    def _map_to_message(self, data: dict[str, Any]) -> Message:
        return Message(
            id=str(data["_id"]),
            sender=str(data["sender"]),
            text=data.get("text", ""),
            date=data["date"],
        )

    def _map_to_chat(self, data: dict[str, Any]) -> ChatRecord:
        return ChatRecord(
            id=str(data["_id"]),
            participants=[str(p) for p in data.get("participants", [])],
            messages=[self._map_to_message(m) for m in data.get("messages", [])],
        )
