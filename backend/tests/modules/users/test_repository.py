"""Tests for modules/users/repository.py."""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from modules.users.exceptions import EmailTakenError
from modules.users.models import Post, Role
from modules.users.repository import UserRepository

USER_OID = ObjectId("64b7f0c2a1b2c3d4e5f60718")
POST_OID = ObjectId("64b7f0c2a1b2c3d4e5f60799")
DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def user_doc(**overrides):
    doc = {
        "_id": USER_OID,
        "name": "Test User",
        "email": "test@example.com",
        "password_hash": "hash",
        "avatar": "",
        "status": "",
        "role": "user",
        "posts": [],
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def db() -> MagicMock:
    return MagicMock()


@pytest.fixture
def collection(db) -> MagicMock:
    return db.__getitem__.return_value


@pytest.fixture
def repo(db) -> UserRepository:
    return UserRepository(db)


class TestIndexes:
    def test_unique_email_index(self, repo, collection, db):
        repo.ensure_indexes()

        db.__getitem__.assert_called_with("users")
        collection.create_index.assert_called_once_with("email", unique=True)


class TestCreate:
    def test_create_inserts_document(self, repo, collection):
        collection.insert_one.return_value.inserted_id = USER_OID

        user = repo.create("Test User", "test@example.com", "hash", Role.MODERATOR)

        doc = collection.insert_one.call_args.args[0]
        assert doc["email"] == "test@example.com"
        assert doc["password_hash"] == "hash"
        assert doc["role"] == "moderator"
        assert doc["posts"] == []
        assert user.id == str(USER_OID)
        assert user.role == Role.MODERATOR

    def test_duplicate_email(self, repo, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")

        with pytest.raises(EmailTakenError):
            repo.create("Test User", "test@example.com", "hash")


class TestLookups:
    def test_get_by_id(self, repo, collection):
        collection.find_one.return_value = user_doc(
            posts=[{"_id": POST_OID, "image": "https://img", "description": "d", "date": DATE}]
        )

        user = repo.get_by_id(str(USER_OID))

        collection.find_one.assert_called_once_with({"_id": USER_OID})
        assert user.email == "test@example.com"
        assert user.posts[0].id == str(POST_OID)

    def test_get_by_id_invalid(self, repo, collection):
        assert repo.get_by_id("nope") is None
        collection.find_one.assert_not_called()

    def test_get_by_id_missing(self, repo, collection):
        collection.find_one.return_value = None
        assert repo.get_by_id(str(USER_OID)) is None

    def test_get_by_email(self, repo, collection):
        collection.find_one.return_value = user_doc()

        user = repo.get_by_email("test@example.com")

        collection.find_one.assert_called_once_with({"email": "test@example.com"})
        assert user.id == str(USER_OID)

    def test_get_summaries(self, repo, collection):
        collection.find.return_value = [{"_id": USER_OID, "name": "Test User", "avatar": "a"}]

        summaries = repo.get_summaries([str(USER_OID), "invalid"])

        query = collection.find.call_args.args[0]
        assert query == {"_id": {"$in": [USER_OID]}}
        assert summaries[str(USER_OID)].name == "Test User"

    def test_get_summaries_empty(self, repo, collection):
        assert repo.get_summaries([]) == {}
        collection.find.assert_not_called()


class TestUpdates:
    def test_update_email(self, repo, collection):
        collection.find_one_and_update.return_value = user_doc(email="new@example.com")

        user = repo.update_email(str(USER_OID), "new@example.com")

        collection.find_one_and_update.assert_called_once_with(
            {"_id": USER_OID},
            {"$set": {"email": "new@example.com"}},
            return_document=ReturnDocument.AFTER,
        )
        assert user.email == "new@example.com"

    def test_update_email_taken(self, repo, collection):
        collection.find_one_and_update.side_effect = DuplicateKeyError("E11000 duplicate key")

        with pytest.raises(EmailTakenError):
            repo.update_email(str(USER_OID), "taken@example.com")

    def test_update_status(self, repo, collection):
        collection.find_one_and_update.return_value = user_doc(status="busy")

        assert repo.update_status(str(USER_OID), "busy").status == "busy"

    def test_update_avatar_missing_user(self, repo, collection):
        collection.find_one_and_update.return_value = None

        assert repo.update_avatar(str(USER_OID), "https://img") is None

    def test_delete(self, repo, collection):
        collection.delete_one.return_value.deleted_count = 1

        assert repo.delete(str(USER_OID)) is True
        collection.delete_one.assert_called_once_with({"_id": USER_OID})

    def test_delete_missing(self, repo, collection):
        collection.delete_one.return_value.deleted_count = 0

        assert repo.delete(str(USER_OID)) is False


class TestPosts:
    def test_push_post(self, repo, collection):
        collection.update_one.return_value.matched_count = 1
        post = Post(id=str(POST_OID), image="https://img", description="", date=DATE)

        assert repo.push_post(str(USER_OID), post) is True

        query, update = collection.update_one.call_args.args
        assert query == {"_id": USER_OID}
        assert update["$push"]["posts"]["_id"] == POST_OID

    def test_pull_post_scopes_to_owner(self, repo, collection):
        collection.update_one.return_value.modified_count = 1

        assert repo.pull_post(str(USER_OID), str(POST_OID)) is True

        collection.update_one.assert_called_once_with(
            {"_id": USER_OID, "posts._id": POST_OID},
            {"$pull": {"posts": {"_id": POST_OID}}},
        )

    def test_pull_post_not_owned(self, repo, collection):
        collection.update_one.return_value.modified_count = 0

        assert repo.pull_post(str(USER_OID), str(POST_OID)) is False

    def test_list_all_posts_annotates_author(self, repo, collection):
        collection.find.return_value = [
            {
                "_id": USER_OID,
                "name": "Test User",
                "avatar": "a",
                "posts": [
                    {"_id": POST_OID, "image": "https://img", "description": "d", "date": DATE},
                ],
            }
        ]

        posts = repo.list_all_posts()

        assert len(posts) == 1
        assert posts[0].author.id == str(USER_OID)
        assert posts[0].author.name == "Test User"
        assert posts[0].id == str(POST_OID)
