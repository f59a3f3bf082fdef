"""
Tests for chat endpoints.
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from api.dependencies import get_chat_service
from modules.chats.exceptions import MissingMessageFieldsError, SelfMessageError
from modules.chats.models import ChatView, Message
from modules.users.exceptions import UserNotFoundError
from modules.users.models import ParticipantSummary

DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def chat_service(app) -> AsyncMock:
    service = AsyncMock()
    app.dependency_overrides[get_chat_service] = lambda: service
    return service


class TestListChats:
    def test_list_chats(self, client, auth_headers, chat_service, test_user_id, other_user_id):
        chat_service.list_chats.return_value = [
            ChatView(
                id="c1",
                participants=[
                    ParticipantSummary(id=test_user_id, name="Me"),
                    ParticipantSummary(id=other_user_id, name="You"),
                ],
                messages=[Message(id="m1", sender=test_user_id, text="hi", date=DATE)],
            )
        ]

        response = client.get("/chats", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["userId"] == test_user_id
        assert body["chats"][0]["participants"][1]["name"] == "You"
        assert body["chats"][0]["messages"][0]["text"] == "hi"
        chat_service.list_chats.assert_awaited_once_with(test_user_id)

    def test_requires_auth(self, client, chat_service):
        assert client.get("/chats").status_code == 401


class TestSendMessage:
    def test_send_message(self, client, auth_headers, chat_service, test_user_id, other_user_id):
        chat_service.send_message.return_value = Message(
            id="m1", sender=test_user_id, text="hello", date=DATE
        )

        response = client.post(
            "/send-message",
            json={"userId": other_user_id, "message": "hello"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["message"]["text"] == "hello"
        chat_service.send_message.assert_awaited_once_with(test_user_id, other_user_id, "hello")

    def test_missing_fields(self, client, auth_headers, chat_service):
        chat_service.send_message.side_effect = MissingMessageFieldsError()

        response = client.post("/send-message", json={}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "MISSING_MESSAGE_FIELDS"

    def test_self_message(self, client, auth_headers, chat_service, test_user_id):
        chat_service.send_message.side_effect = SelfMessageError(test_user_id)

        response = client.post(
            "/send-message",
            json={"userId": test_user_id, "message": "hi"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "SELF_MESSAGE"

    def test_unknown_recipient(self, client, auth_headers, chat_service, other_user_id):
        chat_service.send_message.side_effect = UserNotFoundError(other_user_id)

        response = client.post(
            "/send-message",
            json={"userId": other_user_id, "message": "hi"},
            headers=auth_headers,
        )

        assert response.status_code == 404
