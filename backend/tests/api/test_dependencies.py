"""Tests for the service container."""

import pytest
from unittest.mock import MagicMock, patch

from api.dependencies import ServiceContainer, get_container, reset_container


class TestServiceContainer:
    def test_singleton(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first

    def test_services_share_repository(self, token_service):
        container = ServiceContainer()
        container._database = MagicMock()
        container._tokens = token_service

        assert container.auth._users is container.users._users
        assert container.chats._users is container.user_repository

    def test_startup_creates_indexes(self, token_service):
        container = ServiceContainer()
        container._tokens = token_service
        container._user_repository = MagicMock()
        container._chat_repository = MagicMock()

        container.startup()

        container._user_repository.ensure_indexes.assert_called_once()
        container._chat_repository.ensure_indexes.assert_called_once()

    def test_startup_fails_without_secrets(self):
        settings = MagicMock(access_secret="", refresh_secret="")
        with patch("shared.config.get_settings", return_value=settings):
            with pytest.raises(RuntimeError, match="secrets missing"):
                ServiceContainer().startup()
