"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_token_service, reset_container
from modules.auth.tokens import TokenService
from modules.users.models import Role, UserRecord


# Test signing secrets (only for testing)
TEST_ACCESS_SECRET = "test-access-secret-for-testing-only"
TEST_REFRESH_SECRET = "test-refresh-secret-for-testing-only"

TEST_USER_ID = "64b7f0c2a1b2c3d4e5f60718"
OTHER_USER_ID = "64b7f0c2a1b2c3d4e5f60719"


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def other_user_id() -> str:
    return OTHER_USER_ID


@pytest.fixture
def token_service() -> TokenService:
    """Token service signing with the test secrets."""
    return TokenService(TEST_ACCESS_SECRET, TEST_REFRESH_SECRET)


@pytest.fixture
def make_user():
    """Factory for stored user records."""

    def _make(
        user_id: str = TEST_USER_ID,
        email: str = "test@example.com",
        name: str = "Test User",
        role: Role = Role.USER,
        password_hash: str = "not-a-real-hash",
        **fields,
    ) -> UserRecord:
        return UserRecord(
            id=user_id,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            **fields,
        )

    return _make


@pytest.fixture
def test_user(make_user) -> UserRecord:
    return make_user()


@pytest.fixture
def auth_token(token_service: TokenService, test_user: UserRecord) -> str:
    """Create a valid access token for the test user."""
    return token_service.issue_session_tokens(test_user).access_token


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def app(token_service: TokenService):
    """Create a fresh app wired to the test token service."""
    app = create_app()
    app.dependency_overrides[get_token_service] = lambda: token_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """
    Test client without lifespan (no MongoDB connection).

    Server errors are rendered as responses instead of re-raised.
    """
    return TestClient(app, raise_server_exceptions=False)
