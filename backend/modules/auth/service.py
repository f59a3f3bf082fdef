"""
Authentication service implementation.

Registers users, checks credentials, and hands out session tokens.
"""

import logging
from typing import Iterable, Optional

from fastapi.concurrency import run_in_threadpool

from modules.users.models import Role
from modules.users.repository import UserRepository

from .exceptions import EmailNotFoundError, InvalidPasswordError, MissingTokenError
from .interfaces import IAuthService
from .models import TokenPair
from .passwords import hash_password, verify_password
from .tokens import TokenService

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Accounts live in the users collection; sessions are stateless JWTs
    issued by TokenService.
    """

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        moderator_emails: Iterable[str] = (),
    ):
        self._users = users
        self._tokens = tokens
        self._moderator_emails = {normalize_email(e) for e in moderator_emails}

    async def register(self, name: str, email: str, password: str) -> TokenPair:
        email = normalize_email(email)
        role = Role.MODERATOR if email in self._moderator_emails else Role.USER

        # The unique email index rejects duplicates, including concurrent ones.
        user = self._users.create(
            name=name,
            email=email,
            password_hash=await run_in_threadpool(hash_password, password),
            role=role,
        )
        logger.info("Registered user %s (role=%s)", user.id, role.value)
        return self._tokens.issue_session_tokens(user)

    async def login(self, email: str, password: str) -> TokenPair:
        email = normalize_email(email)
        user = self._users.get_by_email(email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise EmailNotFoundError(email)

        if not await run_in_threadpool(verify_password, user.password_hash, password):
            logger.info("Login failed: wrong password for user %s", user.id)
            raise InvalidPasswordError()

        return self._tokens.issue_session_tokens(user)

    async def refresh(self, refresh_token: Optional[str]) -> str:
        if not refresh_token:
            raise MissingTokenError("No refresh token provided")
        return self._tokens.refresh_access(refresh_token)
