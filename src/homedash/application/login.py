"""Application service: Login use case."""

from __future__ import annotations

import structlog

from homedash.application.session import Session
from homedash.domain.exceptions import UnauthorizedError, ValidationError
from homedash.domain.model.user import User
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.password_hasher import PasswordHasher


class LoginHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._log = logger or structlog.get_logger(__name__)

    async def handle(self, session: Session, username: str, password: str) -> User:
        if not username or not username.strip() or not password:
            raise ValidationError("Username and password are required")

        user = await self._user_repo.get_by_username(username.strip())
        if user is None or not self._hasher.verify(password, user.password_hash):
            self._log.warning("login_failed", username=username)
            raise UnauthorizedError("Invalid username or password")

        session.login(user)
        self._log.info("login_succeeded", username=user.username, user_id=user.id)
        return user
