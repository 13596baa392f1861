"""Application service: Register User use case."""

from __future__ import annotations

import structlog

from homedash.domain.exceptions import DuplicateKeyError, ValidationError
from homedash.domain.model.user import NO_HOUSEHOLD, User
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.password_hasher import PasswordHasher
from homedash.domain.validation import (
    is_password_strong,
    is_valid_email,
    is_valid_username,
    require_text,
)


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._log = logger or structlog.get_logger(__name__)

    async def handle(self, username: str, password: str, name: str, email: str) -> User:
        """Create an account that does not belong to any household yet.

        The uniqueness pre-check only gives an early answer before the
        (slow) hash; the repository enforces it again when inserting.
        """
        if not is_valid_username(username):
            raise ValidationError(
                "Username must be 3-50 characters long, letters, digits or "
                "underscores only, starting with a letter"
            )
        if not is_valid_email(email):
            raise ValidationError("Please provide a valid email")
        if not is_password_strong(password):
            raise ValidationError(
                "Password must be at least 8 characters long and include "
                "uppercase and lowercase letters and a digit"
            )
        name = require_text(name, "Name", max_len=100)

        if not await self._user_repo.is_username_unique(username):
            self._log.warning("registration_rejected", username=username)
            raise DuplicateKeyError("username", username)

        user = User(
            username=username,
            password_hash=self._hasher.hash(password),
            name=name,
            email=email.strip(),
            household_id=NO_HOUSEHOLD,
        )
        created = await self._user_repo.insert(user)
        await self._user_repo.persist()

        self._log.info("user_registered", username=created.username, user_id=created.id)
        return created
