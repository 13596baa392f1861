"""Application service: Change Password use case."""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import (
    EntityNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.password_hasher import PasswordHasher
from homedash.domain.validation import is_password_strong


class ChangePasswordHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    async def handle(self, session: Session, current_password: str, new_password: str) -> None:
        actor = session.require_user()
        if not current_password or not new_password:
            raise ValidationError("Current and new passwords are required")
        if not is_password_strong(new_password):
            raise ValidationError(
                "New password must be at least 8 characters long and include "
                "uppercase and lowercase letters and a digit"
            )

        user = await self._user_repo.get_by_id(actor.id)
        if user is None:
            raise EntityNotFoundError(f"User #{actor.id} not found")
        if not self._hasher.verify(current_password, user.password_hash):
            raise UnauthorizedError("Current password is incorrect")

        user.password_hash = self._hasher.hash(new_password)
        updated = await self._user_repo.update(user)
        await self._user_repo.persist()
        session.login(updated)
