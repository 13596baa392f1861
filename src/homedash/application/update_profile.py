"""Application service: Update Profile use case."""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import EntityNotFoundError, ValidationError
from homedash.domain.model.user import User
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.validation import is_valid_email, require_text


class UpdateProfileHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(
        self, session: Session, name: str | None = None, email: str | None = None
    ) -> User:
        """Change the caller's display name and/or email."""
        actor = session.require_user()
        user = await self._user_repo.get_by_id(actor.id)
        if user is None:
            raise EntityNotFoundError(f"User #{actor.id} not found")

        if name is not None:
            user.name = require_text(name, "Name", max_len=100)
        if email is not None:
            if not is_valid_email(email):
                raise ValidationError("Please provide a valid email")
            user.email = email.strip()

        updated = await self._user_repo.update(user)
        await self._user_repo.persist()
        session.login(updated)
        return updated
