"""Application service: Delete Chore use case (admins only)."""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import EntityNotFoundError
from homedash.domain.repository.chore_repository import ChoreRepository
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService


class DeleteChoreHandler:

    def __init__(self, chore_repo: ChoreRepository, user_repo: UserRepository) -> None:
        self._chore_repo = chore_repo
        self._user_repo = user_repo

    async def handle(self, session: Session, chore_id: int) -> None:
        actor = session.require_user()

        chore = await self._chore_repo.get_by_id(chore_id)
        if chore is None:
            raise EntityNotFoundError(f"Chore #{chore_id} not found")
        await MembershipService(self._user_repo).require_admin(
            actor.id, chore.household_id, "delete chores"
        )

        await self._chore_repo.delete(chore_id)
        await self._chore_repo.persist()
