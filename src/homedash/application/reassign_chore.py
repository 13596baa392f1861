"""Application service: Reassign Chore use case (admins only)."""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import BusinessRuleViolation, EntityNotFoundError
from homedash.domain.model.chore import Chore
from homedash.domain.repository.chore_repository import ChoreRepository
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService


class ReassignChoreHandler:

    def __init__(self, chore_repo: ChoreRepository, user_repo: UserRepository) -> None:
        self._chore_repo = chore_repo
        self._user_repo = user_repo

    async def handle(self, session: Session, chore_id: int, new_user_id: int) -> Chore:
        actor = session.require_user()

        chore = await self._chore_repo.get_by_id(chore_id)
        if chore is None:
            raise EntityNotFoundError(f"Chore #{chore_id} not found")

        membership = MembershipService(self._user_repo)
        await membership.require_admin(actor.id, chore.household_id, "reassign chores")
        assignee = await membership.require_user(new_user_id)
        if assignee.household_id != chore.household_id:
            raise BusinessRuleViolation("New assignee does not belong to this household")

        chore.assigned_to_user_id = assignee.id
        updated = await self._chore_repo.update(chore)
        await self._chore_repo.persist()
        return updated
