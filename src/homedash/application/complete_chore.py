"""Application service: Complete Chore use case.

The chore and the user live in different collections. The chore update
and the points credit are two separate writes, each persisted on its
own: a failure between them leaves the chore completed without the
points. There is deliberately no cross-store transaction.
"""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import BusinessRuleViolation, EntityNotFoundError
from homedash.domain.model.entity import Clock, utc_now
from homedash.domain.repository.chore_repository import ChoreRepository
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService
from homedash.domain.service.points import calculate_award


class CompleteChoreHandler:

    def __init__(
        self,
        chore_repo: ChoreRepository,
        user_repo: UserRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._chore_repo = chore_repo
        self._user_repo = user_repo
        self._clock = clock

    async def handle(self, session: Session, chore_id: int) -> int:
        """Mark the caller's chore as done and return the points awarded."""
        actor = session.require_user()

        chore = await self._chore_repo.get_by_id(chore_id)
        if chore is None:
            raise EntityNotFoundError(f"Chore #{chore_id} not found")
        if chore.is_completed:
            raise BusinessRuleViolation("This chore has already been completed")
        if chore.assigned_to_user_id != actor.id:
            raise BusinessRuleViolation("You are not assigned to this chore")

        user = await MembershipService(self._user_repo).require_user(actor.id)
        award = calculate_award(chore, self._clock())

        chore.is_completed = True
        await self._chore_repo.update(chore)

        user.points += award
        updated = await self._user_repo.update(user)

        await self._chore_repo.persist()
        await self._user_repo.persist()
        session.login(updated)
        return award
