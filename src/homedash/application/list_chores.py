"""Application service: chore list queries for the caller's household."""

from __future__ import annotations

import structlog

from homedash.application.dto import ChoreDTO
from homedash.application.session import Session
from homedash.domain.model.chore import Chore
from homedash.domain.model.entity import Clock, utc_now
from homedash.domain.repository.chore_repository import ChoreRepository
from homedash.domain.repository.user_repository import UserRepository


class ListChoresHandler:

    def __init__(
        self,
        chore_repo: ChoreRepository,
        user_repo: UserRepository,
        clock: Clock = utc_now,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._chore_repo = chore_repo
        self._user_repo = user_repo
        self._clock = clock
        self._log = logger or structlog.get_logger(__name__)

    async def household(self, session: Session) -> list[ChoreDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        return await self._to_dtos(
            await self._chore_repo.list_by_household(actor.household_id)
        )

    async def mine(self, session: Session) -> list[ChoreDTO]:
        actor = session.require_user()
        return await self._to_dtos(await self._chore_repo.list_by_assignee(actor.id))

    async def incomplete(self, session: Session) -> list[ChoreDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        return await self._to_dtos(
            await self._chore_repo.list_incomplete(actor.household_id)
        )

    async def overdue(self, session: Session) -> list[ChoreDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        chores = await self._chore_repo.list_overdue(actor.household_id, self._clock())
        if chores:
            self._log.info(
                "overdue_chores",
                household_id=actor.household_id,
                count=len(chores),
                chore_ids=[c.id for c in chores],
            )
        return await self._to_dtos(chores)

    async def _to_dtos(self, chores: list[Chore]) -> list[ChoreDTO]:
        names = {u.id: u.name or u.username for u in await self._user_repo.list_all()}
        now = self._clock()
        return [
            ChoreDTO.from_chore(
                c, names.get(c.assigned_to_user_id, f"#{c.assigned_to_user_id}"), now
            )
            for c in chores
        ]
