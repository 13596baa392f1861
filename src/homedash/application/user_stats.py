"""Application service: User Stats use case (query)."""

from __future__ import annotations

from homedash.application.dto import UserStatsDTO
from homedash.domain.exceptions import EntityNotFoundError
from homedash.domain.repository.chore_repository import ChoreRepository
from homedash.domain.repository.shopping_item_repository import (
    ShoppingItemRepository,
)
from homedash.domain.repository.user_repository import UserRepository


class UserStatsHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        chore_repo: ChoreRepository,
        item_repo: ShoppingItemRepository,
    ) -> None:
        self._user_repo = user_repo
        self._chore_repo = chore_repo
        self._item_repo = item_repo

    async def handle(self, user_id: int) -> UserStatsDTO:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")

        assigned = await self._chore_repo.list_by_assignee(user_id)
        completed = [c for c in assigned if c.is_completed and c.completed_date]
        created = await self._chore_repo.list_by_creator(user_id)
        items = await self._item_repo.list_by_creator(user_id)

        # Average days from creation to completion.
        average = 0.0
        if completed:
            total_seconds = sum(
                (c.completed_date - c.created_date).total_seconds() for c in completed
            )
            average = round(total_seconds / len(completed) / 86400, 2)

        return UserStatsDTO(
            username=user.username,
            points=user.points,
            chores_completed=len(completed),
            chores_created=len(created),
            shopping_items_added=len(items),
            average_completion_days=average,
        )
