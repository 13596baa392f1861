"""Application service: shopping list queries for the caller's household."""

from __future__ import annotations

from homedash.application.dto import ShoppingItemDTO
from homedash.application.session import Session
from homedash.domain.model.shopping_item import ShoppingItem
from homedash.domain.model.urgency import UrgencyLevel
from homedash.domain.repository.shopping_item_repository import (
    ShoppingItemRepository,
)


def _to_dtos(items: list[ShoppingItem]) -> list[ShoppingItemDTO]:
    return [ShoppingItemDTO.from_item(i) for i in items]


class ListShoppingItemsHandler:

    def __init__(self, item_repo: ShoppingItemRepository) -> None:
        self._item_repo = item_repo

    async def household(self, session: Session) -> list[ShoppingItemDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        return _to_dtos(await self._item_repo.list_by_household(actor.household_id))

    async def unpurchased(self, session: Session) -> list[ShoppingItemDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        return _to_dtos(await self._item_repo.list_unpurchased(actor.household_id))

    async def search(self, session: Session, term: str) -> list[ShoppingItemDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        return _to_dtos(await self._item_repo.search(actor.household_id, term))

    async def by_urgency(
        self, session: Session, urgency: UrgencyLevel
    ) -> list[ShoppingItemDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        return _to_dtos(
            await self._item_repo.list_by_urgency(actor.household_id, urgency)
        )

    async def by_category(self, session: Session, category: str) -> list[ShoppingItemDTO]:
        actor = session.require_user()
        if not actor.has_household:
            return []
        return _to_dtos(
            await self._item_repo.list_by_category(actor.household_id, category)
        )
