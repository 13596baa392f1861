"""Application service: Mark Shopping Item Purchased use case."""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import BusinessRuleViolation, EntityNotFoundError
from homedash.domain.model.shopping_item import ShoppingItem
from homedash.domain.repository.shopping_item_repository import (
    ShoppingItemRepository,
)
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService


class MarkPurchasedHandler:

    def __init__(
        self, item_repo: ShoppingItemRepository, user_repo: UserRepository
    ) -> None:
        self._item_repo = item_repo
        self._user_repo = user_repo

    async def handle(self, session: Session, item_id: int) -> ShoppingItem:
        """Flag the item as bought; the repository stamps ``purchased_date``."""
        actor = session.require_user()

        item = await self._item_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Shopping item #{item_id} not found")
        await MembershipService(self._user_repo).require_member(
            actor.id, item.household_id
        )
        if item.is_purchased:
            raise BusinessRuleViolation(f"'{item.name}' has already been purchased")

        item.is_purchased = True
        updated = await self._item_repo.update(item)
        await self._item_repo.persist()
        return updated
