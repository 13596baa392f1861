"""Application service: Add Shopping Item use case."""

from __future__ import annotations

from decimal import Decimal

from homedash.application.session import Session
from homedash.domain.exceptions import BusinessRuleViolation
from homedash.domain.model.shopping_item import MAX_PRICE, MIN_PRICE, ShoppingItem
from homedash.domain.model.urgency import UrgencyLevel
from homedash.domain.repository.shopping_item_repository import (
    ShoppingItemRepository,
)
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService
from homedash.domain.validation import require_decimal_range, require_text


class AddShoppingItemHandler:

    def __init__(
        self, item_repo: ShoppingItemRepository, user_repo: UserRepository
    ) -> None:
        self._item_repo = item_repo
        self._user_repo = user_repo

    async def handle(
        self,
        session: Session,
        name: str,
        category: str,
        price: Decimal,
        urgency: UrgencyLevel = UrgencyLevel.MEDIUM,
    ) -> ShoppingItem:
        """Add an item to the caller's household list.

        The repository stores the category normalized ("Groceries").
        """
        actor = session.require_user()
        if not actor.has_household:
            raise BusinessRuleViolation("You must belong to a household to add items")

        name = require_text(name, "Item name", max_len=200)
        category = require_text(category, "Category", max_len=50)
        require_decimal_range(price, "Price", low=MIN_PRICE, high=MAX_PRICE)
        user = await MembershipService(self._user_repo).require_member(
            actor.id, actor.household_id
        )

        item = await self._item_repo.insert(
            ShoppingItem(
                name=name,
                category=category,
                price=price,
                urgency=urgency,
                created_by_user_id=user.id,
                household_id=user.household_id,
            )
        )
        await self._item_repo.persist()
        return item
