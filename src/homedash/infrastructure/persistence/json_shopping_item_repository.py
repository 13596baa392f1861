"""JSON-file-backed implementation of ShoppingItemRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Sequence

from homedash.domain.exceptions import ValidationError
from homedash.domain.model.shopping_item import (
    MAX_PRICE,
    MIN_PRICE,
    ShoppingItem,
    normalize_category,
)
from homedash.domain.model.urgency import UrgencyLevel
from homedash.domain.repository.shopping_item_repository import (
    ShoppingItemRepository,
)
from homedash.domain.validation import require_decimal_range
from homedash.infrastructure.persistence.codec import (
    datetime_from_raw,
    datetime_to_raw,
)
from homedash.infrastructure.persistence.json_repository import JsonRepository


def _newest_first(items: list[ShoppingItem]) -> list[ShoppingItem]:
    return sorted(items, key=lambda i: i.created_date, reverse=True)


def _most_urgent_first(items: list[ShoppingItem]) -> list[ShoppingItem]:
    # Stable sorts: newest first within each urgency rank.
    return sorted(_newest_first(items), key=lambda i: i.urgency.rank)


def _unpurchased_first(items: list[ShoppingItem]) -> list[ShoppingItem]:
    return sorted(_most_urgent_first(items), key=lambda i: i.is_purchased)


class JsonShoppingItemRepository(JsonRepository[ShoppingItem], ShoppingItemRepository):

    entity_name = "Shopping item"

    # --- ShoppingItemRepository interface --------------------------------------

    async def list_by_household(self, household_id: int) -> list[ShoppingItem]:
        return _unpurchased_first(
            await self.filter_by(lambda i: i.household_id == household_id)
        )

    async def list_by_urgency(
        self, household_id: int, urgency: UrgencyLevel
    ) -> list[ShoppingItem]:
        return _newest_first(
            await self.filter_by(
                lambda i: i.household_id == household_id and i.urgency == urgency
            )
        )

    async def list_unpurchased(self, household_id: int) -> list[ShoppingItem]:
        return _most_urgent_first(
            await self.filter_by(
                lambda i: i.household_id == household_id and not i.is_purchased
            )
        )

    async def list_by_category(
        self, household_id: int, category: str
    ) -> list[ShoppingItem]:
        if not category or not category.strip():
            return []
        key = category.strip().casefold()
        return _most_urgent_first(
            await self.filter_by(
                lambda i: i.household_id == household_id
                and i.category.casefold() == key
            )
        )

    async def list_by_creator(self, user_id: int) -> list[ShoppingItem]:
        return await self.filter_by(lambda i: i.created_by_user_id == user_id)

    async def search(self, household_id: int, term: str) -> list[ShoppingItem]:
        if not term or not term.strip():
            return []
        needle = term.strip().casefold()
        return _unpurchased_first(
            await self.filter_by(
                lambda i: i.household_id == household_id
                and (needle in i.name.casefold() or needle in i.category.casefold())
            )
        )

    # --- Invariants ------------------------------------------------------------

    def _before_insert(
        self, candidate: ShoppingItem, existing: Sequence[ShoppingItem], now: datetime
    ) -> None:
        self._prepare(candidate)
        if candidate.is_purchased:
            candidate.purchased_date = candidate.purchased_date or now
        else:
            candidate.purchased_date = None

    def _before_update(
        self,
        candidate: ShoppingItem,
        previous: ShoppingItem,
        others: Sequence[ShoppingItem],
        now: datetime,
    ) -> None:
        self._prepare(candidate)
        if not candidate.is_purchased:
            candidate.purchased_date = None
        elif previous.is_purchased:
            candidate.purchased_date = previous.purchased_date or now
        else:
            candidate.purchased_date = now

    @staticmethod
    def _prepare(candidate: ShoppingItem) -> None:
        if not candidate.name or not candidate.name.strip():
            raise ValidationError("Item name is required")
        if not candidate.category or not candidate.category.strip():
            raise ValidationError("Category is required")
        candidate.category = normalize_category(candidate.category)
        require_decimal_range(candidate.price, "Price", low=MIN_PRICE, high=MAX_PRICE)

    # --- Serialization ---------------------------------------------------------

    @staticmethod
    def _to_raw(item: ShoppingItem) -> dict[str, Any]:
        return {
            "id": item.id,
            "name": item.name,
            "category": item.category,
            "price": str(item.price),
            "urgency": item.urgency.value,
            "created_by_user_id": item.created_by_user_id,
            "household_id": item.household_id,
            "is_purchased": item.is_purchased,
            "purchased_date": datetime_to_raw(item.purchased_date),
            "created_date": datetime_to_raw(item.created_date),
            "modified_date": datetime_to_raw(item.modified_date),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> ShoppingItem:
        try:
            price = Decimal(str(raw.get("price", "0")))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid price: {raw.get('price')!r}") from exc
        return ShoppingItem(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category", ""),
            price=price,
            urgency=UrgencyLevel(raw.get("urgency", "Medium")),
            created_by_user_id=raw.get("created_by_user_id", 0),
            household_id=raw.get("household_id", 0),
            is_purchased=raw.get("is_purchased", False),
            purchased_date=datetime_from_raw(raw.get("purchased_date")),
            created_date=datetime_from_raw(raw.get("created_date")),
            modified_date=datetime_from_raw(raw.get("modified_date")),
        )
