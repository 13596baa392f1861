"""ShoppingItem aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from homedash.domain.model.urgency import UrgencyLevel

MIN_PRICE = Decimal("0")
MAX_PRICE = Decimal("10000")


def normalize_category(category: str) -> str:
    """Trim, then uppercase the first letter and lowercase the rest.

    ``"  groCERIES "`` becomes ``"Groceries"``.
    """
    trimmed = category.strip()
    return trimmed[:1].upper() + trimmed[1:].lower()


@dataclass
class ShoppingItem:
    """An entry on a household's shopping list.

    ``purchased_date`` mirrors ``is_purchased`` the same way a chore's
    ``completed_date`` mirrors ``is_completed``.
    """

    name: str = ""
    category: str = ""
    price: Decimal = field(default_factory=Decimal)
    urgency: UrgencyLevel = UrgencyLevel.MEDIUM
    created_by_user_id: int = 0
    household_id: int = 0
    is_purchased: bool = False
    purchased_date: datetime | None = None
    id: int = 0
    created_date: datetime | None = None
    modified_date: datetime | None = None
