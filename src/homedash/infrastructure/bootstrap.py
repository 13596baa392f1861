"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Each collection file must be owned by exactly one store per process, so
callers build one ``AppContext`` and share it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from homedash.domain.model.entity import Clock, utc_now
from homedash.domain.service.password_hasher import PasswordHasher
from homedash.infrastructure.config import Settings
from homedash.infrastructure.persistence.json_chore_repository import (
    JsonChoreRepository,
)
from homedash.infrastructure.persistence.json_household_repository import (
    JsonHouseholdRepository,
)
from homedash.infrastructure.persistence.json_shopping_item_repository import (
    JsonShoppingItemRepository,
)
from homedash.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from homedash.infrastructure.security import BcryptPasswordHasher

USERS_FILE = "users.json"
HOUSEHOLDS_FILE = "households.json"
CHORES_FILE = "chores.json"
SHOPPING_ITEMS_FILE = "shopping-items.json"


@dataclass
class AppContext:

    users: JsonUserRepository
    households: JsonHouseholdRepository
    chores: JsonChoreRepository
    shopping_items: JsonShoppingItemRepository
    hasher: PasswordHasher
    clock: Clock


def build_context(
    settings: Settings,
    *,
    clock: Clock = utc_now,
    hasher: PasswordHasher | None = None,
) -> AppContext:
    data_dir = Path(settings.data_dir)
    return AppContext(
        users=JsonUserRepository(data_dir / USERS_FILE, clock=clock),
        households=JsonHouseholdRepository(data_dir / HOUSEHOLDS_FILE, clock=clock),
        chores=JsonChoreRepository(data_dir / CHORES_FILE, clock=clock),
        shopping_items=JsonShoppingItemRepository(
            data_dir / SHOPPING_ITEMS_FILE, clock=clock
        ),
        hasher=hasher or BcryptPasswordHasher(settings.bcrypt_rounds),
        clock=clock,
    )
