"""JSON-file-backed implementation of HouseholdRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from homedash.domain.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    ValidationError,
)
from homedash.domain.model.household import (
    DEFAULT_MAX_MEMBERS,
    MAX_MEMBERS,
    MIN_MEMBERS,
    Household,
)
from homedash.domain.repository.household_repository import HouseholdRepository
from homedash.domain.validation import require_int_range
from homedash.infrastructure.persistence.codec import (
    datetime_from_raw,
    datetime_to_raw,
)
from homedash.infrastructure.persistence.json_repository import JsonRepository


class JsonHouseholdRepository(JsonRepository[Household], HouseholdRepository):

    entity_name = "Household"

    # --- HouseholdRepository interface -----------------------------------------

    async def get_by_name(self, name: str) -> Household | None:
        if not name or not name.strip():
            raise InvalidArgumentError(
                "Household name cannot be empty", collection=self._store.collection
            )
        key = name.casefold()
        matches = await self.filter_by(lambda h: h.name.casefold() == key)
        return matches[0] if matches else None

    async def is_name_unique(self, name: str, exclude_id: int | None = None) -> bool:
        if not name or not name.strip():
            return False
        key = name.casefold()
        clashes = await self.filter_by(
            lambda h: h.name.casefold() == key and h.id != exclude_id
        )
        return not clashes

    async def list_active(self) -> list[Household]:
        active = await self.filter_by(lambda h: h.is_active)
        return sorted(active, key=lambda h: h.name.casefold())

    # --- Invariants ------------------------------------------------------------

    def _before_insert(
        self, candidate: Household, existing: Sequence[Household], now: datetime
    ) -> None:
        if candidate.max_members <= 0:
            candidate.max_members = DEFAULT_MAX_MEMBERS
        self._check(candidate, existing)

    def _before_update(
        self,
        candidate: Household,
        previous: Household,
        others: Sequence[Household],
        now: datetime,
    ) -> None:
        self._check(candidate, others)

    @staticmethod
    def _check(candidate: Household, others: Sequence[Household]) -> None:
        if not candidate.name or not candidate.name.strip():
            raise ValidationError("Household name is required")
        require_int_range(
            candidate.max_members, "Maximum members", low=MIN_MEMBERS, high=MAX_MEMBERS
        )
        key = candidate.name.casefold()
        if any(h.name.casefold() == key for h in others):
            raise DuplicateKeyError("household name", candidate.name)

    # --- Serialization ---------------------------------------------------------

    @staticmethod
    def _to_raw(household: Household) -> dict[str, Any]:
        return {
            "id": household.id,
            "name": household.name,
            "address": household.address,
            "password_hash": household.password_hash,
            "max_members": household.max_members,
            "is_active": household.is_active,
            "created_date": datetime_to_raw(household.created_date),
            "modified_date": datetime_to_raw(household.modified_date),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Household:
        return Household(
            id=raw["id"],
            name=raw["name"],
            address=raw.get("address"),
            password_hash=raw["password_hash"],
            max_members=raw.get("max_members", DEFAULT_MAX_MEMBERS),
            is_active=raw.get("is_active", True),
            created_date=datetime_from_raw(raw.get("created_date")),
            modified_date=datetime_from_raw(raw.get("modified_date")),
        )
