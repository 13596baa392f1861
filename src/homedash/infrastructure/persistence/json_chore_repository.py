"""JSON-file-backed implementation of ChoreRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from homedash.domain.exceptions import ValidationError
from homedash.domain.model.chore import DEFAULT_POINTS, MAX_POINTS, MIN_POINTS, Chore
from homedash.domain.model.urgency import UrgencyLevel
from homedash.domain.repository.chore_repository import ChoreRepository
from homedash.domain.validation import require_int_range
from homedash.infrastructure.persistence.codec import (
    datetime_from_raw,
    datetime_to_raw,
)
from homedash.infrastructure.persistence.json_repository import JsonRepository


def _incomplete_first(chores: list[Chore]) -> list[Chore]:
    return sorted(chores, key=lambda c: (c.is_completed, c.due_date))


def _by_due_date(chores: list[Chore]) -> list[Chore]:
    return sorted(chores, key=lambda c: c.due_date)


class JsonChoreRepository(JsonRepository[Chore], ChoreRepository):

    entity_name = "Chore"

    # --- ChoreRepository interface ---------------------------------------------

    async def list_by_household(self, household_id: int) -> list[Chore]:
        return _incomplete_first(
            await self.filter_by(lambda c: c.household_id == household_id)
        )

    async def list_by_assignee(self, user_id: int) -> list[Chore]:
        return _incomplete_first(
            await self.filter_by(lambda c: c.assigned_to_user_id == user_id)
        )

    async def list_by_creator(self, user_id: int) -> list[Chore]:
        return _incomplete_first(
            await self.filter_by(lambda c: c.created_by_user_id == user_id)
        )

    async def list_overdue(
        self, household_id: int, now: datetime | None = None
    ) -> list[Chore]:
        cutoff = now or self._store.now()
        return _by_due_date(
            await self.filter_by(
                lambda c: c.household_id == household_id and c.is_overdue(cutoff)
            )
        )

    async def list_incomplete(self, household_id: int) -> list[Chore]:
        return _by_due_date(
            await self.filter_by(
                lambda c: c.household_id == household_id and not c.is_completed
            )
        )

    # --- Invariants ------------------------------------------------------------

    def _before_insert(
        self, candidate: Chore, existing: Sequence[Chore], now: datetime
    ) -> None:
        if not candidate.points_value:
            candidate.points_value = DEFAULT_POINTS
        self._check(candidate)
        if candidate.is_completed:
            candidate.completed_date = candidate.completed_date or now
        else:
            candidate.completed_date = None

    def _before_update(
        self, candidate: Chore, previous: Chore, others: Sequence[Chore], now: datetime
    ) -> None:
        self._check(candidate)
        if not candidate.is_completed:
            candidate.completed_date = None
        elif previous.is_completed:
            candidate.completed_date = previous.completed_date or now
        else:
            candidate.completed_date = now

    @staticmethod
    def _check(candidate: Chore) -> None:
        if not candidate.title or not candidate.title.strip():
            raise ValidationError("Chore title is required")
        if candidate.due_date is None:
            raise ValidationError("Chore due date is required")
        require_int_range(
            candidate.points_value, "Points value", low=MIN_POINTS, high=MAX_POINTS
        )

    # --- Serialization ---------------------------------------------------------

    @staticmethod
    def _to_raw(chore: Chore) -> dict[str, Any]:
        return {
            "id": chore.id,
            "title": chore.title,
            "description": chore.description,
            "due_date": datetime_to_raw(chore.due_date),
            "assigned_to_user_id": chore.assigned_to_user_id,
            "created_by_user_id": chore.created_by_user_id,
            "household_id": chore.household_id,
            "points_value": chore.points_value,
            "urgency_level": chore.urgency_level.value,
            "is_completed": chore.is_completed,
            "completed_date": datetime_to_raw(chore.completed_date),
            "created_date": datetime_to_raw(chore.created_date),
            "modified_date": datetime_to_raw(chore.modified_date),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Chore:
        return Chore(
            id=raw["id"],
            title=raw["title"],
            description=raw.get("description"),
            due_date=datetime_from_raw(raw["due_date"]),
            assigned_to_user_id=raw.get("assigned_to_user_id", 0),
            created_by_user_id=raw.get("created_by_user_id", 0),
            household_id=raw.get("household_id", 0),
            points_value=raw.get("points_value", DEFAULT_POINTS),
            urgency_level=UrgencyLevel(raw.get("urgency_level", "Medium")),
            is_completed=raw.get("is_completed", False),
            completed_date=datetime_from_raw(raw.get("completed_date")),
            created_date=datetime_from_raw(raw.get("created_date")),
            modified_date=datetime_from_raw(raw.get("modified_date")),
        )
