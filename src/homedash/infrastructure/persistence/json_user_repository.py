"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from homedash.domain.exceptions import (
    BusinessRuleViolation,
    DuplicateKeyError,
    InvalidArgumentError,
    ValidationError,
)
from homedash.domain.model.user import User
from homedash.domain.repository.user_repository import UserRepository
from homedash.infrastructure.persistence.codec import (
    datetime_from_raw,
    datetime_to_raw,
)
from homedash.infrastructure.persistence.json_repository import JsonRepository


class JsonUserRepository(JsonRepository[User], UserRepository):

    entity_name = "User"

    # --- UserRepository interface ----------------------------------------------

    async def get_by_username(self, username: str) -> User | None:
        if not username or not username.strip():
            raise InvalidArgumentError(
                "Username cannot be empty", collection=self._store.collection
            )
        key = username.casefold()
        matches = await self.filter_by(lambda u: u.username.casefold() == key)
        return matches[0] if matches else None

    async def list_by_household(self, household_id: int) -> list[User]:
        return await self.filter_by(lambda u: u.household_id == household_id)

    async def is_username_unique(
        self, username: str, exclude_id: int | None = None
    ) -> bool:
        if not username or not username.strip():
            return False
        key = username.casefold()
        clashes = await self.filter_by(
            lambda u: u.username.casefold() == key and u.id != exclude_id
        )
        return not clashes

    async def move_to_household(self, user: User, max_members: int) -> User:
        def guard(
            candidate: User, previous: User, others: Sequence[User], now: datetime
        ) -> None:
            self._before_update(candidate, previous, others, now)
            members = sum(1 for u in others if u.household_id == candidate.household_id)
            if members >= max_members:
                raise BusinessRuleViolation(
                    f"Household has reached its maximum of {max_members} members"
                )

        return await self._update_with(user, guard)

    # --- Invariants ------------------------------------------------------------

    def _before_insert(
        self, candidate: User, existing: Sequence[User], now: datetime
    ) -> None:
        self._check(candidate, existing)
        if candidate.joined_date is None:
            candidate.joined_date = now

    def _before_update(
        self, candidate: User, previous: User, others: Sequence[User], now: datetime
    ) -> None:
        self._check(candidate, others)

    @staticmethod
    def _check(candidate: User, others: Sequence[User]) -> None:
        if not candidate.username or not candidate.username.strip():
            raise ValidationError("Username is required")
        if candidate.points < 0:
            raise ValidationError("Points cannot be negative")
        key = candidate.username.casefold()
        if any(u.username.casefold() == key for u in others):
            raise DuplicateKeyError("username", candidate.username)

    # --- Serialization ---------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict[str, Any]:
        return {
            "id": user.id,
            "username": user.username,
            "password_hash": user.password_hash,
            "name": user.name,
            "email": user.email,
            "household_id": user.household_id,
            "is_admin": user.is_admin,
            "points": user.points,
            "joined_date": datetime_to_raw(user.joined_date),
            "created_date": datetime_to_raw(user.created_date),
            "modified_date": datetime_to_raw(user.modified_date),
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            password_hash=raw["password_hash"],
            name=raw.get("name", ""),
            email=raw.get("email", ""),
            household_id=raw.get("household_id", 0),
            is_admin=raw.get("is_admin", False),
            points=raw.get("points", 0),
            joined_date=datetime_from_raw(raw.get("joined_date")),
            created_date=datetime_from_raw(raw.get("created_date")),
            modified_date=datetime_from_raw(raw.get("modified_date")),
        )
