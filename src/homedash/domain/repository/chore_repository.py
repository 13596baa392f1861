"""Abstract repository for the Chore aggregate."""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime

from homedash.domain.model.chore import Chore
from homedash.domain.repository.repository import Repository


class ChoreRepository(Repository[Chore]):

    @abstractmethod
    async def list_by_household(self, household_id: int) -> list[Chore]:
        """Incomplete chores first, then by ascending due date."""

    @abstractmethod
    async def list_by_assignee(self, user_id: int) -> list[Chore]:
        """Chores assigned to a user; incomplete first, then by due date."""

    @abstractmethod
    async def list_by_creator(self, user_id: int) -> list[Chore]:
        """Chores created by a user; incomplete first, then by due date."""

    @abstractmethod
    async def list_overdue(
        self, household_id: int, now: datetime | None = None
    ) -> list[Chore]:
        """Incomplete chores past their due date, oldest due date first."""

    @abstractmethod
    async def list_incomplete(self, household_id: int) -> list[Chore]:
        """Incomplete chores by ascending due date."""
