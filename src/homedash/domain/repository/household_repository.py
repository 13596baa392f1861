"""Abstract repository for the Household aggregate."""

from __future__ import annotations

from abc import abstractmethod

from homedash.domain.model.household import Household
from homedash.domain.repository.repository import Repository


class HouseholdRepository(Repository[Household]):

    @abstractmethod
    async def get_by_name(self, name: str) -> Household | None:
        """Return a household by name (case-insensitive), or None."""

    @abstractmethod
    async def is_name_unique(self, name: str, exclude_id: int | None = None) -> bool:
        """Return True if no other household holds ``name``."""

    @abstractmethod
    async def list_active(self) -> list[Household]:
        """Return active households ordered by name."""
