"""Abstract repository for the ShoppingItem aggregate."""

from __future__ import annotations

from abc import abstractmethod

from homedash.domain.model.shopping_item import ShoppingItem
from homedash.domain.model.urgency import UrgencyLevel
from homedash.domain.repository.repository import Repository


class ShoppingItemRepository(Repository[ShoppingItem]):

    @abstractmethod
    async def list_by_household(self, household_id: int) -> list[ShoppingItem]:
        """Unpurchased first, then most urgent, then newest."""

    @abstractmethod
    async def list_by_urgency(
        self, household_id: int, urgency: UrgencyLevel
    ) -> list[ShoppingItem]:
        """Items of one urgency level, newest first."""

    @abstractmethod
    async def list_unpurchased(self, household_id: int) -> list[ShoppingItem]:
        """Unpurchased items, most urgent first, then newest."""

    @abstractmethod
    async def list_by_category(
        self, household_id: int, category: str
    ) -> list[ShoppingItem]:
        """Items in a category (case-insensitive), most urgent first, then newest."""

    @abstractmethod
    async def list_by_creator(self, user_id: int) -> list[ShoppingItem]:
        """Items added by a user."""

    @abstractmethod
    async def search(self, household_id: int, term: str) -> list[ShoppingItem]:
        """Items whose name or category contains ``term`` (case-insensitive)."""
