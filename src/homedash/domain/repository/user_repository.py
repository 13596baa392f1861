"""Abstract repository for the User aggregate."""

from __future__ import annotations

from abc import abstractmethod

from homedash.domain.model.user import User
from homedash.domain.repository.repository import Repository


class UserRepository(Repository[User]):

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """Return a user by username (case-insensitive), or None."""

    @abstractmethod
    async def list_by_household(self, household_id: int) -> list[User]:
        """Return every member of a household."""

    @abstractmethod
    async def is_username_unique(
        self, username: str, exclude_id: int | None = None
    ) -> bool:
        """Return True if no other user holds ``username``."""

    @abstractmethod
    async def move_to_household(self, user: User, max_members: int) -> User:
        """Save ``user`` as a member of ``user.household_id``.

        The member count is checked and the user written in one step, so
        concurrent joins cannot push a household past ``max_members``.
        Raises BusinessRuleViolation when the household is already full.
        """
