"""Application service: Show Household use case (query)."""

from __future__ import annotations

from homedash.application.dto import HouseholdDTO
from homedash.domain.exceptions import EntityNotFoundError
from homedash.domain.repository.household_repository import HouseholdRepository
from homedash.domain.repository.user_repository import UserRepository


class ShowHouseholdHandler:

    def __init__(
        self, household_repo: HouseholdRepository, user_repo: UserRepository
    ) -> None:
        self._household_repo = household_repo
        self._user_repo = user_repo

    async def handle(self, household_id: int) -> HouseholdDTO:
        household = await self._household_repo.get_by_id(household_id)
        if household is None:
            raise EntityNotFoundError(f"Household #{household_id} not found")

        members = await self._user_repo.list_by_household(household_id)
        members.sort(key=lambda u: (not u.is_admin, u.name.casefold()))
        return HouseholdDTO.from_household(household, members)
