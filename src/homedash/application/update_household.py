"""Application service: Update Household use case (admins only)."""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import EntityNotFoundError
from homedash.domain.model.household import MAX_MEMBERS, MIN_MEMBERS, Household
from homedash.domain.repository.household_repository import HouseholdRepository
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService
from homedash.domain.validation import optional_text, require_int_range, require_text


class UpdateHouseholdHandler:

    def __init__(
        self, household_repo: HouseholdRepository, user_repo: UserRepository
    ) -> None:
        self._household_repo = household_repo
        self._user_repo = user_repo

    async def handle(
        self,
        session: Session,
        household_id: int,
        name: str,
        address: str | None,
        max_members: int,
        is_active: bool = True,
    ) -> Household:
        actor = session.require_user()
        await MembershipService(self._user_repo).require_admin(
            actor.id, household_id, "update the household"
        )

        household = await self._household_repo.get_by_id(household_id)
        if household is None:
            raise EntityNotFoundError(f"Household #{household_id} not found")

        household.name = require_text(name, "Household name", min_len=3, max_len=100)
        household.address = optional_text(address, "Address", max_len=500)
        household.max_members = require_int_range(
            max_members, "Maximum members", low=MIN_MEMBERS, high=MAX_MEMBERS
        )
        household.is_active = is_active

        updated = await self._household_repo.update(household)
        await self._household_repo.persist()
        return updated
