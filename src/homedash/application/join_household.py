"""Application service: Join Household use case."""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from homedash.domain.model.household import Household
from homedash.domain.repository.household_repository import HouseholdRepository
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService
from homedash.domain.service.password_hasher import PasswordHasher


class JoinHouseholdHandler:

    def __init__(
        self,
        household_repo: HouseholdRepository,
        user_repo: UserRepository,
        hasher: PasswordHasher,
    ) -> None:
        self._household_repo = household_repo
        self._user_repo = user_repo
        self._hasher = hasher

    async def handle(self, session: Session, household_name: str, password: str) -> Household:
        """Add the caller to a household after checking its password and capacity.

        Capacity is checked up front for a clear message, then again by the
        user repository as part of the write, so concurrent joins cannot
        overfill the household.
        """
        actor = session.require_user()
        if not household_name or not household_name.strip():
            raise ValidationError("Household name is required")
        if not password:
            raise ValidationError("Household password is required")

        household = await self._household_repo.get_by_name(household_name.strip())
        if household is None:
            raise EntityNotFoundError(f"Household '{household_name}' not found")
        if not household.is_active:
            raise BusinessRuleViolation("This household is no longer active")
        if not self._hasher.verify(password, household.password_hash):
            raise UnauthorizedError("Invalid household password")

        membership = MembershipService(self._user_repo)
        user = await membership.require_user(actor.id)
        if user.household_id == household.id:
            raise BusinessRuleViolation("You are already a member of this household")
        if await membership.count_members(household.id) >= household.max_members:
            raise BusinessRuleViolation(
                f"Household '{household.name}' has reached its maximum of "
                f"{household.max_members} members"
            )

        user.household_id = household.id
        user.is_admin = False
        updated = await self._user_repo.move_to_household(user, household.max_members)
        await self._user_repo.persist()
        session.login(updated)

        return household
