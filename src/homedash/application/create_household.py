"""Application service: Create Household use case.

Two independent writes: the household is inserted and persisted first,
then the creator becomes its admin. A failure between the two leaves a
household without members; there is no cross-collection transaction.
"""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import DuplicateKeyError, ValidationError
from homedash.domain.model.household import (
    DEFAULT_MAX_MEMBERS,
    MAX_MEMBERS,
    MIN_MEMBERS,
    Household,
)
from homedash.domain.repository.household_repository import HouseholdRepository
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService
from homedash.domain.service.password_hasher import PasswordHasher
from homedash.domain.validation import optional_text, require_int_range, require_text


class CreateHouseholdHandler:

    def __init__(
        self,
        household_repo: HouseholdRepository,
        user_repo: UserRepository,
        hasher: PasswordHasher,
    ) -> None:
        self._household_repo = household_repo
        self._user_repo = user_repo
        self._hasher = hasher

    async def handle(
        self,
        session: Session,
        name: str,
        password: str,
        address: str | None = None,
        max_members: int = DEFAULT_MAX_MEMBERS,
    ) -> Household:
        actor = session.require_user()
        name = require_text(name, "Household name", min_len=3, max_len=100)
        if not password or not password.strip():
            raise ValidationError("Household password is required")
        address = optional_text(address, "Address", max_len=500)
        require_int_range(max_members, "Maximum members", low=MIN_MEMBERS, high=MAX_MEMBERS)

        if not await self._household_repo.is_name_unique(name):
            raise DuplicateKeyError("household name", name)
        creator = await MembershipService(self._user_repo).require_user(actor.id)

        household = await self._household_repo.insert(
            Household(
                name=name,
                address=address,
                password_hash=self._hasher.hash(password),
                max_members=max_members,
                is_active=True,
            )
        )
        await self._household_repo.persist()

        creator.household_id = household.id
        creator.is_admin = True
        updated = await self._user_repo.update(creator)
        await self._user_repo.persist()
        session.login(updated)

        return household
