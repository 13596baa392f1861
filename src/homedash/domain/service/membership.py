"""Domain service: household membership and admin checks.

Several use cases need "is this user a member / an admin of that
household?" before touching another aggregate. The checks live here so
every use case applies the same rule and raises the same errors.
"""

from __future__ import annotations

from homedash.domain.exceptions import EntityNotFoundError, UnauthorizedError
from homedash.domain.model.user import User
from homedash.domain.repository.user_repository import UserRepository


class MembershipService:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def require_user(self, user_id: int) -> User:
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return user

    async def require_member(self, user_id: int, household_id: int) -> User:
        """Return the user, or raise if they do not belong to ``household_id``."""
        user = await self.require_user(user_id)
        if user.household_id != household_id:
            raise UnauthorizedError("User does not belong to this household")
        return user

    async def require_admin(self, user_id: int, household_id: int, action: str) -> User:
        """Return the user, or raise if they are not an admin of ``household_id``."""
        user = await self.require_user(user_id)
        if not user.is_admin_of(household_id):
            raise UnauthorizedError(f"Only household admins can {action}")
        return user

    async def count_members(self, household_id: int) -> int:
        return len(await self._user_repo.list_by_household(household_id))
