"""Application service: Remove Member use case (admins only).

The member keeps their account; they are detached from the household
and lose any admin flag.
"""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import BusinessRuleViolation, UnauthorizedError
from homedash.domain.model.user import NO_HOUSEHOLD, User
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService


class RemoveMemberHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, session: Session, member_id: int) -> User:
        actor = session.require_user()
        membership = MembershipService(self._user_repo)
        admin = await membership.require_user(actor.id)
        if not admin.is_admin or not admin.has_household:
            raise UnauthorizedError("Only household admins can remove members")

        member = await membership.require_member(member_id, admin.household_id)
        if member.is_admin:
            raise BusinessRuleViolation("Admins cannot be removed from the household")

        member.household_id = NO_HOUSEHOLD
        member.is_admin = False
        updated = await self._user_repo.update(member)
        await self._user_repo.persist()
        return updated
