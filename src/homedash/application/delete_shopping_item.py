"""Application service: Delete Shopping Item use case.

Allowed for the member who added the item and for household admins.
"""

from __future__ import annotations

from homedash.application.session import Session
from homedash.domain.exceptions import EntityNotFoundError, UnauthorizedError
from homedash.domain.repository.shopping_item_repository import (
    ShoppingItemRepository,
)
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService


class DeleteShoppingItemHandler:

    def __init__(
        self, item_repo: ShoppingItemRepository, user_repo: UserRepository
    ) -> None:
        self._item_repo = item_repo
        self._user_repo = user_repo

    async def handle(self, session: Session, item_id: int) -> None:
        actor = session.require_user()

        item = await self._item_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Shopping item #{item_id} not found")

        user = await MembershipService(self._user_repo).require_user(actor.id)
        is_creator = item.created_by_user_id == user.id
        if not is_creator and not user.is_admin_of(item.household_id):
            raise UnauthorizedError(
                "Items can only be deleted by the member who added them or an admin"
            )

        await self._item_repo.delete(item_id)
        await self._item_repo.persist()
