"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the query handlers to the CLI
without exposing domain records to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from homedash.domain.model.chore import Chore
from homedash.domain.model.household import Household
from homedash.domain.model.shopping_item import ShoppingItem
from homedash.domain.model.user import User


def format_date(value: datetime | None) -> str | None:
    return None if value is None else value.strftime("%Y-%m-%d %H:%M UTC")


@dataclass(frozen=True)
class MemberDTO:

    id: int
    username: str
    name: str
    is_admin: bool
    points: int

    @classmethod
    def from_user(cls, user: User) -> MemberDTO:
        return cls(
            id=user.id,
            username=user.username,
            name=user.name,
            is_admin=user.is_admin,
            points=user.points,
        )


@dataclass(frozen=True)
class HouseholdDTO:
    """Output: a household with its members, admins first."""

    id: int
    name: str
    address: str | None
    is_active: bool
    max_members: int
    members: list[MemberDTO]
    created_date: str | None

    @property
    def member_count(self) -> int:
        return len(self.members)

    @classmethod
    def from_household(cls, household: Household, members: list[User]) -> HouseholdDTO:
        return cls(
            id=household.id,
            name=household.name,
            address=household.address,
            is_active=household.is_active,
            max_members=household.max_members,
            members=[MemberDTO.from_user(u) for u in members],
            created_date=format_date(household.created_date),
        )


@dataclass(frozen=True)
class ChoreDTO:

    id: int
    title: str
    description: str | None
    due_date: str | None
    assignee: str
    points_value: int
    urgency: str
    status: str  # "done", "overdue" or "pending"
    completed_date: str | None

    @classmethod
    def from_chore(cls, chore: Chore, assignee: str, now: datetime) -> ChoreDTO:
        if chore.is_completed:
            status = "done"
        elif chore.is_overdue(now):
            status = "overdue"
        else:
            status = "pending"
        return cls(
            id=chore.id,
            title=chore.title,
            description=chore.description,
            due_date=format_date(chore.due_date),
            assignee=assignee,
            points_value=chore.points_value,
            urgency=chore.urgency_level.value,
            status=status,
            completed_date=format_date(chore.completed_date),
        )


@dataclass(frozen=True)
class ShoppingItemDTO:

    id: int
    name: str
    category: str
    price: str  # formatted, e.g. "$4.50"
    urgency: str
    is_purchased: bool
    purchased_date: str | None

    @classmethod
    def from_item(cls, item: ShoppingItem) -> ShoppingItemDTO:
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            price=f"${item.price:.2f}",
            urgency=item.urgency.value,
            is_purchased=item.is_purchased,
            purchased_date=format_date(item.purchased_date),
        )


@dataclass(frozen=True)
class UserStatsDTO:

    username: str
    points: int
    chores_completed: int
    chores_created: int
    shopping_items_added: int
    average_completion_days: float
