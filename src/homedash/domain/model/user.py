"""User aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NO_HOUSEHOLD = 0


@dataclass
class User:
    """A registered person.

    ``household_id`` stays at ``NO_HOUSEHOLD`` until the user creates or
    joins a household. ``password_hash`` is opaque; plaintext never lands
    here.
    """

    username: str = ""
    password_hash: str = ""
    name: str = ""
    email: str = ""
    household_id: int = NO_HOUSEHOLD
    is_admin: bool = False
    points: int = 0
    joined_date: datetime | None = None
    id: int = 0
    created_date: datetime | None = None
    modified_date: datetime | None = None

    @property
    def has_household(self) -> bool:
        return self.household_id != NO_HOUSEHOLD

    def is_admin_of(self, household_id: int) -> bool:
        return self.is_admin and self.household_id == household_id
