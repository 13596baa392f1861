"""Household aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DEFAULT_MAX_MEMBERS = 10
MIN_MEMBERS = 2
MAX_MEMBERS = 50


@dataclass
class Household:
    """A group of users sharing chores and a shopping list.

    Joining is gated by the household's own password, independent of any
    member's password. ``is_active`` is a manual deactivation flag.
    """

    name: str = ""
    address: str | None = None
    password_hash: str = ""
    max_members: int = DEFAULT_MAX_MEMBERS
    is_active: bool = True
    id: int = 0
    created_date: datetime | None = None
    modified_date: datetime | None = None
