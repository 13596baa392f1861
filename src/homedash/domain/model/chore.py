"""Chore aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from homedash.domain.model.urgency import UrgencyLevel

DEFAULT_POINTS = 10
MIN_POINTS = 1
MAX_POINTS = 100


@dataclass
class Chore:
    """A task assigned to one household member.

    Invariant: ``completed_date`` is set if and only if ``is_completed``.
    The chore repository maintains it on every write.
    """

    title: str = ""
    description: str | None = None
    due_date: datetime | None = None
    assigned_to_user_id: int = 0
    created_by_user_id: int = 0
    household_id: int = 0
    points_value: int = DEFAULT_POINTS
    urgency_level: UrgencyLevel = UrgencyLevel.MEDIUM
    is_completed: bool = False
    completed_date: datetime | None = None
    id: int = 0
    created_date: datetime | None = None
    modified_date: datetime | None = None

    def is_overdue(self, now: datetime) -> bool:
        return (
            not self.is_completed
            and self.due_date is not None
            and self.due_date < now
        )
