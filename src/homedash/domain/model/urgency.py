"""Urgency classification shared by chores and shopping items."""

from __future__ import annotations

from enum import Enum


class UrgencyLevel(Enum):
    """Ordered severity: Critical > High > Medium > Low > Wish."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    WISH = "Wish"

    @property
    def rank(self) -> int:
        """1 for the most urgent level, 5 for the least."""
        return _RANKS[self]

    @classmethod
    def parse(cls, text: str) -> UrgencyLevel:
        for level in cls:
            if level.value.lower() == text.strip().lower():
                return level
        raise ValueError(f"Unknown urgency level: '{text}'")


_RANKS = {
    UrgencyLevel.CRITICAL: 1,
    UrgencyLevel.HIGH: 2,
    UrgencyLevel.MEDIUM: 3,
    UrgencyLevel.LOW: 4,
    UrgencyLevel.WISH: 5,
}
