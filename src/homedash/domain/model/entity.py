"""The capability every storable record exposes to the generic store.

The store reads and writes identity and timestamps through these explicit
attributes only; it never looks fields up by name.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Protocol


class Storable(Protocol):
    id: int
    created_date: datetime | None
    modified_date: datetime | None


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
