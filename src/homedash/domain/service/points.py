"""Domain service: points awarded for completing a chore.

Finishing early earns a bonus on top of the chore's ``points_value``:

* 3 or more whole days before the due date: x1.5
* 1 or 2 whole days before: x1.25
* otherwise (same day or late): the base value

Fractions are truncated.
"""

from __future__ import annotations

from datetime import datetime

from homedash.domain.model.chore import Chore

EARLY_BONUS_DAYS = 3
SMALL_BONUS_DAYS = 1
EARLY_MULTIPLIER = 1.5
SMALL_MULTIPLIER = 1.25


def calculate_award(chore: Chore, now: datetime) -> int:
    base = chore.points_value
    if chore.due_date is None or now >= chore.due_date:
        return base

    days_early = (chore.due_date - now).days
    if days_early >= EARLY_BONUS_DAYS:
        return int(base * EARLY_MULTIPLIER)
    if days_early >= SMALL_BONUS_DAYS:
        return int(base * SMALL_MULTIPLIER)
    return base
