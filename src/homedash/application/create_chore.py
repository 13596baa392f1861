"""Application service: Create Chore use case."""

from __future__ import annotations

from datetime import datetime, timezone

from homedash.application.session import Session
from homedash.domain.exceptions import BusinessRuleViolation, ValidationError
from homedash.domain.model.chore import DEFAULT_POINTS, MAX_POINTS, MIN_POINTS, Chore
from homedash.domain.model.entity import Clock, utc_now
from homedash.domain.model.urgency import UrgencyLevel
from homedash.domain.repository.chore_repository import ChoreRepository
from homedash.domain.repository.user_repository import UserRepository
from homedash.domain.service.membership import MembershipService
from homedash.domain.validation import optional_text, require_int_range, require_text


class CreateChoreHandler:

    def __init__(
        self,
        chore_repo: ChoreRepository,
        user_repo: UserRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._chore_repo = chore_repo
        self._user_repo = user_repo
        self._clock = clock

    async def handle(
        self,
        session: Session,
        title: str,
        due_date: datetime,
        assigned_to_user_id: int,
        points_value: int = DEFAULT_POINTS,
        description: str | None = None,
        urgency: UrgencyLevel = UrgencyLevel.MEDIUM,
    ) -> Chore:
        """Create a chore in the caller's household.

        Naive due dates are taken to be UTC.
        """
        actor = session.require_user()
        if not actor.has_household:
            raise BusinessRuleViolation("You must belong to a household to create chores")

        title = require_text(title, "Title", max_len=200)
        description = optional_text(description, "Description", max_len=1000)
        if due_date.tzinfo is None:
            due_date = due_date.replace(tzinfo=timezone.utc)
        if due_date <= self._clock():
            raise ValidationError("Due date must be in the future")
        require_int_range(points_value, "Points value", low=MIN_POINTS, high=MAX_POINTS)

        membership = MembershipService(self._user_repo)
        creator = await membership.require_user(actor.id)
        assignee = await membership.require_user(assigned_to_user_id)
        if assignee.household_id != creator.household_id:
            raise BusinessRuleViolation("Assigned user does not belong to your household")

        chore = await self._chore_repo.insert(
            Chore(
                title=title,
                description=description,
                due_date=due_date,
                assigned_to_user_id=assignee.id,
                created_by_user_id=creator.id,
                household_id=creator.household_id,
                points_value=points_value,
                urgency_level=urgency,
            )
        )
        await self._chore_repo.persist()
        return chore
