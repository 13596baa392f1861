"""CLI commands for chores."""

from __future__ import annotations

from datetime import datetime

import click

from homedash.application.complete_chore import CompleteChoreHandler
from homedash.application.create_chore import CreateChoreHandler
from homedash.application.delete_chore import DeleteChoreHandler
from homedash.application.dto import ChoreDTO
from homedash.application.list_chores import ListChoresHandler
from homedash.application.reassign_chore import ReassignChoreHandler
from homedash.domain.model.chore import DEFAULT_POINTS
from homedash.domain.model.urgency import UrgencyLevel
from homedash.infrastructure.cli.support import (
    DATE_TYPE,
    URGENCY_CHOICE,
    as_utc,
    credential_options,
    run,
    sign_in,
    user_id_for,
)


def _display_chores(chores: list[ChoreDTO]) -> None:
    if not chores:
        click.echo("No chores found.")
        return

    click.echo(
        f"{'ID':<5} {'Title':<28} {'Assignee':<16} {'Due':<21} "
        f"{'Urgency':<9} {'Pts':>4}  Status"
    )
    click.echo("-" * 96)
    for c in chores:
        click.echo(
            f"{c.id:<5} {c.title[:28]:<28} {c.assignee[:16]:<16} {c.due_date or '':<21} "
            f"{c.urgency:<9} {c.points_value:>4}  {c.status}"
        )


@click.command("add")
@credential_options
@click.option("--title", required=True, help="What needs doing.")
@click.option("--due", "due_date", required=True, type=DATE_TYPE, help="Due date (YYYY-MM-DD).")
@click.option("--assign-to", default=None, help="Username of the assignee (default: you).")
@click.option("--points", type=int, default=DEFAULT_POINTS, show_default=True, help="Points (1-100).")
@click.option("--description", default=None, help="Details.")
@click.option("--urgency", type=URGENCY_CHOICE, default=UrgencyLevel.MEDIUM.value, show_default=True)
def chore_add(
    username: str,
    password: str,
    title: str,
    due_date: datetime,
    assign_to: str | None,
    points: int,
    description: str | None,
    urgency: str,
) -> None:
    """Create a chore in your household."""

    async def action(app):
        session = await sign_in(app, username, password)
        assignee_id = (
            await user_id_for(app, assign_to) if assign_to else session.user.id
        )
        handler = CreateChoreHandler(app.chores, app.users, app.clock)
        return await handler.handle(
            session,
            title,
            as_utc(due_date),
            assignee_id,
            points_value=points,
            description=description,
            urgency=UrgencyLevel.parse(urgency),
        )

    chore = run(action)
    click.echo(f"Chore #{chore.id} '{chore.title}' created ({chore.points_value} points)")


@click.command("list")
@credential_options
@click.option(
    "--show", "view",
    type=click.Choice(["all", "mine", "incomplete", "overdue"]),
    default="all", show_default=True,
    help="Which chores to list.",
)
def chore_list(username: str, password: str, view: str) -> None:
    """List chores."""

    async def action(app):
        session = await sign_in(app, username, password)
        handler = ListChoresHandler(app.chores, app.users, app.clock)
        if view == "mine":
            return await handler.mine(session)
        if view == "incomplete":
            return await handler.incomplete(session)
        if view == "overdue":
            return await handler.overdue(session)
        return await handler.household(session)

    _display_chores(run(action))


@click.command("complete")
@credential_options
@click.option("--id", "chore_id", required=True, type=int, help="Chore ID to complete.")
def chore_complete(username: str, password: str, chore_id: int) -> None:
    """Mark one of your chores as done and collect its points."""

    async def action(app):
        session = await sign_in(app, username, password)
        return await CompleteChoreHandler(app.chores, app.users, app.clock).handle(
            session, chore_id
        )

    award = run(action)
    click.echo(f"Chore #{chore_id} completed, {award} points earned")


@click.command("reassign")
@credential_options
@click.option("--id", "chore_id", required=True, type=int, help="Chore ID to reassign.")
@click.option("--to", "new_assignee", required=True, help="Username of the new assignee.")
def chore_reassign(username: str, password: str, chore_id: int, new_assignee: str) -> None:
    """Hand a chore to another member (admins only)."""

    async def action(app):
        session = await sign_in(app, username, password)
        new_user_id = await user_id_for(app, new_assignee)
        return await ReassignChoreHandler(app.chores, app.users).handle(
            session, chore_id, new_user_id
        )

    run(action)
    click.echo(f"Chore #{chore_id} reassigned to '{new_assignee}'")


@click.command("delete")
@credential_options
@click.option("--id", "chore_id", required=True, type=int, help="Chore ID to delete.")
def chore_delete(username: str, password: str, chore_id: int) -> None:
    """Delete a chore (admins only)."""

    async def action(app):
        session = await sign_in(app, username, password)
        await DeleteChoreHandler(app.chores, app.users).handle(session, chore_id)

    run(action)
    click.echo(f"Chore #{chore_id} deleted")
