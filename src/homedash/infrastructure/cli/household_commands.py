"""CLI commands for households and their members."""

from __future__ import annotations

import click

from homedash.application.create_household import CreateHouseholdHandler
from homedash.application.join_household import JoinHouseholdHandler
from homedash.application.remove_member import RemoveMemberHandler
from homedash.application.show_household import ShowHouseholdHandler
from homedash.application.update_household import UpdateHouseholdHandler
from homedash.domain.model.household import DEFAULT_MAX_MEMBERS
from homedash.infrastructure.cli.support import (
    credential_options,
    run,
    sign_in,
    user_id_for,
)


@click.command("create")
@credential_options
@click.option("--name", required=True, help="Household name (unique).")
@click.option(
    "--household-password", prompt=True, hide_input=True, confirmation_prompt=True,
    help="Password other members will need to join.",
)
@click.option("--address", default=None, help="Street address.")
@click.option(
    "--max-members", type=int, default=DEFAULT_MAX_MEMBERS, show_default=True,
    help="Member capacity (2-50).",
)
def household_create(
    username: str,
    password: str,
    name: str,
    household_password: str,
    address: str | None,
    max_members: int,
) -> None:
    """Create a household and become its admin."""

    async def action(app):
        session = await sign_in(app, username, password)
        handler = CreateHouseholdHandler(app.households, app.users, app.hasher)
        return await handler.handle(
            session, name, household_password, address=address, max_members=max_members
        )

    household = run(action)
    click.echo(f"Household #{household.id} '{household.name}' created, you are its admin")


@click.command("join")
@credential_options
@click.option("--name", required=True, help="Household name.")
@click.option(
    "--household-password", prompt=True, hide_input=True,
    help="The household's password.",
)
def household_join(username: str, password: str, name: str, household_password: str) -> None:
    """Join an existing household."""

    async def action(app):
        session = await sign_in(app, username, password)
        handler = JoinHouseholdHandler(app.households, app.users, app.hasher)
        return await handler.handle(session, name, household_password)

    household = run(action)
    click.echo(f"Joined household '{household.name}'")


@click.command("show")
@credential_options
def household_show(username: str, password: str) -> None:
    """Show your household and its members."""

    async def action(app):
        session = await sign_in(app, username, password)
        if not session.user.has_household:
            raise click.ClickException("You are not a member of any household")
        return await ShowHouseholdHandler(app.households, app.users).handle(
            session.user.household_id
        )

    dto = run(action)
    click.echo(f"Household #{dto.id}  {dto.name}{'' if dto.is_active else '  (inactive)'}")
    if dto.address:
        click.echo(f"Address: {dto.address}")
    click.echo(f"Created: {dto.created_date}")
    click.echo(f"Members: {dto.member_count}/{dto.max_members}")
    click.echo()
    click.echo(f"  {'ID':<5} {'Username':<20} {'Name':<24} {'Role':<7} {'Points':>6}")
    click.echo(f"  {'-'*66}")
    for m in dto.members:
        role = "admin" if m.is_admin else "member"
        click.echo(f"  {m.id:<5} {m.username:<20} {m.name:<24} {role:<7} {m.points:>6}")


@click.command("remove-member")
@credential_options
@click.option("--member", required=True, help="Username of the member to remove.")
def household_remove_member(username: str, password: str, member: str) -> None:
    """Remove a member from your household (admins only)."""

    async def action(app):
        session = await sign_in(app, username, password)
        member_id = await user_id_for(app, member)
        return await RemoveMemberHandler(app.users).handle(session, member_id)

    removed = run(action)
    click.echo(f"'{removed.username}' removed from the household")


@click.command("update")
@credential_options
@click.option("--name", default=None, help="New household name.")
@click.option("--address", default=None, help="New street address.")
@click.option("--max-members", type=int, default=None, help="New member capacity (2-50).")
@click.option("--active/--inactive", "is_active", default=None, help="Open or close the household.")
def household_update(
    username: str,
    password: str,
    name: str | None,
    address: str | None,
    max_members: int | None,
    is_active: bool | None,
) -> None:
    """Change your household's details (admins only).

    Options left out keep their current value.
    """

    async def action(app):
        session = await sign_in(app, username, password)
        if not session.user.has_household:
            raise click.ClickException("You are not a member of any household")
        current = await app.households.get_by_id(session.user.household_id)
        if current is None:
            raise click.ClickException("Your household no longer exists")
        handler = UpdateHouseholdHandler(app.households, app.users)
        return await handler.handle(
            session,
            current.id,
            name if name is not None else current.name,
            address if address is not None else current.address,
            max_members if max_members is not None else current.max_members,
            is_active=current.is_active if is_active is None else is_active,
        )

    household = run(action)
    state = "active" if household.is_active else "inactive"
    click.echo(
        f"Household #{household.id} '{household.name}' updated "
        f"(max {household.max_members} members, {state})"
    )


@click.command("list")
def household_list() -> None:
    """List the households that can be joined."""

    async def action(app):
        return await app.households.list_active()

    households = run(action)
    if not households:
        click.echo("No households found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Capacity':>8}")
    click.echo("-" * 46)
    for h in households:
        click.echo(f"{h.id:<6} {h.name:<30} {h.max_members:>8}")
