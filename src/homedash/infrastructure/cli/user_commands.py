"""CLI commands for user accounts."""

from __future__ import annotations

import click

from homedash.application.change_password import ChangePasswordHandler
from homedash.application.register_user import RegisterUserHandler
from homedash.application.update_profile import UpdateProfileHandler
from homedash.application.user_stats import UserStatsHandler
from homedash.infrastructure.cli.support import credential_options, run, sign_in


@click.command("register")
@click.option("--username", required=True, help="Login name (3-50 characters).")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address.")
@click.option(
    "--password", prompt=True, hide_input=True, confirmation_prompt=True,
    help="Account password.",
)
def user_register(username: str, name: str, email: str, password: str) -> None:
    """Create a new account."""

    async def action(app):
        handler = RegisterUserHandler(app.users, app.hasher)
        return await handler.handle(username, password, name, email)

    user = run(action)
    click.echo(f"User #{user.id} '{user.username}' registered")


@click.command("stats")
@credential_options
def user_stats(username: str, password: str) -> None:
    """Show your points and activity."""

    async def action(app):
        session = await sign_in(app, username, password)
        handler = UserStatsHandler(app.users, app.chores, app.shopping_items)
        return await handler.handle(session.user.id)

    stats = run(action)
    click.echo(f"Stats for {stats.username}")
    click.echo(f"  {'Points':<24} {stats.points:>6}")
    click.echo(f"  {'Chores completed':<24} {stats.chores_completed:>6}")
    click.echo(f"  {'Chores created':<24} {stats.chores_created:>6}")
    click.echo(f"  {'Shopping items added':<24} {stats.shopping_items_added:>6}")
    click.echo(f"  {'Avg. days to complete':<24} {stats.average_completion_days:>6}")


@click.command("passwd")
@credential_options
@click.option(
    "--new-password", prompt=True, hide_input=True, confirmation_prompt=True,
    help="The new password.",
)
def user_passwd(username: str, password: str, new_password: str) -> None:
    """Change your password."""

    async def action(app):
        session = await sign_in(app, username, password)
        await ChangePasswordHandler(app.users, app.hasher).handle(
            session, password, new_password
        )

    run(action)
    click.echo("Password changed")


@click.command("update")
@credential_options
@click.option("--name", default=None, help="New display name.")
@click.option("--email", default=None, help="New email address.")
def user_update(username: str, password: str, name: str | None, email: str | None) -> None:
    """Update your display name or email."""
    if name is None and email is None:
        raise click.ClickException("Nothing to update: pass --name and/or --email")

    async def action(app):
        session = await sign_in(app, username, password)
        return await UpdateProfileHandler(app.users).handle(session, name=name, email=email)

    user = run(action)
    click.echo(f"Profile updated: {user.name} <{user.email}>")
