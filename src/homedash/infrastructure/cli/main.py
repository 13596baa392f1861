import click

from homedash.infrastructure.cli.chore_commands import (
    chore_add,
    chore_complete,
    chore_delete,
    chore_list,
    chore_reassign,
)
from homedash.infrastructure.cli.household_commands import (
    household_create,
    household_join,
    household_list,
    household_remove_member,
    household_show,
    household_update,
)
from homedash.infrastructure.cli.shopping_commands import (
    shopping_add,
    shopping_buy,
    shopping_delete,
    shopping_list,
    shopping_search,
)
from homedash.infrastructure.cli.user_commands import (
    user_passwd,
    user_register,
    user_stats,
    user_update,
)
from homedash.infrastructure.config import get_settings
from homedash.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """HomeDash: chores and shopping for shared households"""
    if ctx.obj is None:
        ctx.obj = get_settings()
    configure_logging(ctx.obj)


@cli.group()
def user() -> None:
    """Manage your account."""


@cli.group()
def household() -> None:
    """Manage households."""


@cli.group()
def chore() -> None:
    """Manage chores."""


@cli.group()
def shopping() -> None:
    """Manage the shopping list."""


# Register subcommands
user.add_command(user_register)
user.add_command(user_stats)
user.add_command(user_passwd)
user.add_command(user_update)
household.add_command(household_create)
household.add_command(household_join)
household.add_command(household_show)
household.add_command(household_remove_member)
household.add_command(household_update)
household.add_command(household_list)
chore.add_command(chore_add)
chore.add_command(chore_list)
chore.add_command(chore_complete)
chore.add_command(chore_reassign)
chore.add_command(chore_delete)
shopping.add_command(shopping_add)
shopping.add_command(shopping_list)
shopping.add_command(shopping_search)
shopping.add_command(shopping_buy)
shopping.add_command(shopping_delete)
