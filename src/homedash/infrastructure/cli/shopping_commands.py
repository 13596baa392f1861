"""CLI commands for the household shopping list."""

from __future__ import annotations

import click

from homedash.application.add_shopping_item import AddShoppingItemHandler
from homedash.application.delete_shopping_item import DeleteShoppingItemHandler
from homedash.application.dto import ShoppingItemDTO
from homedash.application.list_shopping_items import ListShoppingItemsHandler
from homedash.application.mark_purchased import MarkPurchasedHandler
from homedash.domain.model.urgency import UrgencyLevel
from homedash.infrastructure.cli.support import (
    URGENCY_CHOICE,
    credential_options,
    parse_price,
    run,
    sign_in,
)


def _display_items(items: list[ShoppingItemDTO]) -> None:
    if not items:
        click.echo("No shopping items found.")
        return

    click.echo(f"{'ID':<5} {'Name':<28} {'Category':<16} {'Price':>10} {'Urgency':<9}  Bought")
    click.echo("-" * 80)
    for i in items:
        bought = i.purchased_date if i.is_purchased else "-"
        click.echo(
            f"{i.id:<5} {i.name[:28]:<28} {i.category[:16]:<16} {i.price:>10} "
            f"{i.urgency:<9}  {bought}"
        )


@click.command("add")
@credential_options
@click.option("--name", required=True, help="Item name.")
@click.option("--category", required=True, help="Category (e.g. Groceries).")
@click.option("--price", required=True, help="Estimated price (e.g. 4.50).")
@click.option("--urgency", type=URGENCY_CHOICE, default=UrgencyLevel.MEDIUM.value, show_default=True)
def shopping_add(
    username: str, password: str, name: str, category: str, price: str, urgency: str
) -> None:
    """Add an item to your household's shopping list."""
    amount = parse_price(price)

    async def action(app):
        session = await sign_in(app, username, password)
        handler = AddShoppingItemHandler(app.shopping_items, app.users)
        return await handler.handle(
            session, name, category, amount, UrgencyLevel.parse(urgency)
        )

    item = run(action)
    click.echo(f"Item #{item.id} '{item.name}' added to {item.category}")


@click.command("list")
@credential_options
@click.option("--unpurchased", is_flag=True, default=False, help="Only items still to buy.")
@click.option("--urgency", type=URGENCY_CHOICE, default=None, help="Only items at this urgency.")
@click.option("--category", default=None, help="Only items in this category.")
def shopping_list(
    username: str,
    password: str,
    unpurchased: bool,
    urgency: str | None,
    category: str | None,
) -> None:
    """List your household's shopping items."""
    if sum([unpurchased, urgency is not None, category is not None]) > 1:
        raise click.ClickException("Use at most one of --unpurchased, --urgency, --category")

    async def action(app):
        session = await sign_in(app, username, password)
        handler = ListShoppingItemsHandler(app.shopping_items)
        if unpurchased:
            return await handler.unpurchased(session)
        if urgency is not None:
            return await handler.by_urgency(session, UrgencyLevel.parse(urgency))
        if category is not None:
            return await handler.by_category(session, category)
        return await handler.household(session)

    _display_items(run(action))


@click.command("search")
@credential_options
@click.argument("term")
def shopping_search(username: str, password: str, term: str) -> None:
    """Find items whose name or category contains TERM."""

    async def action(app):
        session = await sign_in(app, username, password)
        return await ListShoppingItemsHandler(app.shopping_items).search(session, term)

    _display_items(run(action))


@click.command("buy")
@credential_options
@click.option("--id", "item_id", required=True, type=int, help="Item ID to mark as bought.")
def shopping_buy(username: str, password: str, item_id: int) -> None:
    """Mark an item as purchased."""

    async def action(app):
        session = await sign_in(app, username, password)
        return await MarkPurchasedHandler(app.shopping_items, app.users).handle(
            session, item_id
        )

    item = run(action)
    click.echo(f"Item #{item.id} '{item.name}' marked as purchased")


@click.command("delete")
@credential_options
@click.option("--id", "item_id", required=True, type=int, help="Item ID to delete.")
def shopping_delete(username: str, password: str, item_id: int) -> None:
    """Remove an item from the list (its creator or an admin)."""

    async def action(app):
        session = await sign_in(app, username, password)
        await DeleteShoppingItemHandler(app.shopping_items, app.users).handle(
            session, item_id
        )

    run(action)
    click.echo(f"Item #{item_id} deleted")
