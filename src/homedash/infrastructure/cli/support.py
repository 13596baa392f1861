"""Plumbing shared by the CLI command modules.

Each command builds one ``AppContext``, runs a coroutine against it with
``asyncio.run`` and turns domain and store faults into ``ClickException``.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Awaitable, Callable, TypeVar

import click
import structlog

from homedash.application.login import LoginHandler
from homedash.application.session import Session
from homedash.domain.exceptions import DomainException, StoreError
from homedash.domain.model.urgency import UrgencyLevel
from homedash.infrastructure.bootstrap import AppContext, build_context
from homedash.infrastructure.config import Settings, get_settings

T = TypeVar("T")

URGENCY_CHOICE = click.Choice([level.value for level in UrgencyLevel], case_sensitive=False)
DATE_TYPE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%d %H:%M"])


def credential_options(fn: Callable) -> Callable:
    """Add ``--username`` and a hidden ``--password`` prompt to a command."""
    fn = click.option(
        "--password", prompt=True, hide_input=True, help="Your account password."
    )(fn)
    fn = click.option("--username", required=True, help="Your username.")(fn)
    return fn


def run(action: Callable[[AppContext], Awaitable[T]]) -> T:
    settings = click.get_current_context().find_object(Settings) or get_settings()
    app = build_context(settings)
    try:
        return asyncio.run(action(app))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except StoreError as exc:
        structlog.get_logger("homedash.cli").error(
            "store_failure", error=str(exc), collection=exc.collection
        )
        raise click.ClickException(str(exc))


async def sign_in(app: AppContext, username: str, password: str) -> Session:
    session = Session()
    await LoginHandler(app.users, app.hasher).handle(session, username, password)
    return session


async def user_id_for(app: AppContext, username: str) -> int:
    user = await app.users.get_by_username(username)
    if user is None:
        raise click.ClickException(f"User '{username}' not found")
    return user.id


def as_utc(value: datetime) -> datetime:
    """click.DateTime yields naive values; they are read as UTC."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def parse_price(raw: str) -> Decimal:
    try:
        price = Decimal(raw.strip().lstrip("$"))
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{raw}'.")
    if not price.is_finite():
        raise click.BadParameter(f"Invalid price '{raw}'.")
    return price
