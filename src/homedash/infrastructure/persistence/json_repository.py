"""Base class for the entity-specific JSON repositories.

Each concrete repository wraps exactly one ``JsonStore`` and contributes
three things: its serialization, its query shapes, and the invariants it
enforces through the store's ``before_insert``/``before_update`` hooks.
The hooks run inside the store's critical section and before the
collection changes, so a rejected write leaves nothing behind.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Sequence, TypeVar

import structlog

from homedash.domain.exceptions import RecordNotFoundError
from homedash.domain.model.entity import Clock, Storable, utc_now
from homedash.domain.repository.repository import Repository
from homedash.infrastructure.persistence.json_store import BeforeUpdate, JsonStore

T = TypeVar("T", bound=Storable)


class JsonRepository(Repository[T]):

    entity_name = "Record"

    def __init__(
        self,
        file_path: Path,
        *,
        clock: Clock = utc_now,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._store: JsonStore[T] = JsonStore(
            file_path,
            to_raw=self._to_raw,
            to_domain=self._to_domain,
            clock=clock,
            logger=logger,
        )

    # --- Repository interface --------------------------------------------------

    async def list_all(self) -> list[T]:
        return await self._store.list_all()

    async def get_by_id(self, record_id: int) -> T | None:
        return await self._store.get_by_id(record_id)

    async def insert(self, record: T) -> T:
        return await self._store.insert(record, self._before_insert)

    async def update(self, record: T) -> T:
        return await self._update_with(record, self._before_update)

    async def _update_with(self, record: T, before_update: BeforeUpdate[T]) -> T:
        try:
            return await self._store.update(record, before_update)
        except RecordNotFoundError as exc:
            raise RecordNotFoundError(
                f"{self.entity_name} with ID {exc.record_id} not found for update",
                collection=exc.collection,
                record_id=exc.record_id,
                entity=self.entity_name,
            ) from exc

    async def delete(self, record_id: int) -> bool:
        return await self._store.delete(record_id)

    async def filter_by(self, predicate: Callable[[T], bool]) -> list[T]:
        return await self._store.filter_by(predicate)

    async def persist(self) -> None:
        await self._store.persist()

    # --- Invariant hooks -------------------------------------------------------

    def _before_insert(
        self, candidate: T, existing: Sequence[T], now: datetime
    ) -> None:
        """Validate or derive fields of a record about to be inserted."""

    def _before_update(
        self, candidate: T, previous: T, others: Sequence[T], now: datetime
    ) -> None:
        """Validate or derive fields of a record about to replace ``previous``."""

    # --- Serialization ---------------------------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(record: T) -> dict[str, Any]:
        ...

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict[str, Any]) -> T:
        ...
