"""Generic JSON-file-backed entity store.

One ``JsonStore`` owns one collection file for the lifetime of the process.
The file is read lazily on first access and never re-read afterwards: the
store assumes it is the only writer of that file. Building two stores over
the same file in one process breaks that assumption.

Every operation, reads included, runs under a single ``asyncio.Lock``, so no
operation ever observes the collection mid-mutation. Only the first load and
``persist`` touch the file; everything else works on the in-memory list.
Mutations are not written until ``persist()`` is called.
"""

from __future__ import annotations

import asyncio
import dataclasses
import json
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Generic, Sequence, TypeVar

import structlog

from homedash.domain.exceptions import (
    DomainException,
    InvalidArgumentError,
    RecordNotFoundError,
    StoreError,
    StoreParseError,
    StoreReadError,
    StoreWriteError,
    UnexpectedStoreError,
)
from homedash.domain.model.entity import Clock, Storable, utc_now

T = TypeVar("T", bound=Storable)

BeforeInsert = Callable[[T, Sequence[T], datetime], None]
BeforeUpdate = Callable[[T, T, Sequence[T], datetime], None]


class JsonStore(Generic[T]):

    def __init__(
        self,
        file_path: Path,
        *,
        to_raw: Callable[[T], dict[str, Any]],
        to_domain: Callable[[dict[str, Any]], T],
        clock: Clock = utc_now,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._file_path = file_path
        self._to_raw = to_raw
        self._to_domain = to_domain
        self._clock = clock
        self._log = (logger or structlog.get_logger("homedash.store")).bind(
            collection=self.collection
        )
        self._lock = asyncio.Lock()
        self._records: list[T] = []
        self._last_id = 0
        self._loaded = False

    @property
    def collection(self) -> str:
        return self._file_path.name

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def now(self) -> datetime:
        return self._clock()

    # --- Queries ---------------------------------------------------------------

    async def list_all(self) -> list[T]:
        async with self._gate("list"):
            return [_copy(r) for r in self._records]

    async def get_by_id(self, record_id: int) -> T | None:
        async with self._gate("get_by_id", record_id):
            index = self._index_of(record_id)
            return None if index == -1 else _copy(self._records[index])

    async def filter_by(self, predicate: Callable[[T], bool]) -> list[T]:
        if predicate is None:
            raise InvalidArgumentError(
                "Predicate is required", collection=self.collection
            )
        async with self._gate("filter_by"):
            copies = [_copy(r) for r in self._records]
            return [r for r in copies if predicate(r)]

    # --- Commands --------------------------------------------------------------

    async def insert(
        self, record: T, before_insert: BeforeInsert[T] | None = None
    ) -> T:
        """Append a copy of ``record`` under a freshly assigned ID.

        ``before_insert`` runs inside the critical section, before the
        collection changes. It may adjust derived fields on the candidate
        or raise to reject the write.
        """
        if record is None:
            raise InvalidArgumentError(
                "Record to insert is required", collection=self.collection
            )
        async with self._gate("insert"):
            now = self._clock()
            candidate = _copy(record)
            if before_insert is not None:
                before_insert(candidate, tuple(self._records), now)

            candidate.id = max(self._last_id, self._max_id()) + 1
            if candidate.created_date is None:
                candidate.created_date = now
            candidate.modified_date = None

            self._records.append(candidate)
            self._last_id = candidate.id
            return _copy(candidate)

    async def update(
        self, record: T, before_update: BeforeUpdate[T] | None = None
    ) -> T:
        """Replace the stored record that has ``record.id``, keeping its slot.

        This is a full-record replace. ``created_date`` always keeps the
        stored value; ``modified_date`` is stamped with the current time.
        """
        if record is None:
            raise InvalidArgumentError(
                "Record to update is required", collection=self.collection
            )
        async with self._gate("update", record.id):
            index = self._index_of(record.id)
            if index == -1:
                raise RecordNotFoundError(
                    "Record not found for update",
                    collection=self.collection,
                    record_id=record.id,
                )

            now = self._clock()
            previous = self._records[index]
            candidate = _copy(record)
            if before_update is not None:
                others = tuple(r for r in self._records if r is not previous)
                before_update(candidate, _copy(previous), others, now)

            candidate.created_date = previous.created_date
            candidate.modified_date = now
            self._records[index] = candidate
            return _copy(candidate)

    async def delete(self, record_id: int) -> bool:
        async with self._gate("delete", record_id):
            index = self._index_of(record_id)
            if index == -1:
                return False
            del self._records[index]
            return True

    async def persist(self) -> None:
        """Overwrite the backing file with the whole in-memory collection."""
        async with self._gate("persist"):
            try:
                payload = json.dumps(
                    [self._to_raw(r) for r in self._records], indent=2
                )
            except (TypeError, ValueError) as exc:
                self._log.error("persist_failed", error=str(exc))
                raise StoreWriteError(
                    "Failed to serialize collection", collection=self.collection
                ) from exc

            try:
                await asyncio.to_thread(self._write_file, payload + "\n")
            except OSError as exc:
                self._log.error("persist_failed", error=str(exc))
                raise StoreWriteError(
                    "Failed to write data file", collection=self.collection
                ) from exc

            self._log.info("persisted", records=len(self._records))

    # --- Internals -------------------------------------------------------------

    @asynccontextmanager
    async def _gate(
        self, operation: str, record_id: int | None = None
    ) -> AsyncIterator[None]:
        """Hold the lock for one operation, loading the file on first use.

        Store and domain faults pass through untouched; anything else is
        wrapped as ``UnexpectedStoreError``.
        """
        async with self._lock:
            try:
                await self._ensure_loaded()
                yield
            except (StoreError, DomainException):
                raise
            except Exception as exc:
                raise UnexpectedStoreError(
                    f"Unexpected error during {operation}",
                    collection=self.collection,
                    record_id=record_id,
                ) from exc

    def _index_of(self, record_id: int) -> int:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return -1

    def _max_id(self) -> int:
        return max((r.id for r in self._records), default=0)

    async def _ensure_loaded(self) -> None:
        # Caller holds the lock.
        if self._loaded:
            return

        try:
            text = await asyncio.to_thread(self._read_file)
        except FileNotFoundError:
            text = None
        except UnicodeDecodeError as exc:
            self._log.error("load_failed", error=str(exc))
            raise StoreParseError(
                "Data file is not valid UTF-8", collection=self.collection
            ) from exc
        except OSError as exc:
            self._log.error("load_failed", error=str(exc))
            raise StoreReadError(
                "Failed to read data file", collection=self.collection
            ) from exc

        records = self._parse(text) if text and text.strip() else []
        self._records = records
        self._last_id = self._max_id()
        self._loaded = True
        self._log.debug("loaded", records=len(records))

    def _parse(self, text: str) -> list[T]:
        try:
            raw = json.loads(text)
            if not isinstance(raw, list):
                raise ValueError("top-level JSON value is not an array")
            return [self._to_domain(item) for item in raw]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            self._log.error("load_failed", error=str(exc))
            raise StoreParseError(
                "Failed to parse JSON data", collection=self.collection
            ) from exc

    def _read_file(self) -> str:
        return self._file_path.read_text(encoding="utf-8")

    def _write_file(self, payload: str) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(payload, encoding="utf-8")


def _copy(record: T) -> T:
    return dataclasses.replace(record)
