"""Abstract CRUD contract shared by every entity repository.

Defined in the domain layer so the domain never depends on
infrastructure. The JSON-backed implementations live in
``homedash.infrastructure.persistence``.

Reads return copies. Writes change the in-memory collection only;
callers invoke ``persist()`` after one or more writes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):

    @abstractmethod
    async def list_all(self) -> list[T]:
        """Return every record."""

    @abstractmethod
    async def get_by_id(self, record_id: int) -> T | None:
        """Return a record by its ID, or None if not found."""

    @abstractmethod
    async def insert(self, record: T) -> T:
        """Add a new record and return the stored copy with its assigned ID."""

    @abstractmethod
    async def update(self, record: T) -> T:
        """Replace the stored record with the same ID (full-record replace)."""

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Remove a record; return False if there was nothing to remove."""

    @abstractmethod
    async def filter_by(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return every record satisfying ``predicate``."""

    @abstractmethod
    async def persist(self) -> None:
        """Write the whole collection to durable storage."""
