"""Error taxonomy shared by every layer.

Two unrelated families so callers can tell them apart:

* ``StoreError`` and its subclasses describe persistence mechanics (I/O,
  parsing, missing records, structural misuse of the store).
* ``DomainException`` and its subclasses describe business rules
  (bounds, uniqueness, permissions, capacity).

The CLI catches both at the edge and renders them differently.
"""

from __future__ import annotations


# ── Store faults ─────────────────────────────────────────────────────────────


class StoreError(Exception):
    """Base class for all persistence errors."""

    def __init__(
        self,
        message: str,
        *,
        collection: str,
        record_id: int | None = None,
    ) -> None:
        super().__init__(message)
        self.collection = collection
        self.record_id = record_id

    def __str__(self) -> str:
        text = f"{self.args[0]} [{self.collection}]"
        if self.record_id is not None:
            text += f" (id={self.record_id})"
        return text


class StoreParseError(StoreError):
    """The backing file exists but does not hold a valid collection."""


class StoreReadError(StoreError):
    """The backing file could not be read."""


class StoreWriteError(StoreError):
    """The collection could not be serialized or written."""


class RecordNotFoundError(StoreError):
    """An update targeted an id that is not in the collection."""

    def __init__(
        self,
        message: str,
        *,
        collection: str,
        record_id: int | None = None,
        entity: str | None = None,
    ) -> None:
        super().__init__(message, collection=collection, record_id=record_id)
        self.entity = entity


class InvalidArgumentError(StoreError):
    """The store was called with a missing record or predicate."""


class UnexpectedStoreError(StoreError):
    """Anything else that went wrong inside a store operation."""


# ── Domain faults ────────────────────────────────────────────────────────────


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field is missing, malformed, or out of its declared bounds."""


class DuplicateKeyError(DomainException):
    """A value that must be unique (case-insensitively) is already taken."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"{field.capitalize()} '{value}' already exists")
        self.field = field
        self.value = value


class UnauthorizedError(DomainException):
    """The acting user may not perform this operation."""


class BusinessRuleViolation(DomainException):
    """The operation is well-formed but breaks a business rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
