"""Opaque password hashing capability.

Use cases hash and verify through this contract; repositories only ever
see the resulting opaque string.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Return an opaque, salted hash of ``plaintext``."""

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True if ``plaintext`` matches ``hashed``."""
