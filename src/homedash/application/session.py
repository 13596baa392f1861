"""The acting user of one interactive session.

A ``Session`` is created by the caller (the CLI creates one per
invocation) and passed explicitly to every handler that acts on behalf of
a user. Nothing in the application keeps a process-wide current user.
"""

from __future__ import annotations

from dataclasses import dataclass

from homedash.domain.exceptions import UnauthorizedError
from homedash.domain.model.user import User


@dataclass
class Session:

    user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, user: User) -> None:
        self.user = user

    def require_user(self) -> User:
        if self.user is None:
            raise UnauthorizedError("You must be logged in to do that")
        return self.user
