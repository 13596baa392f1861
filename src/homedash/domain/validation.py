"""Field checks shared by repositories and use cases.

Every ``require_*`` helper raises ``ValidationError`` with a message that
can be shown to the user as-is.
"""

from __future__ import annotations

import re
from decimal import Decimal

from homedash.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_USERNAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]{2,49}$")

MIN_PASSWORD_LENGTH = 8


def is_valid_email(email: str | None) -> bool:
    return bool(email and email.strip()) and bool(_EMAIL_RE.match(email))


def is_valid_username(username: str | None) -> bool:
    return bool(username and username.strip()) and bool(_USERNAME_RE.match(username))


def is_password_strong(password: str | None) -> bool:
    """At least 8 characters with an uppercase letter, a lowercase letter and a digit."""
    if not password or not password.strip() or len(password) < MIN_PASSWORD_LENGTH:
        return False
    return (
        any(c.isupper() for c in password)
        and any(c.islower() for c in password)
        and any(c.isdigit() for c in password)
    )


def require_text(value: str | None, field: str, *, min_len: int = 1, max_len: int) -> str:
    """Return the trimmed value, or raise if it is blank or too long/short."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    trimmed = value.strip()
    if not min_len <= len(trimmed) <= max_len:
        raise ValidationError(
            f"{field} must be between {min_len} and {max_len} characters long"
        )
    return trimmed


def optional_text(value: str | None, field: str, *, max_len: int) -> str | None:
    """Return the trimmed value or None; raise if it is too long."""
    if value is None or not value.strip():
        return None
    trimmed = value.strip()
    if len(trimmed) > max_len:
        raise ValidationError(f"{field} cannot exceed {max_len} characters")
    return trimmed


def require_int_range(value: int, field: str, *, low: int, high: int) -> int:
    if not low <= value <= high:
        raise ValidationError(f"{field} must be between {low} and {high}")
    return value


def require_decimal_range(
    value: Decimal, field: str, *, low: Decimal, high: Decimal
) -> Decimal:
    if not value.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    if not low <= value <= high:
        raise ValidationError(f"{field} must be between {low} and {high}")
    return value
