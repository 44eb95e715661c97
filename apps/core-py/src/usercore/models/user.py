"""User entity."""

from __future__ import annotations

import random
import re
import string
import time
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from usercore.errors import UserValidationError

if TYPE_CHECKING:
    from usercore.models.dto import UpdateUserRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_NAME_LENGTH = 2

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    digits = []
    while True:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def generate_user_id() -> str:
    """Generate an opaque user id.

    Unique in practice within one process run; collisions are not detected.
    """
    suffix = "".join(random.choices(_BASE36, k=7))
    return f"usr_{_to_base36(int(time.time() * 1000))}{suffix}"


def _validate(name: str | None, email: str | None) -> None:
    if name is None or len(name.strip()) < MIN_NAME_LENGTH:
        raise UserValidationError("name too short", field="name")
    if email is None or not EMAIL_PATTERN.fullmatch(email):
        raise UserValidationError("invalid email", field="email")


@dataclass(frozen=True, eq=False)
class User:
    """A registered user.

    Values are immutable snapshots: updates produce a new ``User`` with the
    same ``user_id``. Two users compare equal when their emails match exactly.
    """

    name: str
    email: str
    user_id: str = field(default_factory=generate_user_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        _validate(self.name, self.email)

    def same_identity(self, other: User) -> bool:
        """Return True when both users carry the same email (case-sensitive)."""
        return self.email == other.email

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.same_identity(other)

    def __hash__(self) -> int:
        return hash(self.email)

    def with_updated_fields(self, name: str | None = None, email: str | None = None) -> User:
        """Return a validated copy with the supplied fields replaced.

        ``user_id`` and ``created_at`` carry over unchanged.

        Raises:
            UserValidationError: If the resulting name or email is invalid
        """
        return replace(
            self,
            name=self.name if name is None else name,
            email=self.email if email is None else email,
        )


def apply_update(user: User, request: UpdateUserRequest) -> User:
    """Build the replacement for ``user`` described by ``request``."""
    return user.with_updated_fields(name=request.name, email=request.email)
