"""Domain errors raised by the user entity and the user service.

Every failure carries a kind, a human-readable message and the subject that
caused it (the offending field, id or email). Callers branch on ``kind`` or on
the concrete exception type.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the core."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    DUPLICATE_EMAIL = "duplicate_email"


class UserDomainError(Exception):
    """Common shape of user domain failures."""

    kind: ErrorKind
    http_status: int = 400

    def __init__(self, message: str, subject: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.subject = subject

    def to_response(self) -> dict:
        """Convert to the error envelope returned by the API."""
        return {
            "error": {
                "kind": self.kind.value,
                "message": self.message,
                "subject": self.subject,
            }
        }


class UserValidationError(UserDomainError):
    """Name or email failed entity validation."""

    kind = ErrorKind.VALIDATION
    http_status = 422

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message, subject=field)
        self.field = field


class UserNotFoundError(UserDomainError):
    """No user matched the requested criterion."""

    kind = ErrorKind.NOT_FOUND
    http_status = 404

    def __init__(self, criterion: str) -> None:
        super().__init__(f"user not found: {criterion}", subject=criterion)
        self.criterion = criterion


class DuplicateEmailError(UserDomainError):
    """Email is already registered to another user."""

    kind = ErrorKind.DUPLICATE_EMAIL
    http_status = 409

    def __init__(self, email: str) -> None:
        super().__init__(f"email already registered: {email}", subject=email)
        self.email = email
