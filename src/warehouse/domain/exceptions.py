"""Domain-level exceptions.

Every repository rule violation is a subclass of DomainException and
carries an ``ErrorKind`` tag plus the offending id, so callers can catch
by class or dispatch on ``exc.kind`` and carry on.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    DUPLICATE_KEY = "DUPLICATE_KEY"
    NOT_FOUND = "NOT_FOUND"
    INVALID_VALUE = "INVALID_VALUE"


class DomainException(Exception):
    """Base class for all recoverable domain errors."""

    kind: ErrorKind

    def __init__(self, record_id: int, message: str) -> None:
        super().__init__(message)
        self.record_id = record_id


class DuplicateKeyError(DomainException):
    """An item with the same ID is already stored."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, record_id: int) -> None:
        super().__init__(record_id, f"Item with ID {record_id} already exists")


class NotFoundError(DomainException):
    """No item is stored under the requested ID."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, record_id: int) -> None:
        super().__init__(record_id, f"Item with ID {record_id} not found")


class InvalidValueError(DomainException):
    """A field value would break an invariant (e.g. negative quantity)."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(
        self,
        record_id: int,
        attempted_value: object,
        reason: str = "quantity cannot be negative",
    ) -> None:
        super().__init__(
            record_id,
            f"Invalid value {attempted_value!r} for item {record_id}: {reason}",
        )
        self.attempted_value = attempted_value
        self.reason = reason


class DeserializationError(Exception):
    """Persisted content could not be turned back into records.

    Not a DomainException; callers handle it separately from the
    repository error kinds.
    """
