"""Abstract keyed repository for identifiable records.

Defined in the domain layer so application code never depends on a
concrete storage. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from warehouse.domain.model.record import IdentifiableRecord

T = TypeVar("T", bound=IdentifiableRecord)


class RecordRepository(ABC, Generic[T]):

    @abstractmethod
    def insert(self, record: T) -> None:
        """Store a new record.

        Raises DuplicateKeyError if the ID is taken; the existing record
        is left untouched.
        """

    @abstractmethod
    def get_by_id(self, record_id: int) -> T:
        """Return the record stored under ``record_id``.

        Raises NotFoundError if absent.
        """

    @abstractmethod
    def remove(self, record_id: int) -> None:
        """Delete a record. Raises NotFoundError if absent."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return a snapshot of every record, oldest insert first."""

    @abstractmethod
    def update_quantity(self, record_id: int, new_quantity: int) -> None:
        """Replace a record's quantity, keeping every other field.

        Raises NotFoundError if absent, InvalidValueError if
        ``new_quantity`` is negative.
        """

    @abstractmethod
    def adjust_quantity(self, record_id: int, delta: int) -> T:
        """Add ``delta`` to a record's quantity atomically and return it."""
