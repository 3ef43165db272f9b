"""Thread-safe in-memory implementation of RecordRepository.

Records are held in a plain dict keyed by ID, which keeps insertion
order. One lock guards each whole operation, so concurrent callers see
serializable effects and quantity changes are never lost.
"""

from __future__ import annotations

from threading import RLock
from typing import Iterable

import structlog

from warehouse.domain.exceptions import (
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
)
from warehouse.domain.model.record import is_valid_int
from warehouse.domain.repository.record_repository import RecordRepository, T

logger = structlog.get_logger(__name__)


class InMemoryRecordRepository(RecordRepository[T]):

    def __init__(self, records: Iterable[T] | None = None) -> None:
        self._items: dict[int, T] = {}
        self._lock = RLock()
        for record in records or []:
            self.insert(record)

    # --- RecordRepository interface -------------------------------------------

    def insert(self, record: T) -> None:
        with self._lock:
            if record.id in self._items:
                raise DuplicateKeyError(record.id)
            if not is_valid_int(record.quantity) or record.quantity < 0:
                raise InvalidValueError(record.id, record.quantity)
            self._items[record.id] = record
        logger.debug("Record inserted", record_id=record.id, name=record.name)

    def get_by_id(self, record_id: int) -> T:
        with self._lock:
            return self._require(record_id)

    def remove(self, record_id: int) -> None:
        with self._lock:
            self._require(record_id)
            del self._items[record_id]
        logger.debug("Record removed", record_id=record_id)

    def list_all(self) -> list[T]:
        with self._lock:
            return list(self._items.values())

    def update_quantity(self, record_id: int, new_quantity: int) -> None:
        with self._lock:
            self._set_quantity(record_id, new_quantity)

    def adjust_quantity(self, record_id: int, delta: int) -> T:
        with self._lock:
            current = self._require(record_id)
            if not is_valid_int(delta):
                raise InvalidValueError(record_id, delta, "amount must be an integer")
            return self._set_quantity(record_id, current.quantity + delta)

    # --- Container helpers ----------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._items

    # --- Internal helpers (caller holds the lock) -----------------------------

    def _require(self, record_id: int) -> T:
        try:
            return self._items[record_id]
        except KeyError:
            raise NotFoundError(record_id) from None

    def _set_quantity(self, record_id: int, new_quantity: int) -> T:
        current = self._require(record_id)
        if not is_valid_int(new_quantity):
            raise InvalidValueError(
                record_id, new_quantity, "quantity must be an integer"
            )
        if new_quantity < 0:
            raise InvalidValueError(record_id, new_quantity)
        # Assigning to an existing key keeps its position in the dict.
        updated = current.with_quantity(new_quantity)
        self._items[record_id] = updated
        logger.debug(
            "Quantity updated",
            record_id=record_id,
            old_quantity=current.quantity,
            new_quantity=new_quantity,
        )
        return updated
