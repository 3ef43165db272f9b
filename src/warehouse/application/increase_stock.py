"""Application service: Increase Stock use case.

Adds delivered units to an existing item. The read-modify-write happens
inside the repository so concurrent deliveries are never lost.
"""

from __future__ import annotations

import structlog

from warehouse.application.dto import ItemLineDTO, to_line_dto
from warehouse.domain.exceptions import InvalidValueError
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.repository.record_repository import RecordRepository

logger = structlog.get_logger(__name__)


class IncreaseStockHandler:

    def __init__(self, repo: RecordRepository[InventoryRecord]) -> None:
        self._repo = repo

    def handle(self, record_id: int, amount: int) -> ItemLineDTO:
        # Existence is checked first so an unknown ID reports NotFound
        self._repo.get_by_id(record_id)
        if amount <= 0:
            raise InvalidValueError(record_id, amount, "amount must be positive")

        updated = self._repo.adjust_quantity(record_id, amount)
        logger.info(
            "Stock increased",
            record_id=record_id,
            amount=amount,
            new_quantity=updated.quantity,
        )
        return to_line_dto(updated)
