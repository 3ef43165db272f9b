"""Application service: Update Quantity use case."""

from __future__ import annotations

import structlog

from warehouse.application.dto import ItemLineDTO, to_line_dto
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.repository.record_repository import RecordRepository

logger = structlog.get_logger(__name__)


class UpdateQuantityHandler:

    def __init__(self, repo: RecordRepository[InventoryRecord]) -> None:
        self._repo = repo

    def handle(self, record_id: int, new_quantity: int) -> ItemLineDTO:
        """Set an item's quantity outright.

        Raises NotFoundError for an unknown ID and InvalidValueError for a
        negative quantity; the stored item is unchanged in both cases.
        """
        self._repo.update_quantity(record_id, new_quantity)
        logger.info("Quantity set", record_id=record_id, quantity=new_quantity)
        return to_line_dto(self._repo.get_by_id(record_id))
