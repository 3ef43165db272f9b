"""Application service: Add Item use case."""

from __future__ import annotations

import structlog

from warehouse.application.dto import ItemLineDTO, to_line_dto
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.repository.record_repository import RecordRepository

logger = structlog.get_logger(__name__)


class AddItemHandler:

    def __init__(self, repo: RecordRepository[InventoryRecord]) -> None:
        self._repo = repo

    def handle(self, record: InventoryRecord) -> ItemLineDTO:
        """Add a new item. Raises DuplicateKeyError if the ID is taken."""
        self._repo.insert(record)
        logger.info("Item added", kind=record.KIND, record_id=record.id)
        return to_line_dto(record)
