"""Application service: Remove Item use case."""

from __future__ import annotations

import structlog

from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.repository.record_repository import RecordRepository

logger = structlog.get_logger(__name__)


class RemoveItemHandler:

    def __init__(self, repo: RecordRepository[InventoryRecord]) -> None:
        self._repo = repo

    def handle(self, record_id: int) -> None:
        self._repo.remove(record_id)
        logger.info("Item removed", record_id=record_id)
