"""Application service: Show Inventory use cases (queries)."""

from __future__ import annotations

from warehouse.application.dto import ItemLineDTO, to_line_dto
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.repository.record_repository import RecordRepository


class ShowInventoryHandler:

    def __init__(self, repo: RecordRepository[InventoryRecord]) -> None:
        self._repo = repo

    def handle(self) -> list[ItemLineDTO]:
        return [to_line_dto(record) for record in self._repo.list_all()]


class ShowItemHandler:

    def __init__(self, repo: RecordRepository[InventoryRecord]) -> None:
        self._repo = repo

    def handle(self, record_id: int) -> ItemLineDTO:
        return to_line_dto(self._repo.get_by_id(record_id))
