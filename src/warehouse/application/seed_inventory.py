"""Application service: Seed Inventory use case.

Loads the demo data set into the electronics, groceries and stock
repositories. Items whose ID is already taken are skipped and reported,
so seeding twice is harmless.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import structlog

from warehouse.application.dto import ItemLineDTO, SeedReport, to_line_dto
from warehouse.domain.exceptions import DuplicateKeyError
from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.model.stock_item import StockItem
from warehouse.domain.repository.record_repository import RecordRepository

logger = structlog.get_logger(__name__)


def sample_electronics() -> list[ElectronicItem]:
    return [
        ElectronicItem(id=1, name="Laptop", quantity=50, brand="Dell", warranty_months=12),
        ElectronicItem(id=2, name="Smartphone", quantity=120, brand="Samsung", warranty_months=24),
    ]


def sample_groceries(now: datetime) -> list[GroceryItem]:
    today = now.date()
    return [
        GroceryItem(id=101, name="Milk", quantity=200, expiry_date=today + timedelta(days=7)),
        GroceryItem(id=102, name="Bread", quantity=150, expiry_date=today + timedelta(days=3)),
    ]


def sample_stock(now: datetime) -> list[StockItem]:
    return [
        StockItem(id=1, name="Laptop", quantity=15, date_added=now - timedelta(days=30)),
        StockItem(id=2, name="Mouse", quantity=150, date_added=now - timedelta(days=10)),
        StockItem(id=3, name="Keyboard", quantity=75, date_added=now - timedelta(days=5)),
        StockItem(id=4, name="Monitor", quantity=30, date_added=now - timedelta(days=25)),
    ]


class SeedInventoryHandler:

    def __init__(
        self,
        electronics_repo: RecordRepository[InventoryRecord],
        groceries_repo: RecordRepository[InventoryRecord],
        stock_repo: RecordRepository[InventoryRecord],
    ) -> None:
        self._electronics_repo = electronics_repo
        self._groceries_repo = groceries_repo
        self._stock_repo = stock_repo

    def handle(self, now: datetime | None = None) -> SeedReport:
        now = now or datetime.now()
        added: list[ItemLineDTO] = []
        skipped: list[ItemLineDTO] = []

        batches: list[tuple[RecordRepository[InventoryRecord], list[InventoryRecord]]] = [
            (self._electronics_repo, list(sample_electronics())),
            (self._groceries_repo, list(sample_groceries(now))),
            (self._stock_repo, list(sample_stock(now))),
        ]
        for repo, records in batches:
            for record in records:
                try:
                    repo.insert(record)
                except DuplicateKeyError as exc:
                    logger.info(
                        "Sample item already present",
                        kind=record.KIND,
                        record_id=exc.record_id,
                    )
                    skipped.append(to_line_dto(record, now.date()))
                else:
                    added.append(to_line_dto(record, now.date()))

        logger.info("Inventory seeded", added=len(added), skipped=len(skipped))
        return SeedReport(added=added, skipped=skipped)
