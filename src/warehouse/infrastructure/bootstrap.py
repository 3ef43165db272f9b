"""Maps each record kind to its JSON data file and opens repositories.

Commands go through ``open_repository`` so that a repository is loaded,
changed and written back as one unit.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.model.stock_item import StockItem
from warehouse.infrastructure.persistence.in_memory_record_repository import (
    InMemoryRecordRepository,
)
from warehouse.infrastructure.persistence.json_record_store import JsonRecordStore

# One data file per record kind.
RECORD_FILES = {
    ElectronicItem.KIND: "electronics.json",
    GroceryItem.KIND: "groceries.json",
    StockItem.KIND: "stock.json",
}


def record_store(kind: str, data_dir: Path) -> JsonRecordStore:
    return JsonRecordStore(data_dir / RECORD_FILES[kind])


def load_repository(store: JsonRecordStore) -> InMemoryRecordRepository[InventoryRecord]:
    """Load a repository from ``store`` for read-only use."""
    return InMemoryRecordRepository(store.load())


@contextmanager
def open_repository(
    store: JsonRecordStore,
) -> Iterator[InMemoryRecordRepository[InventoryRecord]]:
    """Load a repository from ``store`` and write it back on success.

    If the body raises, nothing is written, so a failed command leaves
    the data file exactly as it was.
    """
    repo = load_repository(store)
    yield repo
    store.save(repo.list_all())
