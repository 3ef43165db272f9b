"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry item data to the CLI without handing it domain records.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.domain.model.record import InventoryRecord
from warehouse.domain.model.stock_item import StockItem


@dataclass(frozen=True)
class ItemLineDTO:
    """Output: a single inventory item as displayed to the user."""

    id: int
    kind: str
    name: str
    quantity: int
    details: str  # variant-specific, e.g. "Dell, 12 months warranty"


@dataclass(frozen=True)
class SeedReport:
    """Output: which sample items were added and which already existed."""

    added: list[ItemLineDTO]
    skipped: list[ItemLineDTO]


def to_line_dto(record: InventoryRecord, today: date | None = None) -> ItemLineDTO:
    return ItemLineDTO(
        id=record.id,
        kind=record.KIND,
        name=record.name,
        quantity=record.quantity,
        details=_details(record, today or date.today()),
    )


def _details(record: InventoryRecord, today: date) -> str:
    if isinstance(record, ElectronicItem):
        return f"{record.brand}, {record.warranty_months} months warranty"
    if isinstance(record, GroceryItem):
        expiry = f"expires {record.expiry_date.isoformat()}"
        return f"{expiry} (expired)" if record.is_expired(today) else expiry
    if isinstance(record, StockItem):
        return f"added {record.date_added:%Y-%m-%d}"
    return ""
