"""Dated stock entry, as kept by the flat inventory log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from warehouse.domain.exceptions import InvalidValueError
from warehouse.domain.model.record import InventoryRecord


@dataclass(frozen=True)
class StockItem(InventoryRecord):

    KIND = "stock"

    date_added: datetime

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.date_added, datetime):
            raise InvalidValueError(
                self.id, self.date_added, "date added must be a datetime"
            )

    def __str__(self) -> str:
        return (
            f"[Stock] Id: {self.id}, Name: {self.name}, Qty: {self.quantity}, "
            f"Added: {self.date_added:%Y-%m-%d}"
        )
