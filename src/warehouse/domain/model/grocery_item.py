"""Grocery inventory item with an expiry date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from warehouse.domain.exceptions import InvalidValueError
from warehouse.domain.model.record import InventoryRecord


@dataclass(frozen=True)
class GroceryItem(InventoryRecord):

    KIND = "grocery"

    expiry_date: date

    def __post_init__(self) -> None:
        super().__post_init__()
        # datetime is a date subclass; a time part would not survive storage
        if not isinstance(self.expiry_date, date) or isinstance(self.expiry_date, datetime):
            raise InvalidValueError(
                self.id, self.expiry_date, "expiry date must be a calendar date"
            )

    def is_expired(self, today: date | None = None) -> bool:
        return self.expiry_date < (today or date.today())

    def __str__(self) -> str:
        return (
            f"[Grocery] Id: {self.id}, Name: {self.name}, Qty: {self.quantity}, "
            f"Expires: {self.expiry_date.isoformat()}"
        )
