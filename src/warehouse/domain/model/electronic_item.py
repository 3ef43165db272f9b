"""Electronic inventory item."""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.exceptions import InvalidValueError
from warehouse.domain.model.record import InventoryRecord, is_valid_int


@dataclass(frozen=True)
class ElectronicItem(InventoryRecord):

    KIND = "electronic"

    brand: str
    warranty_months: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.brand, str):
            raise InvalidValueError(self.id, self.brand, "brand must be a string")
        if not is_valid_int(self.warranty_months) or self.warranty_months < 0:
            raise InvalidValueError(
                self.id,
                self.warranty_months,
                "warranty months must be a non-negative integer",
            )

    def __str__(self) -> str:
        return (
            f"[Electronic] Id: {self.id}, Name: {self.name}, Brand: {self.brand}, "
            f"Qty: {self.quantity}, Warranty: {self.warranty_months} months"
        )
