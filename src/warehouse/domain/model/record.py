"""The identifiable-record capability shared by every inventory variant.

The repository only relies on ``IdentifiableRecord``; concrete items
derive from ``InventoryRecord``, which supplies validation and the
``with_quantity`` copy used for quantity changes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Protocol, TypeVar, runtime_checkable

from warehouse.domain.exceptions import InvalidValueError

R = TypeVar("R", bound="IdentifiableRecord")
Rec = TypeVar("Rec", bound="InventoryRecord")


@runtime_checkable
class IdentifiableRecord(Protocol):

    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...

    @property
    def quantity(self) -> int: ...

    def with_quantity(self: R, quantity: int) -> R: ...


def is_valid_int(value: object) -> bool:
    # bool is an int subclass but never a meaningful id or quantity
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class InventoryRecord:
    """Base for inventory items.

    Records are immutable values: ``id`` and ``name`` never change, and
    a quantity change produces a new record via ``with_quantity``. This
    makes every record handed out by a repository a safe snapshot.
    """

    KIND: ClassVar[str] = ""

    id: int
    name: str
    quantity: int

    def __post_init__(self) -> None:
        if not is_valid_int(self.id):
            raise InvalidValueError(self.id, self.id, "id must be an integer")
        if not isinstance(self.name, str):
            raise InvalidValueError(self.id, self.name, "name must be a string")
        if not is_valid_int(self.quantity) or self.quantity < 0:
            raise InvalidValueError(self.id, self.quantity)

    def with_quantity(self: Rec, quantity: int) -> Rec:
        """Return a copy of this record with a different quantity."""
        return replace(self, quantity=quantity)
