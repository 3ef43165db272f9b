"""JSON codec for ordered sequences of inventory records.

The persisted form is a JSON array; each element is an object tagged
with the record ``kind`` plus its fields. Dates are ISO-8601 strings.
``deserialize(serialize(records)) == records`` for any valid sequence.

Decoding is strict: anything that does not describe a valid record
(including an unparseable id) raises DeserializationError rather than
being skipped.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Callable, Iterable

from warehouse.domain.exceptions import DeserializationError, DomainException
from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.domain.model.record import InventoryRecord, is_valid_int
from warehouse.domain.model.stock_item import StockItem

RECORD_TYPES: dict[str, type[InventoryRecord]] = {
    cls.KIND: cls for cls in (ElectronicItem, GroceryItem, StockItem)
}


# --- Encoding -----------------------------------------------------------------


def serialize(records: Iterable[InventoryRecord]) -> str:
    raw = [_to_raw(record) for record in records]
    return json.dumps(raw, indent=2) + "\n"


def _to_raw(record: InventoryRecord) -> dict[str, Any]:
    if isinstance(record, ElectronicItem):
        extra = {"brand": record.brand, "warranty_months": record.warranty_months}
    elif isinstance(record, GroceryItem):
        extra = {"expiry_date": record.expiry_date.isoformat()}
    elif isinstance(record, StockItem):
        extra = {"date_added": record.date_added.isoformat()}
    else:
        raise TypeError(f"Cannot serialize {type(record).__name__}")
    return {
        "kind": record.KIND,
        "id": record.id,
        "name": record.name,
        "quantity": record.quantity,
        **extra,
    }


# --- Decoding -----------------------------------------------------------------


def deserialize(text: str) -> list[InventoryRecord]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DeserializationError("Invalid JSON: nested too deeply") from exc

    if not isinstance(raw, list):
        raise DeserializationError("Expected a JSON array of records")

    records: list[InventoryRecord] = []
    seen: set[int] = set()
    for index, entry in enumerate(raw):
        record = _to_domain(entry, index)
        if record.id in seen:
            raise DeserializationError(
                f"Record #{index}: duplicate id {record.id}"
            )
        seen.add(record.id)
        records.append(record)
    return records


def _to_domain(entry: Any, index: int) -> InventoryRecord:
    if not isinstance(entry, dict):
        raise DeserializationError(f"Record #{index}: expected an object")

    kind = entry.get("kind")
    cls = RECORD_TYPES.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise DeserializationError(f"Record #{index}: unknown kind {kind!r}")

    expected = _FIELDS[cls.KIND]
    actual = set(entry) - {"kind"}
    if actual != set(expected):
        missing = sorted(set(expected) - actual)
        unexpected = sorted(actual - set(expected))
        raise DeserializationError(
            f"Record #{index}: missing fields {missing}, unexpected fields {unexpected}"
        )

    values = {}
    for field_name, parse in expected.items():
        try:
            values[field_name] = parse(entry[field_name])
        except (TypeError, ValueError) as exc:
            raise DeserializationError(
                f"Record #{index}: bad {field_name!r} value {entry[field_name]!r}"
            ) from exc

    try:
        return cls(**values)
    except DomainException as exc:
        raise DeserializationError(f"Record #{index}: {exc}") from exc


# --- Field parsers ------------------------------------------------------------


def _int(value: Any) -> int:
    if not is_valid_int(value):
        raise TypeError("expected an integer")
    return value


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError("expected a string")
    return value


def _date(value: Any) -> date:
    return date.fromisoformat(_str(value))


def _datetime(value: Any) -> datetime:
    return datetime.fromisoformat(_str(value))


_COMMON: dict[str, Callable[[Any], Any]] = {
    "id": _int,
    "name": _str,
    "quantity": _int,
}

_FIELDS: dict[str, dict[str, Callable[[Any], Any]]] = {
    ElectronicItem.KIND: {**_COMMON, "brand": _str, "warranty_months": _int},
    GroceryItem.KIND: {**_COMMON, "expiry_date": _date},
    StockItem.KIND: {**_COMMON, "date_added": _datetime},
}
