"""Unit tests for the inventory record variants."""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from warehouse.domain.exceptions import ErrorKind, InvalidValueError
from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.domain.model.record import IdentifiableRecord
from warehouse.domain.model.stock_item import StockItem


def _laptop(**overrides) -> ElectronicItem:
    fields = dict(id=1, name="Laptop", quantity=50, brand="Dell", warranty_months=12)
    fields.update(overrides)
    return ElectronicItem(**fields)


class TestRecordConstruction:

    def test_valid_electronic_item(self):
        item = _laptop()
        assert item.id == 1
        assert item.quantity == 50
        assert item.brand == "Dell"

    def test_zero_quantity_allowed(self):
        assert _laptop(quantity=0).quantity == 0

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidValueError) as exc_info:
            _laptop(quantity=-1)
        assert exc_info.value.kind is ErrorKind.INVALID_VALUE
        assert exc_info.value.attempted_value == -1

    def test_non_integer_id_rejected(self):
        with pytest.raises(InvalidValueError, match="id must be an integer"):
            _laptop(id="1")

    def test_bool_id_rejected(self):
        with pytest.raises(InvalidValueError, match="id must be an integer"):
            _laptop(id=True)

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(InvalidValueError):
            GroceryItem(id=101, name="Milk", quantity=2.5, expiry_date=date(2026, 1, 1))


class TestRecordImmutability:

    def test_fields_cannot_be_assigned(self):
        item = _laptop()
        with pytest.raises(FrozenInstanceError):
            item.quantity = 10  # type: ignore[misc]

    def test_with_quantity_returns_new_record(self):
        item = _laptop()
        updated = item.with_quantity(75)
        assert updated.quantity == 75
        assert item.quantity == 50
        assert updated.brand == item.brand
        assert updated.warranty_months == item.warranty_months

    def test_with_quantity_validates(self):
        with pytest.raises(InvalidValueError):
            _laptop().with_quantity(-5)


class TestRecordCapability:

    @pytest.mark.parametrize(
        "record",
        [
            ElectronicItem(id=1, name="Laptop", quantity=5, brand="Dell", warranty_months=12),
            GroceryItem(id=101, name="Milk", quantity=5, expiry_date=date(2026, 1, 1)),
            StockItem(id=3, name="Keyboard", quantity=5, date_added=datetime(2026, 1, 1)),
        ],
    )
    def test_every_variant_is_identifiable(self, record):
        assert isinstance(record, IdentifiableRecord)


class TestDisplay:

    def test_electronic_str(self):
        assert str(_laptop()) == (
            "[Electronic] Id: 1, Name: Laptop, Brand: Dell, Qty: 50, Warranty: 12 months"
        )

    def test_grocery_str(self):
        milk = GroceryItem(id=101, name="Milk", quantity=200, expiry_date=date(2026, 10, 26))
        assert str(milk) == "[Grocery] Id: 101, Name: Milk, Qty: 200, Expires: 2026-10-26"

    def test_grocery_expiry(self):
        milk = GroceryItem(id=101, name="Milk", quantity=200, expiry_date=date(2026, 10, 26))
        assert milk.is_expired(today=date(2026, 10, 27))
        assert not milk.is_expired(today=date(2026, 10, 26))


class TestVariantFieldValidation:

    def test_non_string_name_rejected(self):
        with pytest.raises(InvalidValueError, match="name must be a string"):
            _laptop(name=42)

    def test_non_string_brand_rejected(self):
        with pytest.raises(InvalidValueError, match="brand must be a string"):
            _laptop(brand=None)

    @pytest.mark.parametrize("months", [-5, True, 1.5, "12"])
    def test_bad_warranty_rejected(self, months):
        with pytest.raises(InvalidValueError, match="warranty months"):
            _laptop(warranty_months=months)

    def test_zero_warranty_allowed(self):
        assert _laptop(warranty_months=0).warranty_months == 0

    @pytest.mark.parametrize("expiry", [datetime(2026, 1, 1, 8), "2026-01-01", None])
    def test_grocery_expiry_must_be_a_plain_date(self, expiry):
        with pytest.raises(InvalidValueError, match="expiry date"):
            GroceryItem(id=101, name="Milk", quantity=1, expiry_date=expiry)

    @pytest.mark.parametrize("added", [date(2026, 1, 1), "2026-01-01T00:00:00"])
    def test_stock_date_added_must_be_a_datetime(self, added):
        with pytest.raises(InvalidValueError, match="date added"):
            StockItem(id=1, name="Mouse", quantity=1, date_added=added)
