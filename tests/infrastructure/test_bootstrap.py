"""Tests for the composition root's load/modify/save unit."""

from datetime import date
from pathlib import Path

import pytest

from warehouse.domain.exceptions import DuplicateKeyError, NotFoundError
from warehouse.domain.model.electronic_item import ElectronicItem
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.infrastructure.bootstrap import (
    load_repository,
    open_repository,
    record_store,
)
from tests.fakes import FakeRecordStore


def _milk() -> GroceryItem:
    return GroceryItem(id=101, name="Milk", quantity=200, expiry_date=date(2026, 10, 26))


class TestRecordStore:

    def test_one_file_per_kind(self):
        assert record_store("electronic", Path("d")).file_path == Path("d/electronics.json")
        assert record_store("grocery", Path("d")).file_path == Path("d/groceries.json")
        assert record_store("stock", Path("d")).file_path == Path("d/stock.json")

    def test_unknown_kind(self):
        with pytest.raises(KeyError):
            record_store("furniture", Path("d"))


class TestOpenRepository:

    def test_saves_on_success(self):
        store = FakeRecordStore([_milk()])
        with open_repository(store) as repo:
            repo.update_quantity(101, 5)
        assert store.save_count == 1
        assert store.records[0].quantity == 5

    def test_does_not_save_when_body_raises(self):
        store = FakeRecordStore([_milk()])
        with pytest.raises(DuplicateKeyError):
            with open_repository(store) as repo:
                repo.insert(
                    ElectronicItem(id=7, name="Tablet", quantity=1, brand="X", warranty_months=6)
                )
                repo.insert(_milk())
        assert store.save_count == 0
        assert store.records == [_milk()]

    def test_load_repository_is_read_only(self):
        store = FakeRecordStore([_milk()])
        repo = load_repository(store)
        repo.remove(101)
        with pytest.raises(NotFoundError):
            repo.get_by_id(101)
        assert store.save_count == 0
        assert store.records == [_milk()]
