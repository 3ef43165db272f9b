"""Tests for the single-file JSON record store (uses tmp_path)."""

from datetime import date

import pytest

from warehouse.domain.exceptions import DeserializationError
from warehouse.domain.model.grocery_item import GroceryItem
from warehouse.infrastructure.persistence.json_record_store import JsonRecordStore


def _groceries():
    return [
        GroceryItem(id=101, name="Milk", quantity=200, expiry_date=date(2026, 10, 26)),
        GroceryItem(id=102, name="Bread", quantity=150, expiry_date=date(2026, 10, 22)),
        GroceryItem(id=103, name="Eggs", quantity=60, expiry_date=date(2026, 11, 2)),
    ]


class TestJsonRecordStore:

    def test_missing_file_loads_empty(self, tmp_path):
        store = JsonRecordStore(tmp_path / "groceries.json")
        assert store.load() == []
        assert not store.file_path.exists()

    def test_save_then_load_round_trips(self, tmp_path):
        store = JsonRecordStore(tmp_path / "nested" / "groceries.json")
        store.save(_groceries())

        reloaded = JsonRecordStore(tmp_path / "nested" / "groceries.json").load()
        assert reloaded == _groceries()

    def test_save_overwrites_previous_content(self, tmp_path):
        store = JsonRecordStore(tmp_path / "groceries.json")
        store.save(_groceries())
        store.save(_groceries()[:1])
        assert [r.id for r in store.load()] == [101]

    def test_malformed_file_raises_with_path(self, tmp_path):
        path = tmp_path / "groceries.json"
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(DeserializationError, match="groceries.json"):
            JsonRecordStore(path).load()

    def test_non_utf8_file_raises_with_path(self, tmp_path):
        path = tmp_path / "groceries.json"
        path.write_bytes(b"[\xff\xfe]")
        with pytest.raises(DeserializationError, match="groceries.json.*UTF-8"):
            JsonRecordStore(path).load()
