"""Single-file JSON persistence for one repository's records."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import structlog

from warehouse.domain.exceptions import DeserializationError
from warehouse.domain.model.record import InventoryRecord
from warehouse.infrastructure.persistence.json_codec import deserialize, serialize

logger = structlog.get_logger(__name__)


class JsonRecordStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> list[InventoryRecord]:
        """Read every persisted record, in stored order.

        A missing file means "start empty", not an error. Malformed
        content raises DeserializationError.
        """
        if not self._file_path.exists():
            logger.info("No data file, starting empty", path=str(self._file_path))
            return []
        try:
            records = deserialize(self._file_path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise DeserializationError(
                f"{self._file_path}: not valid UTF-8 ({exc})"
            ) from exc
        except DeserializationError as exc:
            raise DeserializationError(f"{self._file_path}: {exc}") from exc
        logger.debug("Records loaded", path=str(self._file_path), count=len(records))
        return records

    def save(self, records: Iterable[InventoryRecord]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(serialize(records), encoding="utf-8")
        logger.debug("Records saved", path=str(self._file_path))
