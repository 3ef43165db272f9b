"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_DIR = Path("data")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMATS = ("console", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()
        log_format = os.environ.get("WAREHOUSE_LOG_FORMAT", "console").lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(
                f"WAREHOUSE_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}"
            )
        log_level = os.environ.get("WAREHOUSE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"WAREHOUSE_LOG_LEVEL must be one of {LOG_LEVELS}, got {log_level!r}"
            )
        return cls(
            data_dir=Path(os.environ.get("WAREHOUSE_DATA_DIR", str(DEFAULT_DATA_DIR))),
            log_level=log_level,
            log_format=log_format,
        )
