"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from warehouse.infrastructure.config import DEFAULT_DATA_DIR, Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("WAREHOUSE_DATA_DIR", "WAREHOUSE_LOG_LEVEL", "WAREHOUSE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("warehouse.infrastructure.config.load_dotenv", lambda: False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"

    def test_reads_environment(self, clean_env):
        clean_env.setenv("WAREHOUSE_DATA_DIR", "/tmp/wh")
        clean_env.setenv("WAREHOUSE_LOG_LEVEL", "debug")
        clean_env.setenv("WAREHOUSE_LOG_FORMAT", "JSON")
        settings = Settings.from_env()
        assert settings.data_dir == Path("/tmp/wh")
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_unknown_log_format_rejected(self, clean_env):
        clean_env.setenv("WAREHOUSE_LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="WAREHOUSE_LOG_FORMAT"):
            Settings.from_env()

    def test_unknown_log_level_rejected(self, clean_env):
        clean_env.setenv("WAREHOUSE_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="WAREHOUSE_LOG_LEVEL"):
            Settings.from_env()
