import pytest

from warehouse.infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging("WARNING")
