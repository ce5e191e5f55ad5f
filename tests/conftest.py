import pytest

from presence.config import LoggingConfig
from presence.logging_config import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(LoggingConfig(disabled=True), force=True)
    yield
    configure_logging(LoggingConfig(disabled=True), force=True)
