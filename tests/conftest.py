import logging

import pytest

from shapearea.config import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that setup_logging may have attached during a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
