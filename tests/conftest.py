"""Shared test fixtures for typeahead."""

import pytest
from loguru import logger


@pytest.fixture
def quiet_logger():
    """Undo the sinks the CLI installs so they do not outlive captured streams."""
    yield logger
    logger.remove()
    logger.disable("typeahead")
