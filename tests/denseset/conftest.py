"""Denseset test configuration."""

# Imports.
import logging
from typing import Generator

import pytest


@pytest.fixture(autouse=True)
def disable_logging() -> Generator[None, None, None]:
    """Disable all logging utilities during testing."""
    logging.disable(logging.CRITICAL)
    try:
        yield
    finally:
        logging.disable(logging.NOTSET)
