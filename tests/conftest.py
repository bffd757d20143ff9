"""Shared pytest fixtures."""

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers bound to streams that CliRunner closes after a test."""
    yield
    logger = logging.getLogger("luadoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
