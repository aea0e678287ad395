"""Shared pytest configuration."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_structcheck_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog sees every record."""
    logger = logging.getLogger("structcheck")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
