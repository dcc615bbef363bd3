from __future__ import annotations

import logging
from typing import Iterator

import pytest

from tests._fixtures.listing_builder import ListingBuilder


@pytest.fixture
def listing_builder() -> ListingBuilder:
    """Provide a fresh in-memory listing with a recording manifest fetcher."""
    return ListingBuilder()


@pytest.fixture(autouse=True)
def _propagate_readmegen_logs() -> Iterator[None]:
    """Let caplog see readmegen records even after the CLI configured logging."""
    logger = logging.getLogger("readmegen")
    previous = logger.propagate
    handlers = list(logger.handlers)
    logger.propagate = True
    yield
    logger.propagate = previous
    logger.handlers = handlers
