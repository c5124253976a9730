"""Shared pytest fixtures for the Waystones test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop loguru sinks installed by a test so later tests start clean."""

    yield
    logger.remove()
