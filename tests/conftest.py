from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest

from tests._fixtures.tree_builder import SourceTreeBuilder

FIXED_MOMENT = datetime(2024, 5, 17, 9, 30, 12, 345678, tzinfo=UTC)


@pytest.fixture
def tree_builder(tmp_path: Path) -> SourceTreeBuilder:
    """Provide a reusable source tree builder rooted at the pytest tmp_path."""
    return SourceTreeBuilder(tmp_path)


@pytest.fixture
def fixed_clock():
    """Clock that always reports the same instant."""
    return lambda: FIXED_MOMENT


@pytest.fixture(autouse=True)
def _reset_wrapgen_logger():
    yield
    logger = logging.getLogger("wrapgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
