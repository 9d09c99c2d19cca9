"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any configure_logging() call made by the API lifespan."""
    yield
    structlog.reset_defaults()
