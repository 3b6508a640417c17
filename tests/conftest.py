"""Shared pytest fixtures."""

import logging

import pytest

from shuffle.logging.context import clear_log_context
from tests.helpers import RecordingMeasurer


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def measurer():
    """One pixel per character, independent of font size."""
    return RecordingMeasurer()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Shuffle-related environment variables."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT", "SHUFFLE_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after configure_logging()."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
