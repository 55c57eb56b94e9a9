"""Pytest configuration and fixtures."""

import logging
from dataclasses import dataclass

import pytest

from collectionops.config import reset_settings
from collectionops.logging import reset_logging


@dataclass
class SampleUser:
    """Plain record used to drive the collection operations."""

    username: str
    dept_id: int
    score: float
    winning_count: int
    count: int


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep each test free of settings and environment leaking from elsewhere."""
    for name in (
        "COLLECTIONOPS_ENV",
        "COLLECTIONOPS_DEBUG_MODE",
        "COLLECTIONOPS_LOG_LEVEL",
        "COLLECTIONOPS_STRUCTURED_LOGGING",
        "COLLECTIONOPS_COLORIZE",
        "COLLECTIONOPS_LOG_FILE",
        "COLLECTIONOPS_AUTO_SETUP_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def restore_logging(monkeypatch):
    """Undo global logging configuration performed by a test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    monkeypatch.delenv("COLLECTIONOPS_AUTO_SETUP_LOGGING", raising=False)
    reset_settings()
    reset_logging()
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def users() -> list[SampleUser]:
    """Four users across two departments."""
    return [
        SampleUser("user1", 4, 120.0, 11, 20),
        SampleUser("user2", 4, 110.0, 12, 20),
        SampleUser("user3", 1, 130.0, 13, 200),
        SampleUser("user4", 1, 150.0, 14, 20),
    ]


@pytest.fixture
def scored_records() -> list[dict]:
    """Records with a repeated id."""
    return [
        {"id": 1, "score": 10},
        {"id": 2, "score": 30},
        {"id": 2, "score": 20},
    ]
