#!/usr/bin/env python3
"""
Shared test fixtures for the sleep tracker application.
Provides common test setup and utilities.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sleep_tracker.data.database import SleepDatabase
from sleep_tracker.data.repositories import SleepNightRepository
from sleep_tracker.ui.store import UIStore

# Headless runs need no display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Fixed point in time used by the fake clock: 2023-11-14 22:13:20 UTC
CLOCK_START_MILLI = 1_700_000_000_000


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as a GUI test")
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


class FakeClock:
    """Deterministic millisecond clock for view models."""

    def __init__(self, now: int = CLOCK_START_MILLI) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> int:
        self.now += millis
        return self.now


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide path for test database."""
    return tmp_path / "test_sleep_tracker.db"


@pytest.fixture
def sleep_database(test_db_path: Path) -> SleepDatabase:
    """Create a real SleepDatabase on a temp file."""
    return SleepDatabase(test_db_path)


@pytest.fixture
def repository(sleep_database: SleepDatabase) -> SleepNightRepository:
    """Night repository bound to the temp database."""
    return sleep_database.sleep_night_repository


@pytest.fixture
def store() -> UIStore:
    """Create a fresh store for testing."""
    return UIStore()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
