#!/usr/bin/env python3
"""Domain dataclasses for the sleep tracker."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

from sleep_tracker.core.constants import (
    UNRATED_QUALITY,
    ConfigDefaults,
    ConfigKey,
    DatabaseColumn,
    FileName,
)


def current_time_millis() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class SleepNight:
    """
    One recorded night of sleep.

    A freshly created night has its end time equal to its start time,
    which marks it as still being tracked ("open"). The store assigns
    ``night_id`` on insert; ``0`` means not yet persisted.
    """

    night_id: int = 0
    start_time_milli: int = field(default_factory=current_time_millis)
    end_time_milli: int | None = None
    sleep_quality: int = UNRATED_QUALITY

    def __post_init__(self) -> None:
        if self.end_time_milli is None:
            self.end_time_milli = self.start_time_milli

    @property
    def is_open(self) -> bool:
        """True while tracking is in progress."""
        return self.end_time_milli == self.start_time_milli

    @property
    def duration_milli(self) -> int:
        return self.end_time_milli - self.start_time_milli

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary keyed by database column."""
        return {
            DatabaseColumn.NIGHT_ID: self.night_id,
            DatabaseColumn.START_TIME_MILLI: self.start_time_milli,
            DatabaseColumn.END_TIME_MILLI: self.end_time_milli,
            DatabaseColumn.QUALITY_RATING: self.sleep_quality,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SleepNight:
        """Create from a dictionary keyed by database column."""
        return cls(
            night_id=data.get(DatabaseColumn.NIGHT_ID, 0),
            start_time_milli=data[DatabaseColumn.START_TIME_MILLI],
            end_time_milli=data.get(DatabaseColumn.END_TIME_MILLI),
            sleep_quality=data.get(DatabaseColumn.QUALITY_RATING, UNRATED_QUALITY),
        )


@dataclass
class AppConfig:
    """Application configuration settings with hardcoded defaults."""

    database_filename: str = FileName.DATABASE
    window_width: int = ConfigDefaults.WINDOW_WIDTH
    window_height: int = ConfigDefaults.WINDOW_HEIGHT
    snackbar_timeout_ms: int = ConfigDefaults.SNACKBAR_TIMEOUT_MS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for QSettings storage."""
        return {
            ConfigKey.DATABASE_FILENAME: self.database_filename,
            ConfigKey.WINDOW_WIDTH: self.window_width,
            ConfigKey.WINDOW_HEIGHT: self.window_height,
            ConfigKey.SNACKBAR_TIMEOUT_MS: self.snackbar_timeout_ms,
        }

    @classmethod
    def create_default(cls) -> AppConfig:
        """Create config with default values."""
        return cls()
