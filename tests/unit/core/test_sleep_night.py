#!/usr/bin/env python3
"""Tests for the SleepNight and AppConfig dataclasses."""

from __future__ import annotations

from dataclasses import replace
from unittest.mock import patch

from sleep_tracker.core.constants import UNRATED_QUALITY, ConfigDefaults, DatabaseColumn, FileName
from sleep_tracker.core.dataclasses import AppConfig, SleepNight, current_time_millis


class TestSleepNight:
    """Tests for SleepNight defaults and the open-night rule."""

    def test_defaults(self) -> None:
        """New night is unsaved, unrated and open."""
        with patch("sleep_tracker.core.dataclasses.time.time", return_value=1234.5):
            night = SleepNight()

        assert night.night_id == 0
        assert night.start_time_milli == 1_234_500
        assert night.end_time_milli == night.start_time_milli
        assert night.sleep_quality == UNRATED_QUALITY

    def test_new_night_is_open(self) -> None:
        night = SleepNight(start_time_milli=1000)

        assert night.is_open
        assert night.duration_milli == 0

    def test_night_with_later_end_is_closed(self) -> None:
        night = SleepNight(start_time_milli=1000, end_time_milli=61_000)

        assert not night.is_open
        assert night.duration_milli == 60_000

    def test_replace_keeps_original_untouched(self) -> None:
        """Closing a night through replace() leaves the open night open."""
        night = SleepNight(night_id=3, start_time_milli=1000)
        closed = replace(night, end_time_milli=5000)

        assert night.is_open
        assert not closed.is_open
        assert closed.night_id == 3

    def test_to_dict_uses_database_columns(self) -> None:
        night = SleepNight(night_id=7, start_time_milli=10, end_time_milli=20, sleep_quality=4)

        assert night.to_dict() == {
            DatabaseColumn.NIGHT_ID: 7,
            DatabaseColumn.START_TIME_MILLI: 10,
            DatabaseColumn.END_TIME_MILLI: 20,
            DatabaseColumn.QUALITY_RATING: 4,
        }

    def test_from_dict_with_plain_string_keys(self) -> None:
        """Rows come back keyed by plain column names."""
        night = SleepNight.from_dict({"night_id": 2, "start_time_milli": 5, "end_time_milli": 9, "quality_rating": 1})

        assert night == SleepNight(night_id=2, start_time_milli=5, end_time_milli=9, sleep_quality=1)

    def test_current_time_millis_is_integer(self) -> None:
        assert isinstance(current_time_millis(), int)


class TestAppConfig:
    def test_create_default(self) -> None:
        config = AppConfig.create_default()

        assert config.database_filename == FileName.DATABASE
        assert config.window_width == ConfigDefaults.WINDOW_WIDTH
        assert config.snackbar_timeout_ms == ConfigDefaults.SNACKBAR_TIMEOUT_MS
