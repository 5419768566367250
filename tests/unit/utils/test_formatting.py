#!/usr/bin/env python3
"""Tests for night history formatting."""

from __future__ import annotations

from datetime import datetime

import pytest

from sleep_tracker.core.dataclasses import SleepNight
from sleep_tracker.utils.formatting import (
    DEFAULT_STRINGS,
    NightStrings,
    convert_long_to_date_string,
    convert_numeric_quality_to_string,
    format_duration,
    format_nights,
)

START = 1_700_000_000_000
HOUR = 3_600_000


class TestQualityNames:
    @pytest.mark.parametrize(
        ("quality", "expected"),
        [(0, "Very bad"), (1, "Poor"), (2, "So-so"), (3, "OK"), (4, "Pretty good"), (5, "Excellent!")],
    )
    def test_known_ratings(self, quality: int, expected: str) -> None:
        assert convert_numeric_quality_to_string(quality) == expected

    @pytest.mark.parametrize("quality", [-1, 6, 100])
    def test_unknown_rating_is_placeholder(self, quality: int) -> None:
        assert convert_numeric_quality_to_string(quality) == "--"

    def test_custom_resources(self) -> None:
        strings = NightStrings(quality_names=("0", "1", "2", "3", "4", "5"), empty_value="n/a")

        assert convert_numeric_quality_to_string(4, strings) == "4"
        assert convert_numeric_quality_to_string(-1, strings) == "n/a"


class TestDates:
    def test_uses_local_time_and_pattern(self) -> None:
        expected = datetime.fromtimestamp(START / 1000).strftime("%A %b-%d-%Y Time: %H:%M")

        assert convert_long_to_date_string(START) == expected
        assert " Time: " in expected

    @pytest.mark.parametrize(
        ("millis", "expected"),
        [(0, "0:00:00"), (59_999, "0:00:59"), (61_000, "0:01:01"), (8 * HOUR + 5 * 60_000 + 3_000, "8:05:03"), (-5, "0:00:00")],
    )
    def test_format_duration(self, millis: int, expected: str) -> None:
        assert format_duration(millis) == expected


class TestFormatNights:
    def test_empty_history_is_title_only(self) -> None:
        assert format_nights([]) == DEFAULT_STRINGS.title

    def test_open_night_shows_start_only(self) -> None:
        text = format_nights([SleepNight(night_id=1, start_time_milli=START)])

        assert DEFAULT_STRINGS.start_time in text
        assert DEFAULT_STRINGS.end_time not in text
        assert DEFAULT_STRINGS.quality not in text

    def test_closed_night_shows_all_fields(self) -> None:
        night = SleepNight(night_id=1, start_time_milli=START, end_time_milli=START + 7 * HOUR, sleep_quality=4)

        text = format_nights([night])

        assert convert_long_to_date_string(night.end_time_milli) in text
        assert "Pretty good" in text
        assert "7:00:00" in text

    def test_keeps_given_order(self) -> None:
        newer = SleepNight(night_id=2, start_time_milli=START + 24 * HOUR, end_time_milli=START + 30 * HOUR, sleep_quality=5)
        older = SleepNight(night_id=1, start_time_milli=START, end_time_milli=START + HOUR, sleep_quality=0)

        text = format_nights([newer, older])

        assert text.index("Excellent!") < text.index("Very bad")

    def test_lines_are_html_breaks(self) -> None:
        text = format_nights([SleepNight(start_time_milli=START)])

        assert text.startswith(DEFAULT_STRINGS.title + "<br>")
        assert "\n" not in text
