#!/usr/bin/env python3
"""
Unit tests for SleepNightRepository.

Runs against a real temporary SQLite database.
"""

from __future__ import annotations

from sleep_tracker.core.dataclasses import SleepNight
from sleep_tracker.data.repositories import SleepNightRepository

# ============================================================================
# Insert / Get
# ============================================================================


class TestInsert:
    def test_insert_assigns_id(self, repository: SleepNightRepository) -> None:
        """Night id 0 lets the database assign one."""
        first = repository.insert(SleepNight(start_time_milli=1000))
        second = repository.insert(SleepNight(start_time_milli=2000))

        assert first > 0
        assert second > first

    def test_insert_round_trips_fields(self, repository: SleepNightRepository) -> None:
        night_id = repository.insert(SleepNight(start_time_milli=1000, end_time_milli=9000, sleep_quality=3))

        assert repository.get(night_id) == SleepNight(
            night_id=night_id,
            start_time_milli=1000,
            end_time_milli=9000,
            sleep_quality=3,
        )

    def test_insert_with_explicit_id(self, repository: SleepNightRepository) -> None:
        assert repository.insert(SleepNight(night_id=42, start_time_milli=1000)) == 42
        assert repository.get(42) is not None

    def test_get_missing_returns_none(self, repository: SleepNightRepository) -> None:
        assert repository.get(999) is None


# ============================================================================
# Tonight / History
# ============================================================================


class TestQueries:
    def test_get_tonight_empty(self, repository: SleepNightRepository) -> None:
        assert repository.get_tonight() is None

    def test_get_tonight_returns_latest_even_if_closed(self, repository: SleepNightRepository) -> None:
        """The open-night rule is applied by the view model, not the store."""
        repository.insert(SleepNight(start_time_milli=1000))
        latest_id = repository.insert(SleepNight(start_time_milli=500, end_time_milli=800))

        tonight = repository.get_tonight()

        assert tonight is not None
        assert tonight.night_id == latest_id
        assert not tonight.is_open

    def test_get_all_nights_newest_first(self, repository: SleepNightRepository) -> None:
        ids = [repository.insert(SleepNight(start_time_milli=start)) for start in (100, 200, 300)]

        nights = repository.get_all_nights()

        assert [night.night_id for night in nights] == list(reversed(ids))

    def test_get_all_nights_empty(self, repository: SleepNightRepository) -> None:
        assert repository.get_all_nights() == []


# ============================================================================
# Update / Clear
# ============================================================================


class TestMutations:
    def test_update_closes_night(self, repository: SleepNightRepository) -> None:
        night_id = repository.insert(SleepNight(start_time_milli=1000))
        night = repository.get(night_id)
        night.end_time_milli = 5000
        night.sleep_quality = 5

        repository.update(night)

        stored = repository.get(night_id)
        assert stored.end_time_milli == 5000
        assert stored.sleep_quality == 5
        assert not stored.is_open

    def test_update_unknown_night_is_noop(self, repository: SleepNightRepository) -> None:
        repository.update(SleepNight(night_id=77, start_time_milli=1))

        assert repository.get_all_nights() == []

    def test_update_end_time_keeps_rating(self, repository: SleepNightRepository) -> None:
        night_id = repository.insert(SleepNight(start_time_milli=1000))
        repository.update_quality(night_id, 4)

        repository.update_end_time(SleepNight(night_id=night_id, start_time_milli=1000, end_time_milli=9000))

        stored = repository.get(night_id)
        assert stored.end_time_milli == 9000
        assert stored.sleep_quality == 4

    def test_update_quality_keeps_end_time(self, repository: SleepNightRepository) -> None:
        night_id = repository.insert(SleepNight(start_time_milli=1000, end_time_milli=9000))

        assert repository.update_quality(night_id, 2) is True

        stored = repository.get(night_id)
        assert stored.sleep_quality == 2
        assert stored.end_time_milli == 9000

    def test_update_quality_unknown_night(self, repository: SleepNightRepository) -> None:
        assert repository.update_quality(77, 3) is False
        assert repository.get_all_nights() == []

    def test_clear_removes_everything(self, repository: SleepNightRepository) -> None:
        for start in (1, 2, 3):
            repository.insert(SleepNight(start_time_milli=start))

        assert repository.clear() == 3
        assert repository.get_all_nights() == []
        assert repository.get_tonight() is None

    def test_clear_empty_table(self, repository: SleepNightRepository) -> None:
        assert repository.clear() == 0
