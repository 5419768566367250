#!/usr/bin/env python3
"""
Unit tests for BaseRepository and SleepDatabase.

Tests connection management, error translation and name validation.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from sleep_tracker.core.constants import DatabaseColumn, DatabaseTable
from sleep_tracker.core.exceptions import DatabaseError, DataIntegrityError, ErrorCodes, ValidationError
from sleep_tracker.data.database import SleepDatabase
from sleep_tracker.data.repositories import BaseRepository, SleepNightRepository


class TestValidation:
    def test_valid_table_passes(self) -> None:
        assert BaseRepository.validate_table_name(DatabaseTable.DAILY_SLEEP_QUALITY) == DatabaseTable.DAILY_SLEEP_QUALITY

    def test_invalid_table_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            BaseRepository.validate_table_name("nights; DROP TABLE x")

        assert exc_info.value.error_code == ErrorCodes.INVALID_INPUT

    def test_valid_column_passes(self) -> None:
        assert BaseRepository.validate_column_name(DatabaseColumn.NIGHT_ID) == "night_id"

    def test_invalid_column_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BaseRepository.validate_column_name("password")


class TestGetConnection:
    def test_operational_error_becomes_database_error(self, test_db_path: Path) -> None:
        repo = BaseRepository(test_db_path)

        with pytest.raises(DatabaseError) as exc_info:
            with repo._get_connection() as conn:
                conn.execute("SELECT * FROM no_such_table")

        assert exc_info.value.error_code == ErrorCodes.DB_CONNECTION_FAILED

    def test_integrity_error_becomes_data_integrity_error(self, sleep_database: SleepDatabase) -> None:
        repo = sleep_database.sleep_night_repository

        with pytest.raises(DataIntegrityError):
            with repo._get_connection() as conn:
                conn.execute(f"INSERT INTO {DatabaseTable.DAILY_SLEEP_QUALITY} (night_id, start_time_milli) VALUES (1, NULL)")

    def test_rows_are_addressable_by_name(self, sleep_database: SleepDatabase) -> None:
        with sleep_database._get_connection() as conn:
            row = conn.execute("SELECT 1 AS answer").fetchone()

        assert isinstance(row, sqlite3.Row)
        assert row["answer"] == 1


class TestSleepDatabase:
    def test_creates_schema(self, test_db_path: Path) -> None:
        SleepDatabase(test_db_path)

        with sqlite3.connect(test_db_path) as conn:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}

        assert DatabaseTable.DAILY_SLEEP_QUALITY in tables

    def test_init_is_idempotent(self, test_db_path: Path) -> None:
        first = SleepDatabase(test_db_path)
        first.sleep_night_repository.clear()

        second = SleepDatabase(test_db_path)

        assert second.sleep_night_repository.get_all_nights() == []

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        db_path = tmp_path / "nested" / "dir" / "sleep.db"

        SleepDatabase(db_path)

        assert db_path.exists()

    def test_exposes_night_repository(self, sleep_database: SleepDatabase, test_db_path: Path) -> None:
        assert isinstance(sleep_database.sleep_night_repository, SleepNightRepository)
        assert sleep_database.sleep_night_repository.db_path == test_db_path

    def test_env_override_used_without_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        db_path = tmp_path / "from_env.db"
        monkeypatch.setenv("SLEEP_TRACKER_DB", str(db_path))

        database = SleepDatabase()

        assert database.db_path == db_path
        assert db_path.exists()
