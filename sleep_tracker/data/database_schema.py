#!/usr/bin/env python3
"""
Database schema management for Sleep Tracker Application.

Owns table creation so that repositories only deal with rows.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sleep_tracker.core.constants import UNRATED_QUALITY, DatabaseColumn, DatabaseTable

if TYPE_CHECKING:
    import sqlite3
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class DatabaseSchemaManager:
    """Creates the tables the application needs."""

    def __init__(
        self,
        validate_table_name: Callable[[str], str],
        validate_column_name: Callable[[str], str],
    ) -> None:
        self._validate_table_name = validate_table_name
        self._validate_column_name = validate_column_name

    def init_all_tables(self, conn: sqlite3.Connection) -> None:
        """Create all tables. Safe to call on an existing database."""
        self._create_daily_sleep_quality_table(conn)

    def _create_daily_sleep_quality_table(self, conn: sqlite3.Connection) -> None:
        table_name = self._validate_table_name(DatabaseTable.DAILY_SLEEP_QUALITY)
        night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)
        start = self._validate_column_name(DatabaseColumn.START_TIME_MILLI)
        end = self._validate_column_name(DatabaseColumn.END_TIME_MILLI)
        quality = self._validate_column_name(DatabaseColumn.QUALITY_RATING)

        conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {table_name} (
                {night_id} INTEGER PRIMARY KEY AUTOINCREMENT,
                {start} INTEGER NOT NULL,
                {end} INTEGER NOT NULL,
                {quality} INTEGER NOT NULL DEFAULT {UNRATED_QUALITY}
            )
        """)
        logger.debug("Ensured table %s exists", table_name)
