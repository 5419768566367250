"""Repository for night records: the store behind the sleep tracker screen."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sleep_tracker.core.constants import DatabaseColumn, DatabaseTable
from sleep_tracker.core.dataclasses import SleepNight
from sleep_tracker.core.exceptions import DatabaseError, ErrorCodes
from sleep_tracker.data.repositories.base_repository import BaseRepository

if TYPE_CHECKING:
    import sqlite3

logger = logging.getLogger(__name__)


class SleepNightRepository(BaseRepository):
    """
    CRUD access to the nightly sleep table.

    Every method opens its own connection, so instances can be shared
    between the UI thread and worker threads.
    """

    @property
    def _table(self) -> str:
        return self._validate_table_name(DatabaseTable.DAILY_SLEEP_QUALITY)

    @property
    def _columns(self) -> str:
        return ", ".join(
            self._validate_column_name(column)
            for column in (
                DatabaseColumn.NIGHT_ID,
                DatabaseColumn.START_TIME_MILLI,
                DatabaseColumn.END_TIME_MILLI,
                DatabaseColumn.QUALITY_RATING,
            )
        )

    def insert(self, night: SleepNight) -> int:
        """
        Insert a night and return the id the database assigned.

        A ``night_id`` of 0 lets the database pick the id.
        """
        start = self._validate_column_name(DatabaseColumn.START_TIME_MILLI)
        end = self._validate_column_name(DatabaseColumn.END_TIME_MILLI)
        quality = self._validate_column_name(DatabaseColumn.QUALITY_RATING)

        with self._get_connection() as conn:
            if night.night_id:
                night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)
                cursor = conn.execute(
                    f"INSERT INTO {self._table} ({night_id}, {start}, {end}, {quality}) VALUES (?, ?, ?, ?)",
                    (night.night_id, night.start_time_milli, night.end_time_milli, night.sleep_quality),
                )
            else:
                cursor = conn.execute(
                    f"INSERT INTO {self._table} ({start}, {end}, {quality}) VALUES (?, ?, ?)",
                    (night.start_time_milli, night.end_time_milli, night.sleep_quality),
                )
            conn.commit()
            new_id = cursor.lastrowid

        if new_id is None:
            msg = "Insert did not return a row id"
            raise DatabaseError(msg, ErrorCodes.DB_INSERT_FAILED)

        logger.info("Inserted night %s", new_id)
        return new_id

    def update(self, night: SleepNight) -> None:
        """Write all fields of ``night`` to the row with the same id."""
        night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)
        start = self._validate_column_name(DatabaseColumn.START_TIME_MILLI)
        end = self._validate_column_name(DatabaseColumn.END_TIME_MILLI)
        quality = self._validate_column_name(DatabaseColumn.QUALITY_RATING)

        with self._get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE {self._table} SET {start} = ?, {end} = ?, {quality} = ? WHERE {night_id} = ?",
                (night.start_time_milli, night.end_time_milli, night.sleep_quality, night.night_id),
            )
            conn.commit()

        if cursor.rowcount == 0:
            logger.warning("Update matched no night with id %s", night.night_id)
        else:
            logger.info("Updated night %s", night.night_id)

    def update_end_time(self, night: SleepNight) -> None:
        """Write only the end time of ``night``; other columns keep their stored values."""
        night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)
        end = self._validate_column_name(DatabaseColumn.END_TIME_MILLI)

        with self._get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE {self._table} SET {end} = ? WHERE {night_id} = ?",
                (night.end_time_milli, night.night_id),
            )
            conn.commit()

        if cursor.rowcount == 0:
            logger.warning("End time update matched no night with id %s", night.night_id)

    def update_quality(self, key: int, quality: int) -> bool:
        """Write only the quality rating. Returns False when no night has that id."""
        night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)
        rating = self._validate_column_name(DatabaseColumn.QUALITY_RATING)

        with self._get_connection() as conn:
            cursor = conn.execute(
                f"UPDATE {self._table} SET {rating} = ? WHERE {night_id} = ?",
                (quality, key),
            )
            conn.commit()

        return cursor.rowcount > 0

    def get(self, key: int) -> SleepNight | None:
        """Load a single night by id."""
        night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)

        with self._get_connection() as conn:
            row = conn.execute(
                f"SELECT {self._columns} FROM {self._table} WHERE {night_id} = ?",
                (key,),
            ).fetchone()

        return self._row_to_night(row) if row else None

    def get_tonight(self) -> SleepNight | None:
        """Load the most recently inserted night, open or not."""
        night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)

        with self._get_connection() as conn:
            row = conn.execute(
                f"SELECT {self._columns} FROM {self._table} ORDER BY {night_id} DESC LIMIT 1",
            ).fetchone()

        return self._row_to_night(row) if row else None

    def get_all_nights(self) -> list[SleepNight]:
        """Load every night, newest first."""
        night_id = self._validate_column_name(DatabaseColumn.NIGHT_ID)

        with self._get_connection() as conn:
            rows = conn.execute(
                f"SELECT {self._columns} FROM {self._table} ORDER BY {night_id} DESC",
            ).fetchall()

        return [self._row_to_night(row) for row in rows]

    def clear(self) -> int:
        """Delete every night. Returns the number of rows removed."""
        with self._get_connection() as conn:
            cursor = conn.execute(f"DELETE FROM {self._table}")
            conn.commit()

        logger.info("Cleared %d nights", cursor.rowcount)
        return cursor.rowcount

    def _row_to_night(self, row: sqlite3.Row) -> SleepNight:
        return SleepNight.from_dict({key: row[key] for key in row.keys()})
