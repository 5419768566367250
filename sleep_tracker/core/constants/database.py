"""
Database schema constants for Sleep Tracker Application.

Contains enums for database tables and column names.
"""

from enum import StrEnum


class DatabaseTable(StrEnum):
    """Database table names."""

    DAILY_SLEEP_QUALITY = "daily_sleep_quality_table"


class DatabaseColumn(StrEnum):
    """Database column names."""

    NIGHT_ID = "night_id"
    START_TIME_MILLI = "start_time_milli"
    END_TIME_MILLI = "end_time_milli"
    QUALITY_RATING = "quality_rating"


class FileName(StrEnum):
    """Default file names."""

    DATABASE = "sleep_history_database.db"
    LOG = "sleep_tracker.log"
