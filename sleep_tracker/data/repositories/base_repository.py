"""Base repository class with shared utilities for database operations."""

from __future__ import annotations

import contextlib
import logging
import sqlite3
from contextlib import contextmanager
from typing import TYPE_CHECKING, ClassVar

from sleep_tracker.core.constants import DatabaseColumn, DatabaseTable
from sleep_tracker.core.exceptions import (
    DatabaseError,
    DataIntegrityError,
    ErrorCodes,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Generator
    from pathlib import Path

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base repository class providing shared database utilities."""

    # Pre-validate table and column names to prevent injection
    VALID_TABLES: ClassVar[set[str]] = {
        DatabaseTable.DAILY_SLEEP_QUALITY,
    }
    VALID_COLUMNS: ClassVar[set[str]] = {
        DatabaseColumn.NIGHT_ID,
        DatabaseColumn.START_TIME_MILLI,
        DatabaseColumn.END_TIME_MILLI,
        DatabaseColumn.QUALITY_RATING,
    }

    def __init__(
        self,
        db_path: Path,
        validate_table_name: Callable[[str], str] | None = None,
        validate_column_name: Callable[[str], str] | None = None,
    ) -> None:
        """
        Initialize base repository.

        Args:
            db_path: Path to the SQLite database
            validate_table_name: Callback to validate table names
            validate_column_name: Callback to validate column names

        """
        self.db_path = db_path
        self._validate_table_name = validate_table_name or self.validate_table_name
        self._validate_column_name = validate_column_name or self.validate_column_name

    @classmethod
    def validate_table_name(cls, table_name: str) -> str:
        """Validate table name to prevent SQL injection."""
        if table_name not in cls.VALID_TABLES:
            msg = f"Invalid table name: {table_name}"
            raise ValidationError(msg, ErrorCodes.INVALID_INPUT)
        return table_name

    @classmethod
    def validate_column_name(cls, column_name: str) -> str:
        """Validate column name to prevent SQL injection."""
        if column_name not in cls.VALID_COLUMNS:
            msg = f"Invalid column name: {column_name}"
            raise ValidationError(msg, ErrorCodes.INVALID_INPUT)
        return column_name

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get database connection with proper error handling."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA journal_mode = WAL")
            yield conn
        except sqlite3.OperationalError as e:
            logger.exception("Database operation failed")
            if conn:
                with contextlib.suppress(sqlite3.Error):
                    conn.rollback()
            msg = f"Database operation failed: {e}"
            raise DatabaseError(msg, ErrorCodes.DB_CONNECTION_FAILED) from e
        except sqlite3.IntegrityError as e:
            logger.exception("Database integrity violation")
            if conn:
                with contextlib.suppress(sqlite3.Error):
                    conn.rollback()
            msg = f"Database integrity violation: {e}"
            raise DataIntegrityError(msg, ErrorCodes.DB_INTEGRITY_VIOLATION) from e
        except sqlite3.Error as e:
            logger.exception("Unexpected database error")
            if conn:
                with contextlib.suppress(sqlite3.Error):
                    conn.rollback()
            msg = f"Unexpected database error: {e}"
            raise DatabaseError(msg, ErrorCodes.DB_QUERY_FAILED) from e
        finally:
            if conn:
                with contextlib.suppress(sqlite3.Error):
                    conn.close()
