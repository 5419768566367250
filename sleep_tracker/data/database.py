#!/usr/bin/env python3
"""
Database Manager for Sleep Tracker Application
Creates the SQLite schema and hands out repositories bound to it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sleep_tracker.core.exceptions import DatabaseError, ErrorCodes
from sleep_tracker.data.database_schema import DatabaseSchemaManager
from sleep_tracker.data.repositories import BaseRepository, SleepNightRepository
from sleep_tracker.utils.resource_resolver import get_database_path

logger = logging.getLogger(__name__)


class SleepDatabase(BaseRepository):
    """Owns the database file and the repositories that use it."""

    def __init__(self, db_path: Path | str | None = None) -> None:
        """Initialize the database, creating the schema if needed."""
        resolved = Path(db_path) if db_path else get_database_path()
        resolved.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(resolved)

        self._schema_manager = DatabaseSchemaManager(
            validate_table_name=self._validate_table_name,
            validate_column_name=self._validate_column_name,
        )
        self._init_database()

        self.sleep_night_repository = SleepNightRepository(
            self.db_path,
            validate_table_name=self._validate_table_name,
            validate_column_name=self._validate_column_name,
        )

    def _init_database(self) -> None:
        """Initialize database schema."""
        logger.info("Initializing database schema at %s", self.db_path)

        try:
            with self._get_connection() as conn:
                self._schema_manager.init_all_tables(conn)
                conn.commit()
        except DatabaseError:
            raise
        except Exception as e:
            logger.exception("Failed to initialize database")
            msg = f"Failed to initialize database: {e}"
            raise DatabaseError(msg, ErrorCodes.DB_CONNECTION_FAILED) from e

        logger.info("Database initialized successfully")
