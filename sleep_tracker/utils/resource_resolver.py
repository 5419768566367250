"""
Resource path resolver for packaged and source environments.

Resolves where the database and log files live so that both a
PyInstaller bundle and a source checkout keep user data in the
platform's application data directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import ClassVar, Self

from sleep_tracker.core.constants import FileName

DATABASE_PATH_ENV = "SLEEP_TRACKER_DB"


class ResourceResolver:
    """Resolves user data paths for both development and executable environments."""

    _instance: ClassVar[ResourceResolver | None] = None
    _is_executable: bool

    def __new__(cls) -> Self:
        """Singleton pattern to ensure consistent path resolution."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._is_executable = getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS")
        return cls._instance

    def get_app_data_directory(self) -> Path:
        """Get platform-specific application data directory."""
        app_name = "SleepTracker"

        if sys.platform == "win32":
            base_dir = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        elif sys.platform == "darwin":
            base_dir = Path.home() / "Library" / "Application Support"
        else:
            base_dir = Path.home() / ".local" / "share"

        return base_dir / app_name

    def get_user_data_path(self, filename: str) -> Path:
        """Get path for a user data file, creating its directory."""
        app_dir = self.get_app_data_directory()
        app_dir.mkdir(parents=True, exist_ok=True)
        return app_dir / filename

    def get_database_path(self, filename: str | None = None) -> Path:
        """
        Get the database file path.

        The ``SLEEP_TRACKER_DB`` environment variable overrides the location.
        """
        override = os.environ.get(DATABASE_PATH_ENV)
        if override:
            return Path(override).expanduser()
        return self.get_user_data_path(filename or FileName.DATABASE)

    def is_executable_environment(self) -> bool:
        """Check if running in a PyInstaller executable environment."""
        return self._is_executable


# Global instance for easy access
resource_resolver = ResourceResolver()


def get_database_path(filename: str | None = None) -> Path:
    """Get the database file path."""
    return resource_resolver.get_database_path(filename)
