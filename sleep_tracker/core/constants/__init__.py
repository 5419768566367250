"""
Constants for Sleep Tracker Application.

The constants are organized into domain-specific modules:
- database: Database schema constants (tables, columns, file names)
- ui: Sleep quality scale, display strings and configuration keys

All constants are re-exported from this __init__.py:

    from sleep_tracker.core.constants import DatabaseColumn, SleepQuality
"""

from .database import DatabaseColumn, DatabaseTable, FileName
from .ui import (
    UNRATED_QUALITY,
    ButtonText,
    ConfigDefaults,
    ConfigKey,
    SettingsScope,
    SleepQuality,
    StatusMessage,
    TimeConstants,
    TimeFormat,
)

__all__ = [
    "UNRATED_QUALITY",
    "ButtonText",
    "ConfigDefaults",
    "ConfigKey",
    "DatabaseColumn",
    "DatabaseTable",
    "FileName",
    "SettingsScope",
    "SleepQuality",
    "StatusMessage",
    "TimeConstants",
    "TimeFormat",
]
