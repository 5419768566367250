"""
UI-related constants for Sleep Tracker Application.

Contains enums and constants for the sleep quality scale, display
strings and configuration defaults.
"""

from enum import IntEnum, StrEnum


class SleepQuality(IntEnum):
    """Sleep quality ratings a user can assign to a finished night."""

    VERY_BAD = 0
    POOR = 1
    SO_SO = 2
    OK = 3
    PRETTY_GOOD = 4
    EXCELLENT = 5


UNRATED_QUALITY = -1


class TimeFormat(StrEnum):
    """Time format strings."""

    NIGHT_START = "%A %b-%d-%Y Time: %H:%M"
    EMPTY_VALUE = "--"


class TimeConstants:
    """Time-related constants."""

    MILLIS_PER_SECOND = 1000
    SECONDS_PER_MINUTE = 60
    SECONDS_PER_HOUR = 3600


class ButtonText(StrEnum):
    """Button labels."""

    START = "Start"
    STOP = "Stop"
    CLEAR = "Clear"


class StatusMessage(StrEnum):
    """Transient status messages shown to the user."""

    CLEARED = "All your data is gone forever."
    ERROR_PREFIX = "Error: "


class ConfigKey(StrEnum):
    """QSettings keys."""

    DATABASE_FILENAME = "database_filename"
    WINDOW_WIDTH = "window_width"
    WINDOW_HEIGHT = "window_height"
    SNACKBAR_TIMEOUT_MS = "snackbar_timeout_ms"


class ConfigDefaults:
    """Configuration default values."""

    WINDOW_WIDTH = 480
    WINDOW_HEIGHT = 640
    SNACKBAR_TIMEOUT_MS = 3000


class SettingsScope(StrEnum):
    """QSettings organization and application names."""

    ORGANIZATION = "SleepTracker"
    APPLICATION = "SleepTrackerApp"
