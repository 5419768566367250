#!/usr/bin/env python3
"""
Configuration Manager for Sleep Tracker Application
Handles loading and saving of application settings using QSettings.
"""

from __future__ import annotations

import logging
from threading import Lock

from PyQt6.QtCore import QSettings

from sleep_tracker.core.constants import ConfigKey, SettingsScope
from sleep_tracker.core.dataclasses import AppConfig
from sleep_tracker.core.exceptions import ConfigurationError, ErrorCodes

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages application configuration using QSettings."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._lock = Lock()
        self.settings = settings or QSettings(SettingsScope.ORGANIZATION, SettingsScope.APPLICATION)
        self.config = self.load_config()

    def load_config(self) -> AppConfig:
        """Load configuration from QSettings, keeping defaults for missing or invalid values."""
        config = AppConfig.create_default()

        try:
            database_filename = self.settings.value(ConfigKey.DATABASE_FILENAME, "")
            if database_filename:
                config.database_filename = str(database_filename)

            for key in (ConfigKey.WINDOW_WIDTH, ConfigKey.WINDOW_HEIGHT, ConfigKey.SNACKBAR_TIMEOUT_MS):
                # QSettings: only override defaults if key actually exists
                if self.settings.contains(key):
                    setattr(config, key, self._positive_int(key, self.settings.value(key)))

            logger.debug("Loaded configuration from QSettings")
            return config

        except (ConfigurationError, TypeError, ValueError) as e:
            logger.warning("Failed to load configuration from QSettings: %s, using defaults", e)
            return AppConfig.create_default()

    def save_config(self) -> None:
        """Write the current configuration to QSettings."""
        with self._lock:
            for key, value in self.config.to_dict().items():
                self.settings.setValue(key, value)
            self.settings.sync()
        logger.debug("Saved configuration to QSettings")

    @staticmethod
    def _positive_int(key: str, value: object) -> int:
        number = int(value)
        if number <= 0:
            msg = f"{key} must be positive, got {number}"
            raise ConfigurationError(msg, ErrorCodes.CONFIG_INVALID, {"key": key})
        return number
