#!/usr/bin/env python3
"""
Sleep Tracker - Package Main Entry Point.

This module provides the entry point for the installed package:
    python -m sleep_tracker
    sleep-tracker (console script)
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from sleep_tracker.app_bootstrap import setup_logging
from sleep_tracker.data.database import SleepDatabase
from sleep_tracker.ui.main_window import SleepTrackerMainWindow
from sleep_tracker.ui.utils.config import ConfigManager
from sleep_tracker.utils.resource_resolver import get_database_path


def main() -> int:
    """
    Main application entry point.

    Returns:
        Exit code (0 for success, non-zero for errors).

    """
    log_file = setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting Sleep Tracker Application")
    if log_file:
        logger.info("Log file location: %s", log_file)

    app = QApplication(sys.argv)

    config_manager = ConfigManager()
    database = SleepDatabase(get_database_path(config_manager.config.database_filename))

    window = SleepTrackerMainWindow(database.sleep_night_repository, config_manager.config)
    window.show()

    exit_code = app.exec()
    config_manager.save_config()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
