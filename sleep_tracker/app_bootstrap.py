#!/usr/bin/env python3
"""
Application bootstrap utilities.

Provides shared, UI-agnostic setup for logging.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from sleep_tracker.core.constants import FileName

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING) -> Path | None:
    """
    Set up logging with proper path handling for app bundles.

    Returns:
        Path to log file, or None if using default stderr.

    """
    log_file: Path | None = None

    if getattr(sys, "frozen", False):
        bundle_dir = Path(sys.executable).parent
        if sys.platform.startswith("darwin"):
            log_dir = Path.home() / "Library" / "Logs" / "SleepTracker"
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / FileName.LOG
        else:
            log_file = bundle_dir / FileName.LOG

        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=[logging.FileHandler(log_file), logging.StreamHandler()],
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    return log_file
