#!/usr/bin/env python
"""
Module entry point for the sleep tracker application.

This allows the application to be run as:
    python -m sleep_tracker
or via the installed console script:
    sleep-tracker
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the module."""
    try:
        from sleep_tracker.main import main as app_main

        logger.info("Starting Sleep Tracker Application via module entry point")
        return app_main()
    except ImportError as e:
        logger.exception(f"Failed to import application: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error during application startup")
        return 1


if __name__ == "__main__":
    sys.exit(main())
