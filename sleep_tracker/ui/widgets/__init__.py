"""Screens of the sleep tracker application."""

from __future__ import annotations

from sleep_tracker.ui.widgets.sleep_quality_widget import SleepQualityWidget
from sleep_tracker.ui.widgets.sleep_tracker_widget import SleepTrackerWidget

__all__ = ["SleepQualityWidget", "SleepTrackerWidget"]
