#!/usr/bin/env python3
"""
Main window for the sleep tracker.

Hosts the tracker and quality screens in a stacked widget and handles
navigation between them from the view models' one-shot events. The
tracker screen is rebuilt on every return from the quality screen, so
its view model starts over from what the database holds.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from PyQt6.QtWidgets import QMainWindow, QStackedWidget

from sleep_tracker.ui.connectors import ErrorNotificationConnector
from sleep_tracker.ui.sleep_quality_view_model import SleepQualityViewModel
from sleep_tracker.ui.sleep_tracker_view_model import SleepTrackerViewModel
from sleep_tracker.ui.store import UIStore, logging_middleware
from sleep_tracker.ui.widgets import SleepQualityWidget, SleepTrackerWidget
from sleep_tracker.utils.formatting import DEFAULT_STRINGS

if TYPE_CHECKING:
    from PyQt6.QtGui import QCloseEvent

    from sleep_tracker.core.dataclasses import AppConfig, SleepNight
    from sleep_tracker.data.repositories import SleepNightRepository
    from sleep_tracker.utils.formatting import NightStrings

logger = logging.getLogger(__name__)


class SleepTrackerMainWindow(QMainWindow):
    """Top-level window owning the store and the view models."""

    def __init__(
        self,
        repository: SleepNightRepository,
        config: AppConfig,
        resources: NightStrings | None = None,
        store: UIStore | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Track My Sleep Quality")
        self.resize(config.window_width, config.window_height)

        self.repository = repository
        self.config = config
        self.resources = resources or DEFAULT_STRINGS
        if store is None:
            store = UIStore()
            store.add_middleware(logging_middleware)
        self.store = store

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.quality_view_model: SleepQualityViewModel | None = None
        # Disposed view models whose cancelled threads are still finishing
        self._retired: list[SleepTrackerViewModel | SleepQualityViewModel] = []
        self.quality_widget = SleepQualityWidget(self.resources)
        self.stack.addWidget(self.quality_widget)

        self._create_tracker_screen()

    def update_status_bar(self, message: str) -> None:
        self.statusBar().showMessage(message, self.config.snackbar_timeout_ms)

    # === Screens ===

    def _create_tracker_screen(self) -> None:
        self.tracker_view_model = SleepTrackerViewModel(self.repository, resources=self.resources, store=self.store)
        self.tracker_widget = SleepTrackerWidget(self.tracker_view_model, self.config.snackbar_timeout_ms)
        self.tracker_view_model.navigate_to_sleep_quality_changed.connect(self._on_navigate_to_sleep_quality)
        self._error_connector = ErrorNotificationConnector(self.tracker_view_model, self)

        self.stack.insertWidget(0, self.tracker_widget)
        self.stack.setCurrentWidget(self.tracker_widget)

    def _dispose_tracker_screen(self) -> None:
        if self.tracker_view_model.task_scope.is_cancelled:  # already disposed
            return
        self._error_connector.disconnect()
        self.tracker_widget.disconnect_connectors()
        self.tracker_view_model.navigate_to_sleep_quality_changed.disconnect(self._on_navigate_to_sleep_quality)
        self.tracker_view_model.on_cleared()
        self._retire(self.tracker_view_model)

        self.stack.removeWidget(self.tracker_widget)
        self.tracker_widget.deleteLater()

    def _dispose_quality_view_model(self) -> None:
        if self.quality_view_model is None:
            return
        self.quality_view_model.navigate_to_sleep_tracker_changed.disconnect(self._on_navigate_to_sleep_tracker)
        self.quality_view_model.on_cleared()
        self._retire(self.quality_view_model)
        self.quality_view_model = None
        self.quality_widget.set_view_model(None)

    def _retire(self, view_model: SleepTrackerViewModel | SleepQualityViewModel) -> None:
        if view_model.task_scope.active_count == 0:
            return
        self._retired.append(view_model)
        view_model.task_scope.idle.connect(partial(self._release, view_model))

    def _release(self, view_model: SleepTrackerViewModel | SleepQualityViewModel) -> None:
        if view_model in self._retired:
            self._retired.remove(view_model)

    # === Navigation ===

    def _on_navigate_to_sleep_quality(self, night: SleepNight | None) -> None:
        if night is None:
            return

        logger.info("Navigating to sleep quality for night %s", night.night_id)
        self._dispose_quality_view_model()
        self.quality_view_model = SleepQualityViewModel(night.night_id, self.repository, self.store)
        self.quality_view_model.navigate_to_sleep_tracker_changed.connect(self._on_navigate_to_sleep_tracker)
        self.quality_widget.set_view_model(self.quality_view_model)
        self.stack.setCurrentWidget(self.quality_widget)
        self.tracker_view_model.done_navigating()

    def _on_navigate_to_sleep_tracker(self, navigate: bool) -> None:
        if not navigate:
            return

        logger.info("Navigating back to sleep tracker")
        if self.quality_view_model is not None:
            self.quality_view_model.done_navigating()
        self._dispose_tracker_screen()
        self._create_tracker_screen()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Cancel background work and release subscriptions before closing."""
        self._dispose_tracker_screen()
        self._dispose_quality_view_model()
        for view_model in self._retired[:]:
            view_model.task_scope.wait_for_idle()
        self.config.window_width = self.width()
        self.config.window_height = self.height()
        super().closeEvent(event)
