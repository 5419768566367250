#!/usr/bin/env python3
"""Sleep tracker screen: start/stop/clear buttons and the night history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QTextBrowser, QVBoxLayout, QWidget

from sleep_tracker.core.constants import ButtonText, ConfigDefaults
from sleep_tracker.ui.connectors import ButtonVisibilityConnector, NightsTextConnector, SnackbarConnector

if TYPE_CHECKING:
    from sleep_tracker.ui.sleep_tracker_view_model import SleepTrackerViewModel

logger = logging.getLogger(__name__)


class SleepTrackerWidget(QWidget):
    """
    View for the sleep tracker view model.

    Buttons forward to the view model actions; connectors keep the
    buttons, the history and the snackbar in sync with its state.
    """

    def __init__(
        self,
        view_model: SleepTrackerViewModel,
        snackbar_timeout_ms: int = ConfigDefaults.SNACKBAR_TIMEOUT_MS,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.view_model = view_model

        self.nights_text = QTextBrowser()
        self.start_button = QPushButton(ButtonText.START)
        self.stop_button = QPushButton(ButtonText.STOP)
        self.clear_button = QPushButton(ButtonText.CLEAR)

        self.snackbar_label = QLabel()
        self.snackbar_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.snackbar_label.setVisible(False)
        self._snackbar_timer = QTimer(self)
        self._snackbar_timer.setSingleShot(True)
        self._snackbar_timer.timeout.connect(self._hide_snackbar)

        buttons = QHBoxLayout()
        buttons.addWidget(self.start_button)
        buttons.addWidget(self.stop_button)

        layout = QVBoxLayout(self)
        layout.addLayout(buttons)
        layout.addWidget(self.nights_text, stretch=1)
        layout.addWidget(self.clear_button)
        layout.addWidget(self.snackbar_label)

        self.start_button.clicked.connect(view_model.on_start_tracking)
        self.stop_button.clicked.connect(view_model.on_stop_tracking)
        self.clear_button.clicked.connect(view_model.on_clear)

        self._connectors = [
            ButtonVisibilityConnector(view_model, self),
            NightsTextConnector(view_model, self),
            SnackbarConnector(view_model, self, snackbar_timeout_ms),
        ]

    def show_snackbar(self, message: str, timeout_ms: int) -> None:
        self.snackbar_label.setText(message)
        self.snackbar_label.setVisible(True)
        self._snackbar_timer.start(timeout_ms)

    def _hide_snackbar(self) -> None:
        self.snackbar_label.setVisible(False)

    def disconnect_connectors(self) -> None:
        """Cleanup all connector subscriptions."""
        for connector in self._connectors:
            connector.disconnect()
        self._connectors.clear()
