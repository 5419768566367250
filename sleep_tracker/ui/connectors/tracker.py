"""
Sleep tracker connectors.

Bind view-model signals to the widgets of the tracker screen. Each
connector renders the current values once on creation, then follows
the signals until ``disconnect()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sleep_tracker.core.constants import ConfigDefaults, StatusMessage

if TYPE_CHECKING:
    from sleep_tracker.ui.protocols import MainWindowProtocol, TrackerScreenProtocol
    from sleep_tracker.ui.sleep_tracker_view_model import SleepTrackerViewModel

logger = logging.getLogger(__name__)


class ButtonVisibilityConnector:
    """Shows start, stop and clear buttons according to the view model."""

    def __init__(self, view_model: SleepTrackerViewModel, screen: TrackerScreenProtocol) -> None:
        self.view_model = view_model
        self.screen = screen

        self._connections = (
            (view_model.start_button_visible_changed, screen.start_button.setVisible),
            (view_model.stop_button_visible_changed, screen.stop_button.setVisible),
            (view_model.clear_button_visible_changed, screen.clear_button.setVisible),
        )
        for signal, slot in self._connections:
            signal.connect(slot)

        # Initial update with current state
        screen.start_button.setVisible(view_model.start_button_visible)
        screen.stop_button.setVisible(view_model.stop_button_visible)
        screen.clear_button.setVisible(view_model.clear_button_visible)

    def disconnect(self) -> None:
        """Cleanup signal connections."""
        for signal, slot in self._connections:
            signal.disconnect(slot)


class NightsTextConnector:
    """Renders the formatted night history into the history view."""

    def __init__(self, view_model: SleepTrackerViewModel, screen: TrackerScreenProtocol) -> None:
        self.view_model = view_model
        self.screen = screen
        view_model.nights_string_changed.connect(self._on_nights_string_changed)
        self._on_nights_string_changed(view_model.nights_string)

    def _on_nights_string_changed(self, text: str) -> None:
        self.screen.nights_text.setHtml(text)

    def disconnect(self) -> None:
        self.view_model.nights_string_changed.disconnect(self._on_nights_string_changed)


class SnackbarConnector:
    """Shows the "data cleared" message once per clear, then acknowledges it."""

    def __init__(
        self,
        view_model: SleepTrackerViewModel,
        screen: TrackerScreenProtocol,
        timeout_ms: int = ConfigDefaults.SNACKBAR_TIMEOUT_MS,
    ) -> None:
        self.view_model = view_model
        self.screen = screen
        self.timeout_ms = timeout_ms
        view_model.show_snackbar_event_changed.connect(self._on_show_snackbar_event)

    def _on_show_snackbar_event(self, show: bool) -> None:
        if not show:
            return
        logger.info("SNACKBAR CONNECTOR: Showing cleared message")
        self.screen.show_snackbar(StatusMessage.CLEARED, self.timeout_ms)
        self.view_model.done_showing_snackbar()

    def disconnect(self) -> None:
        self.view_model.show_snackbar_event_changed.disconnect(self._on_show_snackbar_event)


class ErrorNotificationConnector:
    """
    Connects the error channel to the status bar for user feedback.

    Each error is shown once and then acknowledged.
    """

    def __init__(self, view_model: SleepTrackerViewModel, main_window: MainWindowProtocol) -> None:
        self.view_model = view_model
        self.main_window = main_window
        view_model.error_occurred.connect(self._show_error)

    def _show_error(self, message: str) -> None:
        """Display error message in the status bar."""
        logger.warning("ERROR NOTIFICATION CONNECTOR: Showing error to user: %s", message)
        self.main_window.update_status_bar(f"{StatusMessage.ERROR_PREFIX}{message}")
        self.view_model.done_showing_error()

    def disconnect(self) -> None:
        self.view_model.error_occurred.disconnect(self._show_error)
