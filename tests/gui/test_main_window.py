"""End-to-end GUI tests for the main window navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from sleep_tracker.core.constants import SleepQuality, StatusMessage
from sleep_tracker.core.dataclasses import AppConfig
from sleep_tracker.core.exceptions import DatabaseError, ErrorCodes
from sleep_tracker.data.repositories import SleepNightRepository
from sleep_tracker.ui.main_window import SleepTrackerMainWindow

if TYPE_CHECKING:
    from pytestqt.qtbot import QtBot

pytestmark = pytest.mark.gui


def open_window(qtbot: QtBot, repository, store=None) -> SleepTrackerMainWindow:
    window = SleepTrackerMainWindow(repository, AppConfig.create_default(), store=store)
    qtbot.addWidget(window)
    qtbot.waitUntil(lambda: window.tracker_view_model.is_initialized, timeout=3000)
    return window


@pytest.fixture
def window(qtbot: QtBot, repository, store):
    main_window = open_window(qtbot, repository, store)
    yield main_window
    if main_window.quality_view_model is not None:
        main_window.quality_view_model.task_scope.wait_for_idle()
    main_window.tracker_view_model.on_cleared()
    main_window.tracker_view_model.task_scope.wait_for_idle()


class TestNavigation:
    def test_starts_on_tracker_screen(self, window: SleepTrackerMainWindow) -> None:
        assert window.stack.currentWidget() is window.tracker_widget
        assert window.windowTitle() == "Track My Sleep Quality"

    def test_rate_a_night(self, qtbot: QtBot, window: SleepTrackerMainWindow, repository) -> None:
        window.tracker_widget.start_button.click()
        qtbot.waitUntil(lambda: window.tracker_view_model.tonight is not None, timeout=3000)
        night_id = window.tracker_view_model.tonight.night_id
        qtbot.wait(20)

        window.tracker_widget.stop_button.click()
        qtbot.waitUntil(lambda: window.tracker_view_model.task_scope.active_count == 0, timeout=3000)

        assert window.stack.currentWidget() is window.quality_widget
        assert window.quality_view_model.sleep_night_key == night_id
        qtbot.waitUntil(lambda: window.store.state.navigate_to_sleep_quality is None, timeout=1000)

        window.quality_widget.quality_buttons[SleepQuality.EXCELLENT].click()

        qtbot.waitUntil(lambda: window.stack.currentWidget() is window.tracker_widget, timeout=3000)
        qtbot.waitUntil(lambda: window.tracker_view_model.is_initialized, timeout=3000)
        assert repository.get(night_id).sleep_quality == SleepQuality.EXCELLENT
        assert not window.tracker_widget.start_button.isHidden()
        assert window.tracker_widget.stop_button.isHidden()
        assert "Excellent!" in window.tracker_widget.nights_text.toPlainText()
        qtbot.waitUntil(lambda: window.store.state.navigate_to_sleep_tracker is False, timeout=1000)


class TestErrorFeedback:
    def test_failure_shown_in_status_bar(self, qtbot: QtBot, store) -> None:
        database = MagicMock(spec=SleepNightRepository)
        database.get_tonight.return_value = None
        database.get_all_nights.return_value = []
        database.insert.side_effect = DatabaseError("disk full", ErrorCodes.DB_INSERT_FAILED)
        window = open_window(qtbot, database, store)
        try:
            window.tracker_widget.start_button.click()

            qtbot.waitUntil(lambda: window.statusBar().currentMessage() != "", timeout=3000)
            assert window.statusBar().currentMessage().startswith(StatusMessage.ERROR_PREFIX)
            assert "disk full" in window.statusBar().currentMessage()
            qtbot.waitUntil(lambda: store.state.last_error_message is None, timeout=1000)
        finally:
            window.tracker_view_model.on_cleared()
            window.tracker_view_model.task_scope.wait_for_idle()


class TestClose:
    def test_close_disposes_and_records_size(self, qtbot: QtBot, repository, store) -> None:
        window = open_window(qtbot, repository, store)
        window.resize(500, 700)
        view_model = window.tracker_view_model

        window.close()

        assert view_model.task_scope.is_cancelled
        assert (window.config.window_width, window.config.window_height) == (window.width(), window.height())
