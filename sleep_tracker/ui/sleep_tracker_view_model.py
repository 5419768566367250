#!/usr/bin/env python3
"""
View model for the sleep tracker screen.

Mediates between the night repository and the tracker widget. All state
lives in the UIStore; this object turns user actions into background
repository calls plus store actions, and republishes derived values as
Qt signals that fire only when the value actually changes.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from sleep_tracker.core.dataclasses import SleepNight, current_time_millis
from sleep_tracker.ui.store import Actions, Selectors, UIState, UIStore
from sleep_tracker.ui.workers import TaskScope
from sleep_tracker.utils.formatting import DEFAULT_STRINGS, NightStrings

if TYPE_CHECKING:
    from collections.abc import Callable

    from sleep_tracker.data.repositories import SleepNightRepository

logger = logging.getLogger(__name__)


class SleepTrackerViewModel(QObject):
    """
    State holder for the sleep tracker screen.

    Repository calls run on worker threads owned by a TaskScope; store
    updates and signal emission happen on the thread that owns this object.
    Actions are not serialized against each other: if two overlap, their
    results land in completion order.
    """

    tonight_changed = pyqtSignal(object)  # SleepNight | None
    nights_string_changed = pyqtSignal(str)
    start_button_visible_changed = pyqtSignal(bool)
    stop_button_visible_changed = pyqtSignal(bool)
    clear_button_visible_changed = pyqtSignal(bool)
    navigate_to_sleep_quality_changed = pyqtSignal(object)  # SleepNight | None
    show_snackbar_event_changed = pyqtSignal(bool)
    error_occurred = pyqtSignal(str)
    initialized = pyqtSignal()

    def __init__(
        self,
        database: SleepNightRepository,
        resources: NightStrings | None = None,
        store: UIStore | None = None,
        clock: Callable[[], int] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.database = database
        self.resources = resources or DEFAULT_STRINGS
        self.store = store or UIStore()
        self._clock = clock or current_time_millis
        self._scope = TaskScope(self)
        self._unsubscribe: Callable[[], None] | None = self.store.subscribe(self._on_state_change)
        self._is_initialized = False

        self._initialize_tonight()

    # === Derived state ===

    @property
    def tonight(self) -> SleepNight | None:
        return Selectors.tonight(self.store.state)

    @property
    def nights(self) -> tuple[SleepNight, ...]:
        return self.store.state.nights

    @property
    def nights_string(self) -> str:
        return Selectors.nights_string(self.store.state, self.resources)

    @property
    def start_button_visible(self) -> bool:
        return Selectors.start_button_visible(self.store.state)

    @property
    def stop_button_visible(self) -> bool:
        return Selectors.stop_button_visible(self.store.state)

    @property
    def clear_button_visible(self) -> bool:
        return Selectors.clear_button_visible(self.store.state)

    @property
    def navigate_to_sleep_quality(self) -> SleepNight | None:
        return self.store.state.navigate_to_sleep_quality

    @property
    def show_snackbar_event(self) -> bool:
        return self.store.state.show_snackbar_event

    @property
    def last_error_message(self) -> str | None:
        return self.store.state.last_error_message

    @property
    def is_initialized(self) -> bool:
        """True once the first load of tonight has completed."""
        return self._is_initialized

    @property
    def task_scope(self) -> TaskScope:
        return self._scope

    # === Actions ===

    def on_start_tracking(self) -> None:
        """Insert a new open night, then re-read tonight and the history."""
        new_night = SleepNight(start_time_milli=self._clock())

        def insert_night() -> tuple[SleepNight | None, list[SleepNight]]:
            self.database.insert(new_night)
            return self._get_tonight_from_database(), self.database.get_all_nights()

        logger.info("Start tracking at %s", new_night.start_time_milli)
        self._scope.launch(insert_night, self._on_tonight_reloaded, self._on_error)

    def on_stop_tracking(self) -> None:
        """
        Close tonight and request navigation to the quality screen.

        Does nothing when no night is being tracked. Tonight keeps the
        closed night until the next start.
        """
        old_night = self.store.state.tonight
        if old_night is None:
            logger.debug("Stop tracking ignored: no night in progress")
            return

        closed_night = replace(old_night, end_time_milli=max(self._clock(), old_night.start_time_milli))
        self.store.dispatch_safe(Actions.tracking_stopped(closed_night))

        def update_night() -> list[SleepNight]:
            self.database.update_end_time(closed_night)
            return self.database.get_all_nights()

        logger.info("Stop tracking night %s at %s", closed_night.night_id, closed_night.end_time_milli)
        self._scope.launch(update_night, self._on_nights_reloaded, self._on_error)

    def on_clear(self) -> None:
        """Delete every night; then reset tonight and raise the snackbar event."""
        logger.info("Clearing all nights")
        self._scope.launch(self.database.clear, self._on_database_cleared, self._on_error)

    def done_navigating(self) -> None:
        self.store.dispatch_safe(Actions.navigation_done())

    def done_showing_snackbar(self) -> None:
        self.store.dispatch_safe(Actions.snackbar_shown())

    def done_showing_error(self) -> None:
        self.store.dispatch_safe(Actions.error_shown())

    def on_cleared(self) -> None:
        """Dispose: cancel in-flight work and stop listening to the store."""
        self._scope.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        logger.info("Sleep tracker view model cleared")

    # === Background helpers ===

    def _initialize_tonight(self) -> None:
        def load_tonight() -> tuple[SleepNight | None, list[SleepNight]]:
            return self._get_tonight_from_database(), self.database.get_all_nights()

        self._scope.launch(load_tonight, self._on_initialized, self._on_initialize_failed)

    def _get_tonight_from_database(self) -> SleepNight | None:
        """Latest night if it is still open, otherwise None. Runs on a worker thread."""
        night = self.database.get_tonight()
        if night is not None and not night.is_open:
            # This night has already ended
            return None
        return night

    # === Result handlers (UI thread) ===

    def _on_initialized(self, result: tuple[SleepNight | None, list[SleepNight]]) -> None:
        tonight, nights = result
        self.store.dispatch_safe(Actions.state_initialized(tonight, nights))
        self._is_initialized = True
        self.initialized.emit()

    def _on_initialize_failed(self, error: Exception) -> None:
        self._on_error(error)
        self._is_initialized = True
        self.initialized.emit()

    def _on_tonight_reloaded(self, result: tuple[SleepNight | None, list[SleepNight]]) -> None:
        tonight, nights = result
        self.store.dispatch_safe(Actions.tonight_loaded(tonight, nights))

    def _on_nights_reloaded(self, nights: list[SleepNight]) -> None:
        self.store.dispatch_safe(Actions.nights_loaded(nights))

    def _on_database_cleared(self, deleted: int) -> None:
        logger.info("Cleared %d nights", deleted)
        self.store.dispatch_safe(Actions.nights_cleared())

    def _on_error(self, error: Exception) -> None:
        logger.error("Sleep tracker operation failed: %s", error)
        self.store.dispatch_safe(Actions.error_occurred(str(error)))

    # === Store subscription ===

    def _on_state_change(self, old_state: UIState, new_state: UIState) -> None:
        """Emit a signal for every derived value that changed."""
        if old_state.tonight != new_state.tonight:
            self.tonight_changed.emit(new_state.tonight)

        if old_state.nights != new_state.nights:
            self.nights_string_changed.emit(Selectors.nights_string(new_state, self.resources))

        visibility = (
            (Selectors.start_button_visible, self.start_button_visible_changed),
            (Selectors.stop_button_visible, self.stop_button_visible_changed),
            (Selectors.clear_button_visible, self.clear_button_visible_changed),
        )
        for selector, signal in visibility:
            new_value = selector(new_state)
            if selector(old_state) != new_value:
                signal.emit(new_value)

        if old_state.navigate_to_sleep_quality != new_state.navigate_to_sleep_quality:
            self.navigate_to_sleep_quality_changed.emit(new_state.navigate_to_sleep_quality)

        if old_state.show_snackbar_event != new_state.show_snackbar_event:
            self.show_snackbar_event_changed.emit(new_state.show_snackbar_event)

        if new_state.last_error_message and new_state.last_error_time != old_state.last_error_time:
            self.error_occurred.emit(new_state.last_error_message)
