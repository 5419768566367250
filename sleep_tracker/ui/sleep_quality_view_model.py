#!/usr/bin/env python3
"""View model for the sleep quality screen shown after a night is stopped."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from sleep_tracker.core.constants import SleepQuality
from sleep_tracker.core.exceptions import ErrorCodes, ValidationError
from sleep_tracker.ui.store import Actions, UIState, UIStore
from sleep_tracker.ui.workers import TaskScope

if TYPE_CHECKING:
    from collections.abc import Callable

    from sleep_tracker.core.dataclasses import SleepNight
    from sleep_tracker.data.repositories import SleepNightRepository

logger = logging.getLogger(__name__)


class SleepQualityViewModel(QObject):
    """
    Records the quality rating of one night.

    After the rating is stored, the history is refreshed and the
    ``navigate_to_sleep_tracker`` event is raised. Failures go to the
    shared error channel in the store.
    """

    navigate_to_sleep_tracker_changed = pyqtSignal(bool)

    def __init__(
        self,
        sleep_night_key: int,
        database: SleepNightRepository,
        store: UIStore,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.sleep_night_key = sleep_night_key
        self.database = database
        self.store = store
        self._scope = TaskScope(self)
        self._unsubscribe: Callable[[], None] | None = self.store.subscribe(self._on_state_change)

    @property
    def navigate_to_sleep_tracker(self) -> bool:
        return self.store.state.navigate_to_sleep_tracker

    @property
    def task_scope(self) -> TaskScope:
        return self._scope

    def on_set_sleep_quality(self, quality: int) -> None:
        """
        Store ``quality`` for the night and navigate back.

        Raises:
            ValidationError: If ``quality`` is not an integer on the 0-5 scale.

        """
        if not isinstance(quality, int) or isinstance(quality, bool):
            msg = f"Sleep quality must be an integer, got {quality!r}"
            raise ValidationError(msg, ErrorCodes.INVALID_INPUT, {"quality": quality})
        if quality not in list(SleepQuality):
            msg = f"Sleep quality must be between {SleepQuality.VERY_BAD} and {SleepQuality.EXCELLENT}, got {quality}"
            raise ValidationError(msg, ErrorCodes.OUT_OF_RANGE, {"quality": quality})

        key = self.sleep_night_key

        def rate_night() -> list[SleepNight]:
            if not self.database.update_quality(key, int(quality)):
                logger.warning("Night %s no longer exists, rating not stored", key)
            return self.database.get_all_nights()

        logger.info("Rating night %s as %s", key, SleepQuality(quality).name)
        self._scope.launch(rate_night, self._on_quality_saved, self._on_error)

    def done_navigating(self) -> None:
        self.store.dispatch_safe(Actions.tracker_navigation_done())

    def on_cleared(self) -> None:
        """Dispose: cancel in-flight work and stop listening to the store."""
        self._scope.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_quality_saved(self, nights: list[SleepNight]) -> None:
        self.store.dispatch_safe(Actions.nights_loaded(nights))
        self.store.dispatch_safe(Actions.sleep_quality_set())

    def _on_error(self, error: Exception) -> None:
        logger.error("Saving sleep quality failed: %s", error)
        self.store.dispatch_safe(Actions.error_occurred(str(error)))

    def _on_state_change(self, old_state: UIState, new_state: UIState) -> None:
        if old_state.navigate_to_sleep_tracker != new_state.navigate_to_sleep_tracker:
            self.navigate_to_sleep_tracker_changed.emit(new_state.navigate_to_sleep_tracker)