"""
Redux/Vuex-style State Management for Sleep Tracker App.

This module implements a unidirectional data flow pattern:
    Action -> Dispatch -> Reducer -> New State -> Notify Subscribers

Usage:
    # Create store (typically owned by the main window)
    store = UIStore()

    # Components subscribe to state changes
    store.subscribe(my_callback)

    # Dispatch actions to change state
    store.dispatch(Actions.tonight_loaded(night))
    store.dispatch(Actions.snackbar_shown())

    # Components react to state changes in their callbacks
    def my_callback(old_state: UIState, new_state: UIState):
        if old_state.tonight != new_state.tonight:
            self._refresh_buttons(new_state.tonight)

One-shot events (navigation, snackbar) live in state as well. The UI
acknowledges them with a dedicated action that resets them, so they are
delivered once even if a screen is rebuilt.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Any

from sleep_tracker.core.dataclasses import SleepNight
from sleep_tracker.utils.formatting import DEFAULT_STRINGS, NightStrings, format_nights

logger = logging.getLogger(__name__)


# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class UIState:
    """
    Immutable UI state container - Single source of truth for all application state.

    State can only be changed by dispatching actions to the store.
    Components subscribe to state changes and react accordingly.

    State is organized into logical sections:
    - Tracking: the open night and the ordered night history
    - One-shot events: navigation requests and the cleared snackbar
    - Error channel: last background failure, for user feedback
    """

    # === Tracking State ===
    tonight: SleepNight | None = None
    nights: tuple[SleepNight, ...] = ()  # Newest first, as returned by the store

    # === One-shot Events (reset by the UI after consuming them) ===
    navigate_to_sleep_quality: SleepNight | None = None
    show_snackbar_event: bool = False
    navigate_to_sleep_tracker: bool = False

    # === Error Channel ===
    last_error_message: str | None = None
    last_error_time: float = 0.0


# =============================================================================
# Actions
# =============================================================================


class ActionType(StrEnum):
    """All possible action types."""

    # Initialization
    STATE_INITIALIZED = auto()

    # Tracking
    TONIGHT_LOADED = auto()
    NIGHTS_LOADED = auto()
    TRACKING_STOPPED = auto()
    NIGHTS_CLEARED = auto()
    SLEEP_QUALITY_SET = auto()

    # One-shot acknowledgments
    NAVIGATION_DONE = auto()
    SNACKBAR_SHOWN = auto()
    TRACKER_NAVIGATION_DONE = auto()

    # Errors
    ERROR_OCCURRED = auto()
    ERROR_SHOWN = auto()


@dataclass(frozen=True)
class Action:
    """
    Represents an action that can change state.

    Actions are immutable and describe what happened, not how to update state.
    """

    type: ActionType
    payload: dict[str, Any] | None = None


class Actions:
    """
    Action creators - factory methods for creating actions.

    Usage:
        store.dispatch(Actions.tonight_loaded(night))
    """

    @staticmethod
    def state_initialized(tonight: SleepNight | None, nights: list[SleepNight]) -> Action:
        """Create action for the first load of tonight and the history."""
        return Action(
            type=ActionType.STATE_INITIALIZED,
            payload={"tonight": tonight, "nights": nights},
        )

    @staticmethod
    def tonight_loaded(tonight: SleepNight | None, nights: list[SleepNight] | None = None) -> Action:
        """
        Create action for when the open night has been (re)read from the store.

        Args:
            tonight: The open night, or None when the latest night is closed.
            nights: Fresh history read in the same operation, if any.

        """
        payload: dict[str, Any] = {"tonight": tonight}
        if nights is not None:
            payload["nights"] = nights
        return Action(
            type=ActionType.TONIGHT_LOADED,
            payload=payload,
        )

    @staticmethod
    def nights_loaded(nights: list[SleepNight]) -> Action:
        """Create action for when the night history has been read from the store."""
        return Action(
            type=ActionType.NIGHTS_LOADED,
            payload={"nights": nights},
        )

    @staticmethod
    def tracking_stopped(night: SleepNight) -> Action:
        """
        Create action for when the open night was closed.

        Args:
            night: The closed night. It stays as ``tonight`` and is
                published through ``navigate_to_sleep_quality``.

        """
        return Action(
            type=ActionType.TRACKING_STOPPED,
            payload={"night": night},
        )

    @staticmethod
    def nights_cleared() -> Action:
        """Create action for when every night was deleted from the store."""
        return Action(type=ActionType.NIGHTS_CLEARED)

    @staticmethod
    def sleep_quality_set() -> Action:
        """Create action for when a night was rated; requests navigation back."""
        return Action(type=ActionType.SLEEP_QUALITY_SET)

    @staticmethod
    def navigation_done() -> Action:
        return Action(type=ActionType.NAVIGATION_DONE)

    @staticmethod
    def snackbar_shown() -> Action:
        return Action(type=ActionType.SNACKBAR_SHOWN)

    @staticmethod
    def tracker_navigation_done() -> Action:
        return Action(type=ActionType.TRACKER_NAVIGATION_DONE)

    @staticmethod
    def error_occurred(message: str) -> Action:
        """Create action for a failed background operation."""
        return Action(
            type=ActionType.ERROR_OCCURRED,
            payload={"message": message, "time": time.time()},
        )

    @staticmethod
    def error_shown() -> Action:
        return Action(type=ActionType.ERROR_SHOWN)


# =============================================================================
# Reducer
# =============================================================================


def ui_reducer(state: UIState, action: Action) -> UIState:
    """
    Pure function that takes current state and action, returns new state.

    This is the ONLY place where state changes are defined.
    """
    payload = action.payload or {}

    match action.type:
        case ActionType.STATE_INITIALIZED:
            return replace(
                state,
                tonight=payload.get("tonight"),
                nights=tuple(payload.get("nights", ())),
            )

        case ActionType.TONIGHT_LOADED:
            if "nights" in payload:
                return replace(state, tonight=payload.get("tonight"), nights=tuple(payload["nights"]))
            return replace(state, tonight=payload.get("tonight"))

        case ActionType.NIGHTS_LOADED:
            return replace(state, nights=tuple(payload.get("nights", ())))

        case ActionType.TRACKING_STOPPED:
            night = payload["night"]
            return replace(state, tonight=night, navigate_to_sleep_quality=night)

        case ActionType.NIGHTS_CLEARED:
            return replace(
                state,
                tonight=None,
                nights=(),
                show_snackbar_event=True,
            )

        case ActionType.SLEEP_QUALITY_SET:
            return replace(state, navigate_to_sleep_tracker=True)

        case ActionType.NAVIGATION_DONE:
            return replace(state, navigate_to_sleep_quality=None)

        case ActionType.SNACKBAR_SHOWN:
            return replace(state, show_snackbar_event=False)

        case ActionType.TRACKER_NAVIGATION_DONE:
            return replace(state, navigate_to_sleep_tracker=False)

        case ActionType.ERROR_OCCURRED:
            return replace(
                state,
                last_error_message=payload.get("message"),
                last_error_time=payload.get("time", time.time()),
            )

        case ActionType.ERROR_SHOWN:
            return replace(state, last_error_message=None)

        case _:
            logger.warning("Unknown action type: %s", action.type)
            return state


# =============================================================================
# Selectors
# =============================================================================


class Selectors:
    """
    Selector functions to derive computed state.

    Selectors provide a clean API for accessing state and can compute derived values.
    Use these instead of directly accessing state fields.
    """

    @staticmethod
    def tonight(state: UIState) -> SleepNight | None:
        return state.tonight

    @staticmethod
    def nights_string(state: UIState, resources: NightStrings = DEFAULT_STRINGS) -> str:
        """Formatted night history for the history view."""
        return format_nights(state.nights, resources)

    @staticmethod
    def start_button_visible(state: UIState) -> bool:
        """Start is offered only when no night is being tracked."""
        return state.tonight is None

    @staticmethod
    def stop_button_visible(state: UIState) -> bool:
        """Stop is offered only while a night is being tracked."""
        return state.tonight is not None

    @staticmethod
    def clear_button_visible(state: UIState) -> bool:
        """Clear is offered only when there is history to clear."""
        return len(state.nights) > 0


# =============================================================================
# Store
# =============================================================================

StateChangeCallback = Callable[[UIState, UIState], None]
UnsubscribeFunction = Callable[[], None]


class UIStore:
    """
    Central store that holds state and manages subscriptions.

    The store:
    - Holds the single source of truth for UI state
    - Dispatches actions through the reducer
    - Notifies subscribers when state changes
    - Supports middleware for logging, side effects, etc.
    """

    def __init__(self, initial_state: UIState | None = None) -> None:
        """
        Initialize the store.

        Args:
            initial_state: Optional initial state, defaults to UIState()

        """
        self._state = initial_state or UIState()
        self._subscribers: list[StateChangeCallback] = []
        self._middleware: list[Callable[[Action], Action | None]] = []
        self._is_dispatching = False

        logger.info("UIStore initialized with state: %s", self._state)

    @property
    def state(self) -> UIState:
        """Get current state (read-only)."""
        return self._state

    def dispatch(self, action: Action) -> None:
        """Dispatch an action to change state."""
        if self._is_dispatching:
            msg = f"Cannot dispatch {action.type} while a dispatch is in progress."
            raise RuntimeError(msg)

        try:
            self._is_dispatching = True
            logger.info("ACTION DISPATCHED: %s | Payload: %s", action.type, action.payload)

            # Run middleware
            processed_action: Action | None = action
            for middleware in self._middleware:
                if processed_action is None:
                    return
                processed_action = middleware(processed_action)

            if processed_action is None:
                return

            old_state = self._state
            new_state = ui_reducer(old_state, processed_action)

            # Only notify if state actually changed
            if old_state != new_state:
                diff = self._get_state_diff(old_state, new_state)
                self._state = new_state
                logger.info("STATE CHANGED: %s | Diff: %s", processed_action.type, diff)
                self._notify_subscribers(old_state, new_state)
            else:
                logger.debug("STATE UNCHANGED: %s", processed_action.type)

        finally:
            self._is_dispatching = False

    def dispatch_async(self, action: Action) -> None:
        """
        Dispatch an action asynchronously on the next event loop iteration.
        Useful for dispatching from within subscriber callbacks.
        """
        logger.debug("ASYNC DISPATCH QUEUED: %s", action.type)
        from PyQt6.QtCore import QTimer

        QTimer.singleShot(0, lambda: self.dispatch(action))

    @property
    def is_dispatching(self) -> bool:
        """Check if a dispatch is currently in progress."""
        return self._is_dispatching

    def dispatch_safe(self, action: Action) -> None:
        """
        Dispatch sync if safe, async if in dispatch.
        Use this when you want immediate dispatch when possible.
        """
        if self._is_dispatching:
            logger.debug("DISPATCH_SAFE: Using async for %s (in dispatch)", action.type)
            self.dispatch_async(action)
        else:
            self.dispatch(action)

    def subscribe(self, callback: StateChangeCallback) -> UnsubscribeFunction:
        """Subscribe to state changes."""
        self._subscribers.append(callback)
        cb_name = getattr(callback, "__qualname__", str(callback))
        logger.info("SUBSCRIBER ADDED: %s | Total subscribers: %d", cb_name, len(self._subscribers))

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)
                logger.info("SUBSCRIBER REMOVED: %s", cb_name)

        return unsubscribe

    def add_middleware(self, middleware: Callable[[Action], Action | None]) -> None:
        """
        Add middleware to process actions before they reach the reducer.

        Middleware can:
        - Log actions
        - Modify actions
        - Cancel actions (return None)
        - Trigger side effects

        Args:
            middleware: Function that takes an action and returns modified action or None

        """
        self._middleware.append(middleware)

    def _notify_subscribers(self, old_state: UIState, new_state: UIState) -> None:
        """Notify all subscribers of state change."""
        for callback in self._subscribers[:]:  # Copy list to allow unsubscribe during iteration
            try:
                callback(old_state, new_state)
            except Exception as e:
                logger.exception("Error in subscriber callback: %s", e)

    def _get_state_diff(self, old_state: UIState, new_state: UIState) -> dict[str, tuple[Any, Any]]:
        """Get dictionary of changed fields for logging."""
        diff = {}
        for field in UIState.__dataclass_fields__:
            old_val = getattr(old_state, field)
            new_val = getattr(new_state, field)
            if old_val != new_val:
                diff[field] = (old_val, new_val)
        return diff


# =============================================================================
# Middleware
# =============================================================================


def logging_middleware(action: Action) -> Action:
    """Middleware that logs all actions."""
    logger.info("Action dispatched: %s, payload: %s", action.type, action.payload)
    return action
