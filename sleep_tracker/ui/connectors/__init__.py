"""Connectors that bind view-model signals to widgets."""

from __future__ import annotations

from sleep_tracker.ui.connectors.tracker import (
    ButtonVisibilityConnector,
    ErrorNotificationConnector,
    NightsTextConnector,
    SnackbarConnector,
)

__all__ = [
    "ButtonVisibilityConnector",
    "ErrorNotificationConnector",
    "NightsTextConnector",
    "SnackbarConnector",
]
