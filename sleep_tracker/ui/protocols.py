#!/usr/bin/env python3
"""
Protocol classes for UI component interfaces.
Lets connectors depend on the widgets they drive without importing them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QPushButton, QTextBrowser


@runtime_checkable
class TrackerScreenProtocol(Protocol):
    """Widgets of the sleep tracker screen that connectors update."""

    start_button: QPushButton
    stop_button: QPushButton
    clear_button: QPushButton
    nights_text: QTextBrowser

    def show_snackbar(self, message: str, timeout_ms: int) -> None: ...


@runtime_checkable
class MainWindowProtocol(Protocol):
    """Main window surface used for user feedback."""

    def update_status_bar(self, message: str) -> None: ...
