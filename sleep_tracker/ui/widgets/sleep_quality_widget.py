#!/usr/bin/env python3
"""Sleep quality screen: one button per rating."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGridLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from sleep_tracker.core.constants import SleepQuality
from sleep_tracker.utils.formatting import DEFAULT_STRINGS, NightStrings, convert_numeric_quality_to_string

if TYPE_CHECKING:
    from sleep_tracker.ui.sleep_quality_view_model import SleepQualityViewModel

logger = logging.getLogger(__name__)


class SleepQualityWidget(QWidget):
    """Asks how the night went. A view model is attached per rated night."""

    def __init__(self, resources: NightStrings = DEFAULT_STRINGS, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.view_model: SleepQualityViewModel | None = None

        title = QLabel("How was your sleep?")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)

        grid = QGridLayout()
        self.quality_buttons: dict[SleepQuality, QPushButton] = {}
        for quality in SleepQuality:
            button = QPushButton(convert_numeric_quality_to_string(quality, resources))
            button.clicked.connect(lambda _checked=False, q=quality: self._on_quality_clicked(q))
            grid.addWidget(button, quality // 3, quality % 3)
            self.quality_buttons[quality] = button

        layout = QVBoxLayout(self)
        layout.addWidget(title)
        layout.addLayout(grid)
        layout.addStretch(1)

    def set_view_model(self, view_model: SleepQualityViewModel | None) -> None:
        self.view_model = view_model
        for button in self.quality_buttons.values():
            button.setEnabled(view_model is not None)

    def _on_quality_clicked(self, quality: SleepQuality) -> None:
        if self.view_model is None:
            logger.warning("Quality %s clicked with no night to rate", quality.name)
            return
        for button in self.quality_buttons.values():
            button.setEnabled(False)
        self.view_model.on_set_sleep_quality(quality)
