"""
Main Application Window
=======================
The single window of the app: a header, three date pickers and the result.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It connects picker and button signals to the SelectionStore and
   reflects store signals back into the widgets.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
)
from PySide6.QtCore import Qt, Slot

from whatday.app.application import VISIBLE_APP_NAME
from whatday.app.store import SelectionStore
from whatday.config import MIN_YEAR, MAX_YEAR
from whatday.model.catalog import InfoContent
from whatday.view.dialogs.info_dialog import InfoDialog
from whatday.view.links import open_url
from whatday.view.widgets.pickers import TwoDigitPicker, YearPicker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        store: SelectionStore,
        info_content: InfoContent,
        open_link: Callable[[str], bool] = open_url,
    ) -> None:
        super().__init__()
        self.store = store
        self.info_content = info_content
        self._open_link = open_link
        self.info_dialog: Optional[InfoDialog] = None

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(320, 200)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. HEADER ---
        header = QHBoxLayout()
        header.addWidget(QLabel(f"<b>{VISIBLE_APP_NAME}</b>"))
        header.addStretch()
        self.btn_info = QPushButton("?")
        self.btn_info.setFixedSize(28, 28)
        self.btn_info.setToolTip("About this app")
        header.addWidget(self.btn_info)
        main_layout.addLayout(header)

        # --- 2. PICKERS ---
        state = store.state
        pickers = QHBoxLayout()
        self.day_picker = TwoDigitPicker(1, state.max_day, state.day)
        self.month_picker = TwoDigitPicker(1, 12, state.month)
        self.year_picker = YearPicker(MIN_YEAR, MAX_YEAR, state.year)
        pickers.addWidget(self.day_picker)
        pickers.addWidget(self.month_picker)
        pickers.addWidget(self.year_picker)
        main_layout.addLayout(pickers)

        # --- 3. RESULT ---
        self.lbl_result = QLabel(store.displayed_text())
        self.lbl_result.setAlignment(Qt.AlignCenter)
        self.lbl_result.setStyleSheet("font-weight: bold; font-size: 14pt;")
        main_layout.addWidget(self.lbl_result)
        main_layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        # Widgets -> Store
        self.day_picker.valueChanged.connect(store.set_day)
        self.month_picker.valueChanged.connect(store.set_month)
        self.year_picker.valueChanged.connect(store.set_year)
        self.btn_info.clicked.connect(store.toggle_info_panel)

        # Store -> Widgets
        store.date_text_changed.connect(self.lbl_result.setText)
        store.day_range_changed.connect(self.on_day_range_changed)
        store.day_changed.connect(self.on_day_changed)
        store.info_panel_changed.connect(self.on_info_panel_changed)

    @Slot(int)
    def on_day_range_changed(self, max_day: int) -> None:
        # Store has already clamped the day; keep the picker from echoing its own clamp back
        self.day_picker.blockSignals(True)
        self.day_picker.setMaximum(max_day)
        self.day_picker.setValue(self.store.state.day)
        self.day_picker.blockSignals(False)

    @Slot(int)
    def on_day_changed(self, day: int) -> None:
        if self.day_picker.value() != day:
            self.day_picker.blockSignals(True)
            self.day_picker.setValue(day)
            self.day_picker.blockSignals(False)

    @Slot(bool)
    def on_info_panel_changed(self, visible: bool) -> None:
        if visible:
            self.show_info_dialog()
        elif self.info_dialog is not None and self.info_dialog.isVisible():
            self.info_dialog.close()

    def show_info_dialog(self) -> None:
        logger.debug("Opening info panel.")
        # Built on first use, then reused for every later opening
        if self.info_dialog is None:
            self.info_dialog = InfoDialog(self.info_content, self._open_link, self)
            self.info_dialog.finished.connect(self.on_info_dialog_finished)
        # Window-modal, non-blocking
        self.info_dialog.open()

    @Slot(int)
    def on_info_dialog_finished(self, _result: int) -> None:
        self.store.close_info_panel()
