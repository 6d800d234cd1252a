from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal, Slot

from whatday.model.state import SelectionState

logger = logging.getLogger(__name__)


class SelectionStore(QObject):
    """Central state store with signals for picker/label/dialog sync."""
    date_text_changed = Signal(str)
    day_range_changed = Signal(int)
    day_changed = Signal(int)
    info_panel_changed = Signal(bool)

    def __init__(self, state: SelectionState) -> None:
        super().__init__()
        self._state = state

    @property
    def state(self) -> SelectionState:
        return self._state

    def displayed_text(self) -> str:
        return self._state.displayed_text()

    @Slot(int)
    def set_year(self, year: int) -> None:
        if year == self._state.year:
            return
        self._apply(lambda: self._state.set_year(year))

    @Slot(int)
    def set_month(self, month: int) -> None:
        if month == self._state.month:
            return
        self._apply(lambda: self._state.set_month(month))

    @Slot(int)
    def set_day(self, day: int) -> None:
        if day == self._state.day:
            return
        self._apply(lambda: self._state.set_day(day))

    @Slot()
    def toggle_info_panel(self) -> None:
        self._state.toggle_info_panel()
        self.info_panel_changed.emit(self._state.info_panel_visible)

    @Slot()
    def close_info_panel(self) -> None:
        if not self._state.info_panel_visible:
            return
        self._state.close_info_panel()
        self.info_panel_changed.emit(False)

    def _apply(self, mutate) -> None:
        old_text = self._state.displayed_text()
        old_max_day = self._state.max_day
        old_day = self._state.day

        mutate()

        if self._state.max_day != old_max_day:
            self.day_range_changed.emit(self._state.max_day)
        if self._state.day != old_day:
            self.day_changed.emit(self._state.day)

        new_text = self._state.displayed_text()
        if new_text != old_text:
            logger.debug(f"Selection changed: {new_text}")
            self.date_text_changed.emit(new_text)
