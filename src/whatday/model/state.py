"""
Selection State (Data Model)
============================
This module defines the state behind the single "What Day?" window.

Why is this file needed?
------------------------
1. State Management: It holds the selected year, month and day and the
   visibility of the info panel in one place.
2. Consistency: It keeps the selected day inside the length of the selected
   month whenever the month or year changes.
3. Testability: The initial date is injected, so nothing here reads the clock.

Classes:
    CalendarDate: Immutable (year, month, day) triple.
    SelectionState: The mutable selection owned by the UI thread.
"""
from __future__ import annotations

from dataclasses import dataclass
import datetime
import logging
from typing import Optional

from whatday.model.calendar_utils import days_in_month, is_valid_date, weekday_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int

    def is_valid(self) -> bool:
        return is_valid_date(self.year, self.month, self.day)

    @classmethod
    def today(cls, clock: Optional[datetime.date] = None) -> CalendarDate:
        """Build from the system date (or from ``clock`` when given)."""
        date = clock if clock is not None else datetime.date.today()
        return cls(year=date.year, month=date.month, day=date.day)


@dataclass
class SelectionState:
    """
    The user's current picker selection plus the info panel flag.

    Day clamping: whenever the month or year changes so that the selected
    day no longer exists, the day moves to the last day of the new month.
    """
    year: int
    month: int
    day: int
    info_panel_visible: bool = False

    def __post_init__(self) -> None:
        self.month = min(max(self.month, 1), 12)
        self._clamp_day()

    @classmethod
    def from_date(cls, date: CalendarDate) -> SelectionState:
        return cls(year=date.year, month=date.month, day=date.day)

    @property
    def max_day(self) -> int:
        return days_in_month(self.year, self.month)

    @property
    def selected_date(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.day)

    def set_year(self, year: int) -> None:
        self.year = year
        self._clamp_day()

    def set_month(self, month: int) -> None:
        self.month = min(max(month, 1), 12)
        self._clamp_day()

    def set_day(self, day: int) -> None:
        self.day = day
        self._clamp_day()

    def displayed_text(self) -> str:
        return weekday_name(self.year, self.month, self.day)

    # --- Info panel ---
    def toggle_info_panel(self) -> None:
        self.info_panel_visible = not self.info_panel_visible

    def open_info_panel(self) -> None:
        self.info_panel_visible = True

    def close_info_panel(self) -> None:
        self.info_panel_visible = False

    def _clamp_day(self) -> None:
        clamped = min(max(self.day, 1), self.max_day)
        if clamped != self.day:
            logger.debug(f"Day {self.day} clamped to {clamped} for {self.year}-{self.month:02d}")
            self.day = clamped
