"""
Calendar Utilities
==================
Pure date arithmetic on top of the host calendar (``datetime``/``calendar``,
both proleptic Gregorian).

Why is this file needed?
------------------------
1. Validation: decides whether a (year, month, day) triple is a real date.
2. Formatting: produces the "DD-MM-YYYY Weekday" text shown in the window
   and the labels used by the pickers.
3. Fallbacks: the pickers must always be populated, so failures return
   documented default values instead of raising.

Exports:
    days_in_month, is_leap_year, is_valid_date, weekday_index, weekday_name,
    format_two_digits, format_year, FALLBACK_DAYS_IN_MONTH, INVALID_DATE_TEXT
"""
from __future__ import annotations

import calendar
import datetime
import logging

logger = logging.getLogger(__name__)

FALLBACK_DAYS_IN_MONTH: int = 30
INVALID_DATE_TEXT: str = "Invalid date"


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, not by 100 unless also by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in the given month.

    Returns FALLBACK_DAYS_IN_MONTH if the host calendar cannot compute it
    (month out of range, non-integer input, ...).
    """
    try:
        return calendar.monthrange(year, month)[1]
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"days_in_month({year!r}, {month!r}) failed: {e}; using {FALLBACK_DAYS_IN_MONTH}")
        return FALLBACK_DAYS_IN_MONTH


def is_valid_date(year: int, month: int, day: int) -> bool:
    if not isinstance(day, int) or not isinstance(month, int) or not 1 <= month <= 12:
        return False
    if not 1 <= day <= days_in_month(year, month):
        return False
    try:
        datetime.date(year, month, day)
    except (ValueError, TypeError, OverflowError):
        return False
    return True


def weekday_index(year: int, month: int, day: int) -> int:
    """Monday == 0 ... Sunday == 6. Raises ValueError for invalid dates."""
    if not is_valid_date(year, month, day):
        raise ValueError(f"Not a calendar date: {year!r}-{month!r}-{day!r}")
    return datetime.date(year, month, day).weekday()


def weekday_name(year: int, month: int, day: int) -> str:
    """
    Format a date together with its weekday, e.g. "14-05-2024 Tuesday".

    The weekday name follows the platform's default locale. Returns
    INVALID_DATE_TEXT when the triple is not a real date.
    """
    if not is_valid_date(year, month, day):
        logger.debug(f"Invalid date requested: {year!r}-{month!r}-{day!r}")
        return INVALID_DATE_TEXT

    date = datetime.date(year, month, day)
    return f"{format_two_digits(day)}-{format_two_digits(month)}-{year:04d} {date.strftime('%A')}"


def format_two_digits(value: int) -> str:
    return f"{value:02d}"


def format_year(year: int) -> str:
    # No thousands separator: 2024, never 2,024
    return str(year)
