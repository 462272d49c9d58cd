"""
Core module - dagklassning och uppdelning av tidsintervall.

Exporterar de publika funktionerna så att anropare slipper känna till
modulstrukturen.
"""

from .day_kind import DayKind, classify_day, day_kind, next_start
from .errors import DayKindError, InvalidRangeError, NaiveDatetimeError, TimezoneMismatchError
from .holidays import UpcomingHoliday, holidays_for_year, next_upcoming_holiday
from .slicing import DayKindSlice, slice_from, slice_on_day_kind

__all__ = [
    # day_kind
    "DayKind",
    "classify_day",
    "day_kind",
    "next_start",
    # slicing
    "DayKindSlice",
    "slice_on_day_kind",
    "slice_from",
    # holidays
    "UpcomingHoliday",
    "holidays_for_year",
    "next_upcoming_holiday",
    # errors
    "DayKindError",
    "InvalidRangeError",
    "NaiveDatetimeError",
    "TimezoneMismatchError",
]
