"""Calendar lookups for the ASC ``date`` header."""

from __future__ import annotations

from datetime import date
from typing import Protocol


WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class Calendar(Protocol):
    """Index lookups against the fixed name tables."""
    
    def weekday_index(self, day: date) -> int:
        """Day of week, 0 = Sunday."""
        ...
    
    def month_index(self, day: date) -> int:
        """Month of year, 0 = January."""
        ...


class GregorianCalendar:
    """Proleptic Gregorian calendar, independent of host locale and time zone."""
    
    def weekday_index(self, day: date) -> int:
        return day.isoweekday() % 7
    
    def month_index(self, day: date) -> int:
        return day.month - 1


def weekday_name(calendar: Calendar, day: date) -> str:
    return WEEKDAY_NAMES[calendar.weekday_index(day)]


def month_name(calendar: Calendar, day: date) -> str:
    return MONTH_NAMES[calendar.month_index(day)]
