from __future__ import annotations

from enum import Enum


class EventStatus(str, Enum):
    """Attendance event direction as stored in the database."""

    CHECKIN = "checkin"
    CHECKOUT = "checkout"


class BreakType(str, Enum):
    """Classification of the gap between a checkout and the next checkin."""

    SHORT = "Short break"
    REGULAR = "Break"
    LUNCH = "Lunch break"


class DayMarker(str, Enum):
    FIRST = "First of day"
    LAST = "Last of day"
