from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional


@dataclass(frozen=True)
class TimestampDetails:
    """Calendar breakdown stored alongside every attendance event."""

    day: str
    date: str
    time: str
    month: str
    year: int

    def to_dict(self) -> dict:
        return {"day": self.day, "date": self.date, "time": self.time, "month": self.month, "year": self.year}


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> str:
    """Validate a YYYY-MM string and return it normalized."""
    return datetime.strptime(value, "%Y-%m").strftime("%Y-%m")


def format_time_of_day(instant: datetime) -> str:
    return instant.strftime("%H:%M:%S")


def timestamp_details(instant: datetime) -> TimestampDetails:
    # English names regardless of process locale.
    return TimestampDetails(
        day=_WEEKDAYS[instant.weekday()],
        date=instant.strftime("%Y-%m-%d"),
        time=format_time_of_day(instant),
        month=_MONTHS[instant.month - 1],
        year=instant.year,
    )


def coerce_instant(value: Any) -> Optional[datetime]:
    """Best-effort conversion of a stored timestamp into a naive datetime.

    Returns None when the value cannot be interpreted.
    """

    if isinstance(value, datetime):
        return value.replace(tzinfo=None) if value.tzinfo else value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1]
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed.replace(tzinfo=None) if parsed.tzinfo else parsed
    return None


def coerce_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError:
            return None
    return None


_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_bounds(month: str) -> tuple[date, date]:
    """First and last calendar day of a YYYY-MM month."""
    first = datetime.strptime(month, "%Y-%m").date()
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)
