from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import EventStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_month


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_date(value: Optional[str], field_name: str = "date") -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def optional_month(value: Optional[str], field_name: str = "month") -> Optional[str]:
    if not value:
        return None
    try:
        return parse_month(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM")


def optional_status(value: Optional[str], field_name: str = "status") -> Optional[EventStatus]:
    if not value:
        return None
    try:
        return EventStatus(value.strip().lower())
    except ValueError:
        raise ValidationError(f"{field_name} must be 'checkin' or 'checkout'")


def optional_positive_int(value: Optional[str], field_name: str) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number
