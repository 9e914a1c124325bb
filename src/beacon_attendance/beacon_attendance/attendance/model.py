from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import TimestampDetails
from ..core.enums import EventStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one recorded checkin or checkout.

    Calendar fields are derived from ``recorded_at`` when the event is stored
    and never change afterwards.
    """

    event_id: int
    employee_id: int
    identifier: str
    status: EventStatus
    recorded_at: datetime
    work_date: Optional[date] = None
    time_of_day: Optional[str] = None
    day_of_week: Optional[str] = None
    month: Optional[str] = None
    year: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "employee_id": self.employee_id,
            "hex_value": self.identifier,
            "status": _value(self.status),
            "recorded_at": _iso(self.recorded_at),
            "day_of_week": self.day_of_week,
            "date": _iso(self.work_date),
            "time": self.time_of_day,
            "month": self.month,
            "year": self.year,
        }


@dataclass(frozen=True)
class AttendanceEventRow(AttendanceEvent):
    """Read-model: event joined with the employee's display attributes."""

    employee_name: str = ""
    employee_role: Optional[str] = None
    employee_department: Optional[str] = None
    employee_emp_id: Optional[str] = None

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            employee_name=self.employee_name,
            employee_role=self.employee_role,
            employee_department=self.employee_department,
            employee_emp_id=self.employee_emp_id,
        )
        return data


@dataclass(frozen=True)
class EventFilter:
    """Filters shared by the query, summary and export read paths."""

    date: Optional[date] = None
    month: Optional[str] = None
    employee_id: Optional[int] = None
    status: Optional[EventStatus] = None
    department: Optional[str] = None
    role: Optional[str] = None
    limit: Optional[int] = None

    def without_limit(self) -> "EventFilter":
        return replace(self, limit=None)

    @property
    def period_label(self) -> Optional[str]:
        if self.date:
            return self.date.strftime("%Y-%m-%d")
        return self.month


@dataclass(frozen=True)
class RecordOutcome:
    """Result of an ingestion: either a stored event or a dedup hit."""

    deduped: bool
    employee: Employee
    status: EventStatus
    event_id: Optional[int] = None
    recorded_at: Optional[datetime] = None
    details: Optional[TimestampDetails] = None

    def to_dict(self) -> dict:
        if self.deduped:
            return {"success": True, "deduped": True}
        data = {"success": True, "deduped": False, "id": self.event_id}
        data.update(self.employee.display())
        data.update(
            status=self.status.value,
            recorded_at=_iso(self.recorded_at),
            timestamp_details=self.details.to_dict() if self.details else None,
        )
        return data


def _iso(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _value(value: Any) -> Any:
    return value.value if isinstance(value, EventStatus) else value
