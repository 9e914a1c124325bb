from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

import pytest

from src.beacon_attendance.beacon_attendance.attendance.model import AttendanceEventRow, EventFilter
from src.beacon_attendance.beacon_attendance.common.datetime_utils import month_bounds, timestamp_details
from src.beacon_attendance.beacon_attendance.core.enums import EventStatus
from src.beacon_attendance.beacon_attendance.employees.model import Employee


@dataclass
class FixedClock:
    """Clock frozen at ``current``; ``advance`` moves it forward."""

    current: datetime

    def now(self) -> datetime:
        return self.current

    def advance(self, *, seconds: float = 0, minutes: float = 0) -> datetime:
        self.current = self.current + timedelta(seconds=seconds, minutes=minutes)
        return self.current


class InMemoryEmployees:
    def __init__(self, employees=()):
        self.by_id: dict[int, Employee] = {e.employee_id: e for e in employees}

    def add(self, employee: Employee) -> Employee:
        self.by_id[employee.employee_id] = employee
        return employee

    def get_active_by_identifier(self, identifier: str) -> Optional[Employee]:
        for e in self.by_id.values():
            if e.is_active and e.identifier == identifier:
                return e
        return None

    def get_active_by_name(self, name: str) -> Optional[Employee]:
        for e in sorted(self.by_id.values(), key=lambda x: x.employee_id):
            if e.is_active and e.name.lower() == name.lower():
                return e
        return None

    def count_active(self) -> int:
        return sum(1 for e in self.by_id.values() if e.is_active)


class InMemoryAttendance:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.rows: list[AttendanceEventRow] = []
        self._id = 0

    def find_recent(self, *, employee_id: int, status: EventStatus, since: datetime) -> Optional[int]:
        hits = [
            r.event_id
            for r in self.rows
            if r.employee_id == employee_id and r.status == status and r.recorded_at >= since
        ]
        return max(hits) if hits else None

    def insert_event(self, *, employee_id, identifier, status, recorded_at, details) -> int:
        self._id += 1
        employee = self._employees.by_id[employee_id]
        self.rows.append(
            AttendanceEventRow(
                event_id=self._id,
                employee_id=employee_id,
                identifier=identifier,
                status=status,
                recorded_at=recorded_at,
                work_date=recorded_at.date(),
                time_of_day=details.time,
                day_of_week=details.day,
                month=details.month,
                year=details.year,
                employee_name=employee.name,
                employee_role=employee.role,
                employee_department=employee.department,
                employee_emp_id=employee.emp_id,
            )
        )
        return self._id

    def seed(self, employee: Employee, status: EventStatus, at: datetime) -> int:
        return self.insert_event(
            employee_id=employee.employee_id,
            identifier=employee.identifier,
            status=status,
            recorded_at=at,
            details=timestamp_details(at),
        )

    def list_events(self, filters: EventFilter, *, newest_first: bool = True):
        out = list(self.rows)
        if filters.date is not None:
            out = [r for r in out if r.work_date == filters.date]
        if filters.month:
            first, last = month_bounds(filters.month)
            out = [r for r in out if first <= r.work_date <= last]
        if filters.employee_id is not None:
            out = [r for r in out if r.employee_id == filters.employee_id]
        if filters.status is not None:
            out = [r for r in out if r.status == filters.status]
        if filters.department:
            out = [r for r in out if r.employee_department == filters.department]
        if filters.role:
            out = [r for r in out if r.employee_role == filters.role]

        if newest_first:
            out.sort(key=lambda r: (r.recorded_at, r.event_id), reverse=True)
        else:
            out.sort(key=lambda r: (r.work_date, r.time_of_day, r.event_id))
        if filters.limit is not None:
            out = out[: filters.limit]
        return out


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2026, 3, 2, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def ana() -> Employee:
    return Employee(
        employee_id=1,
        name="Ana Lopez",
        identifier="416E61204C6F70657A",
        role="Employee",
        department="Engineering",
        emp_id="EMP-001",
    )


@pytest.fixture
def employees_repo(ana) -> InMemoryEmployees:
    return InMemoryEmployees([ana])


@pytest.fixture
def attendance_repo(employees_repo) -> InMemoryAttendance:
    return InMemoryAttendance(employees_repo)
