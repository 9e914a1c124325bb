from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.recorder import EventRecorder
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.clock import Clock, SystemClock
from .core.constants import DEDUP_WINDOW_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.resolver import IdentifierResolver
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    clock: Clock

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    resolver: IdentifierResolver
    recorder: EventRecorder
    attendance_service: AttendanceService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    clock: Optional[Clock] = None,
    dedup_window_seconds: int = DEDUP_WINDOW_SECONDS,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    clock = clock or SystemClock()

    resolver = IdentifierResolver(employees_repo)
    recorder = EventRecorder(attendance_repo, clock=clock, dedup_window_seconds=dedup_window_seconds)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        resolver=resolver,
        recorder=recorder,
        clock=clock,
    )
    report_service = ReportService(attendance_repo, clock=clock)

    return Container(
        clock=clock,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        resolver=resolver,
        recorder=recorder,
        attendance_service=attendance_service,
        report_service=report_service,
        conn=conn,
    )


def build_container(*, db_config: dict, dedup_window_seconds: int = DEDUP_WINDOW_SECONDS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        dedup_window_seconds=dedup_window_seconds,
        conn=conn,
    )
