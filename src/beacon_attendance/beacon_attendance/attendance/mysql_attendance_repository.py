from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import TimestampDetails, month_bounds
from ..core.enums import EventStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, time_to_text
from .model import AttendanceEventRow, EventFilter
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_recent(self, *, employee_id: int, status: EventStatus, since: datetime) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id
                FROM attendance_records
                WHERE employee_id=%s AND status=%s AND recorded_at >= %s
                ORDER BY recorded_at DESC
                LIMIT 1
                """,
                (int(employee_id), status.value, since),
            )
            row = fetchone(cur)
            return int(row["event_id"]) if row else None

    def insert_event(
        self,
        *,
        employee_id: int,
        identifier: str,
        status: EventStatus,
        recorded_at: datetime,
        details: TimestampDetails,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, identifier, status, recorded_at,
                    day_of_week, work_date, time_of_day, month, year
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    identifier,
                    status.value,
                    recorded_at,
                    details.day,
                    details.date,
                    details.time,
                    details.month,
                    details.year,
                ),
            )
            return int(cur.lastrowid)

    def list_events(self, filters: EventFilter, *, newest_first: bool = True) -> Sequence[AttendanceEventRow]:
        clauses = ["1=1"]
        params: list[object] = []

        if filters.date is not None:
            clauses.append("ar.work_date=%s")
            params.append(filters.date)
        if filters.month:
            first, last = month_bounds(filters.month)
            clauses.append("ar.work_date BETWEEN %s AND %s")
            params.extend([first, last])
        if filters.employee_id is not None:
            clauses.append("ar.employee_id=%s")
            params.append(int(filters.employee_id))
        if filters.status is not None:
            clauses.append("ar.status=%s")
            params.append(filters.status.value)
        if filters.department:
            clauses.append("e.department=%s")
            params.append(filters.department)
        if filters.role:
            clauses.append("e.role=%s")
            params.append(filters.role)

        where = " AND ".join(clauses)
        if newest_first:
            order = "ar.recorded_at DESC, ar.event_id DESC"
        else:
            order = "ar.work_date ASC, ar.time_of_day ASC, ar.event_id ASC"

        limit = ""
        if filters.limit is not None:
            limit = "LIMIT %s"
            params.append(int(filters.limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    ar.event_id, ar.employee_id, ar.identifier, ar.status, ar.recorded_at,
                    ar.day_of_week, ar.work_date, ar.time_of_day, ar.month, ar.year,
                    e.full_name AS employee_name, e.role AS employee_role,
                    e.department AS employee_department, e.emp_id AS employee_emp_id
                FROM attendance_records ar
                JOIN employees e ON e.employee_id = ar.employee_id
                WHERE {where}
                ORDER BY {order}
                {limit}
                """,
                tuple(params),
            )
            rows = fetchall(cur)

        out: list[AttendanceEventRow] = []
        for r in rows:
            try:
                status = EventStatus(r["status"])
            except ValueError:
                logger.warning("Skipping attendance record %s with unknown status %r", r.get("event_id"), r.get("status"))
                continue
            out.append(
                AttendanceEventRow(
                    event_id=int(r["event_id"]),
                    employee_id=int(r["employee_id"]),
                    identifier=r["identifier"],
                    status=status,
                    recorded_at=r["recorded_at"],
                    work_date=r.get("work_date"),
                    time_of_day=time_to_text(r.get("time_of_day")),
                    day_of_week=r.get("day_of_week"),
                    month=r.get("month"),
                    year=r.get("year"),
                    employee_name=r.get("employee_name") or "",
                    employee_role=r.get("employee_role"),
                    employee_department=r.get("employee_department"),
                    employee_emp_id=r.get("employee_emp_id"),
                )
            )
        return out
