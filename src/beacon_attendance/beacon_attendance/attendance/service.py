from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import List, Optional, Sequence

from ..analytics.breaks import Annotation, annotate
from ..analytics.bucketizer import bucketize
from ..common.clock import Clock, SystemClock
from ..common.datetime_utils import coerce_date
from ..core.constants import DEFAULT_EMPLOYEE_HISTORY_LIMIT, DEFAULT_QUERY_LIMIT
from ..core.enums import EventStatus
from ..employees.repository import EmployeeRepository
from ..employees.resolver import IdentifierResolver
from .model import AttendanceEventRow, EventFilter, RecordOutcome
from .recorder import EventRecorder
from .repository import AttendanceRepository


class AttendanceService:
    """Use cases around the event log: ingestion, listing, live stats."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        resolver: Optional[IdentifierResolver] = None,
        recorder: Optional[EventRecorder] = None,
        clock: Optional[Clock] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock or SystemClock()
        self._resolver = resolver or IdentifierResolver(employees)
        self._recorder = recorder or EventRecorder(attendance, clock=self._clock)

    def ingest(self, identifier: str, action: Optional[str] = None) -> RecordOutcome:
        employee = self._resolver.resolve(identifier)
        return self._recorder.record(employee, action, identifier=identifier.strip())

    def list_events(self, filters: EventFilter) -> List[dict]:
        if filters.limit is None:
            filters = replace(filters, limit=DEFAULT_QUERY_LIMIT)
        rows = list(self._attendance.list_events(filters, newest_first=True))
        annotations = annotate(bucketize(self._whole_days(rows, filters)))
        return [_with_annotation(row.to_dict(), annotations.get(row.event_id)) for row in rows]

    def list_for_employee(self, employee_id: int, *, limit: Optional[int] = None) -> List[dict]:
        filters = EventFilter(employee_id=int(employee_id), limit=limit or DEFAULT_EMPLOYEE_HISTORY_LIMIT)
        return self.list_events(filters)

    def stats(self) -> dict:
        today = self._clock.now().date()
        rows = self._attendance.list_events(EventFilter(date=today), newest_first=False)
        buckets = bucketize(rows)
        return {
            "today_checkins": sum(1 for r in rows if r.status == EventStatus.CHECKIN),
            "currently_present": sum(1 for b in buckets if b.last.status == EventStatus.CHECKIN),
            "total_employees": self._employees.count_active(),
            "date": today.strftime("%Y-%m-%d"),
        }

    def _whole_days(self, rows: Sequence[AttendanceEventRow], filters: EventFilter) -> List[AttendanceEventRow]:
        """Every event of the (employee, date) days that appear in ``rows``.

        A limited or status-filtered page can cut a day short; breaks and
        day markers are computed over the whole day instead.
        """

        keys = {(row.employee_id, _work_date(row)) for row in rows}
        context: List[AttendanceEventRow] = []
        for day in sorted({work_date for _, work_date in keys if work_date is not None}):
            day_filter = EventFilter(
                date=day,
                employee_id=filters.employee_id,
                department=filters.department,
                role=filters.role,
            )
            context.extend(
                row
                for row in self._attendance.list_events(day_filter, newest_first=False)
                if (row.employee_id, _work_date(row)) in keys
            )
        return context


def _with_annotation(data: dict, annotation: Optional[Annotation]) -> dict:
    data.update((annotation or Annotation()).to_dict())
    return data


def _work_date(row: AttendanceEventRow) -> Optional[date]:
    return coerce_date(row.work_date) or coerce_date(row.recorded_at)
