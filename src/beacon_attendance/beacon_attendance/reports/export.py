from __future__ import annotations

import csv
import io
from typing import Mapping, Sequence

from ..analytics.breaks import Annotation
from ..attendance.model import AttendanceEventRow, EventFilter
from ..common.datetime_utils import coerce_date, coerce_instant, format_time_of_day
from ..core.exceptions import ValidationError

EXPORT_HEADERS = [
    "Date",
    "Time",
    "Employee",
    "Status",
    "Break Type",
    "Break Duration",
    "First Of Day",
    "Last Of Day",
    "Identifier",
    "Employee ID",
]


def require_period(filters: EventFilter) -> None:
    if filters.date is None and not filters.month:
        raise ValidationError("Provide either date=YYYY-MM-DD or month=YYYY-MM")


def export_filename(filters: EventFilter) -> str:
    return f"attendance-{filters.period_label or 'attendance'}.csv"


def render_csv(rows: Sequence[AttendanceEventRow], annotations: Mapping[int, Annotation]) -> str:
    """Plain header line, then one fully quoted line per event.

    Lines are joined with ``\\n``; there is no trailing newline, so an empty
    export is just the header.
    """

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        ann = annotations.get(row.event_id) or Annotation()
        writer.writerow(
            [
                _date_text(row),
                _time_text(row),
                row.employee_name,
                getattr(row.status, "value", row.status),
                ann.break_type.value if ann.break_type else "",
                ann.break_duration or "",
                "yes" if ann.first_of_day else "",
                "yes" if ann.last_of_day else "",
                row.identifier,
                row.employee_emp_id or "",
            ]
        )
    lines = [",".join(EXPORT_HEADERS)]
    if rows:
        lines.append(out.getvalue()[:-1])
    return "\n".join(lines)


def _date_text(row: AttendanceEventRow) -> str:
    day = coerce_date(row.work_date) or coerce_date(row.recorded_at)
    return day.strftime("%Y-%m-%d") if day else ""


def _time_text(row: AttendanceEventRow) -> str:
    if row.time_of_day:
        return row.time_of_day
    at = coerce_instant(row.recorded_at)
    return format_time_of_day(at) if at else ""
