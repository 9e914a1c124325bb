from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..analytics.breaks import annotate
from ..analytics.bucketizer import bucketize
from ..analytics.summary import DailySummary, summarize
from ..attendance.model import EventFilter
from ..attendance.repository import AttendanceRepository
from ..common.clock import Clock, SystemClock
from .export import export_filename, render_csv, require_period


@dataclass(frozen=True)
class ExportData:
    filename: str
    content: str
    row_count: int


class ReportService:
    """Use case: period reports (daily summaries, CSV export)."""

    def __init__(self, attendance: AttendanceRepository, *, clock: Optional[Clock] = None):
        self._attendance = attendance
        self._clock = clock or SystemClock()

    def daily_summaries(self, filters: EventFilter) -> List[DailySummary]:
        require_period(filters)
        rows = self._attendance.list_events(filters.without_limit(), newest_first=False)
        return summarize(bucketize(rows), now=self._clock.now())

    def build_export(self, filters: EventFilter) -> ExportData:
        require_period(filters)
        rows = list(self._attendance.list_events(filters.without_limit(), newest_first=False))
        annotations = annotate(bucketize(rows))
        return ExportData(
            filename=export_filename(filters),
            content=render_csv(rows, annotations),
            row_count=len(rows),
        )
