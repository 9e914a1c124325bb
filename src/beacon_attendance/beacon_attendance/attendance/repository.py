from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..common.datetime_utils import TimestampDetails
from ..core.enums import EventStatus
from .model import AttendanceEventRow, EventFilter


class AttendanceRepository(Protocol):
    def find_recent(self, *, employee_id: int, status: EventStatus, since: datetime) -> Optional[int]:
        """Id of the newest event for employee/status recorded at or after ``since``."""

        raise NotImplementedError

    def insert_event(
        self,
        *,
        employee_id: int,
        identifier: str,
        status: EventStatus,
        recorded_at: datetime,
        details: TimestampDetails,
    ) -> int:
        raise NotImplementedError

    def list_events(self, filters: EventFilter, *, newest_first: bool = True) -> Sequence[AttendanceEventRow]:
        """Events joined with employee display attributes.

        ``newest_first=False`` orders by date then time ascending (export order).
        """

        raise NotImplementedError
