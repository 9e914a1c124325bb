from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional, Union

from ..common.clock import Clock, SystemClock
from ..common.datetime_utils import timestamp_details
from ..core.constants import DEDUP_WINDOW_SECONDS
from ..core.enums import EventStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .model import RecordOutcome
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class EventRecorder:
    """Use case: store one attendance event for a resolved employee.

    A same-employee, same-status event inside the trailing dedup window
    short-circuits into a ``deduped`` outcome. The lookup and the insert are
    two separate round-trips, so two concurrent requests can both pass the
    lookup and both insert; duplicates are suppressed best-effort only.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Optional[Clock] = None,
        dedup_window_seconds: int = DEDUP_WINDOW_SECONDS,
    ):
        self._attendance = attendance
        self._clock = clock or SystemClock()
        self._window = timedelta(seconds=int(dedup_window_seconds))

    def record(
        self,
        employee: Employee,
        status: Union[EventStatus, str, None] = None,
        *,
        identifier: Optional[str] = None,
    ) -> RecordOutcome:
        status = _parse_status(status)
        now = self._clock.now()

        recent_id = self._attendance.find_recent(
            employee_id=employee.employee_id,
            status=status,
            since=now - self._window,
        )
        if recent_id is not None:
            logger.info(
                "Deduped %s for %s (event %s is inside the %ss window)",
                status.value,
                employee.name,
                recent_id,
                int(self._window.total_seconds()),
            )
            return RecordOutcome(deduped=True, employee=employee, status=status, event_id=recent_id)

        details = timestamp_details(now)
        event_id = self._attendance.insert_event(
            employee_id=employee.employee_id,
            identifier=identifier or employee.identifier,
            status=status,
            recorded_at=now,
            details=details,
        )
        logger.info("Attendance recorded: %s (%s) - %s at %s", employee.name, employee.role or "-", status.value, now.isoformat())
        return RecordOutcome(
            deduped=False,
            employee=employee,
            status=status,
            event_id=event_id,
            recorded_at=now,
            details=details,
        )


def _parse_status(value: Union[EventStatus, str, None]) -> EventStatus:
    if value is None or value == "":
        return EventStatus.CHECKIN
    if isinstance(value, EventStatus):
        return value
    try:
        return EventStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError("action must be 'checkin' or 'checkout'")
