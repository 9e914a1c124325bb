from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional

from ..common.datetime_utils import format_time_of_day
from ..core.constants import DAY_CLOSE_TIME, PENDING
from ..core.enums import EventStatus
from .breaks import walk_breaks
from .bucketizer import Bucket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailySummary:
    """Per (employee, date) figures derived from the event log.

    ``last_checkout`` is a HH:MM:SS string, ``"pending"`` while today's day
    is still open, or None when no checkout was ever recorded.
    """

    employee_id: int
    work_date: date
    first_checkin: Optional[str]
    last_checkout: Optional[str]
    break_seconds: int
    worked_seconds: int
    is_open: bool = False
    on_break: bool = False
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "first_checkin": self.first_checkin,
            "last_checkout": self.last_checkout,
            "break_seconds": self.break_seconds,
            "worked_seconds": self.worked_seconds,
            "worked_hours": _hhmm(self.worked_seconds),
            "is_open": self.is_open,
            "on_break": self.on_break,
        }


def summarize_bucket(bucket: Bucket, *, now: datetime) -> DailySummary:
    walk = walk_breaks(bucket)
    is_today = bucket.work_date == now.date()
    last = bucket.last if bucket.entries else None

    is_open = bool(is_today and last and last.status == EventStatus.CHECKIN)
    day_closed = now >= datetime.combine(bucket.work_date, DAY_CLOSE_TIME)
    on_break = bool(is_today and not day_closed and walk.open_checkout is not None)

    worked = 0
    if walk.first_checkin is not None:
        end: Optional[datetime] = None
        in_progress = 0
        if is_open:
            end = now
        elif on_break:
            end = now
            in_progress = max(0, int((now - walk.open_checkout.at).total_seconds()))
        elif walk.last_checkout is not None:
            end = walk.last_checkout.at
        # Past-dated shift without any checkout stays at 0.

        if end is not None:
            span = int((end - walk.first_checkin.at).total_seconds())
            worked = max(0, span - (walk.total_break_seconds + in_progress))

    last_checkout: Optional[str] = None
    if walk.last_checkout is not None:
        if is_today and not day_closed:
            last_checkout = PENDING
        else:
            last_checkout = format_time_of_day(walk.last_checkout.at)

    return DailySummary(
        employee_id=bucket.employee_id,
        work_date=bucket.work_date,
        first_checkin=format_time_of_day(walk.first_checkin.at) if walk.first_checkin else None,
        last_checkout=last_checkout,
        break_seconds=walk.total_break_seconds,
        worked_seconds=worked,
        is_open=is_open,
        on_break=on_break,
        employee_name=getattr(last.event, "employee_name", None) if last else None,
    )


def summarize(buckets: Iterable[Bucket], *, now: datetime) -> List[DailySummary]:
    out: List[DailySummary] = []
    for bucket in buckets:
        try:
            out.append(summarize_bucket(bucket, now=now))
        except (TypeError, ValueError) as e:
            logger.warning("Skipping summary for bucket %s: %s", bucket.key, e)
    return out


def _hhmm(seconds: int) -> str:
    minutes = int(seconds) // 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
