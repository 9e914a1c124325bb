from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, NamedTuple, Tuple

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import coerce_date, coerce_instant
from ..core.enums import EventStatus

logger = logging.getLogger(__name__)

BucketKey = Tuple[int, date]


class BucketEntry(NamedTuple):
    at: datetime
    status: EventStatus
    event: AttendanceEvent


@dataclass(frozen=True)
class Bucket:
    """All events of one employee on one calendar date, oldest first."""

    employee_id: int
    work_date: date
    entries: Tuple[BucketEntry, ...]

    @property
    def key(self) -> BucketKey:
        return (self.employee_id, self.work_date)

    @property
    def last(self) -> BucketEntry:
        return self.entries[-1]


def bucketize(events: Iterable[AttendanceEvent]) -> List[Bucket]:
    """Group events by (employee, calendar date) and sort each group.

    The calendar date is the event's stored ``work_date``, falling back to the
    date of ``recorded_at``. Events whose timestamp or status cannot be read
    are skipped with a warning. Buckets come back in ascending key order.
    """

    grouped: Dict[BucketKey, List[BucketEntry]] = {}
    for event in events:
        entry = _to_entry(event)
        if entry is None:
            continue
        work_date = coerce_date(event.work_date) or entry.at.date()
        grouped.setdefault((int(event.employee_id), work_date), []).append(entry)

    return [
        Bucket(employee_id=employee_id, work_date=work_date, entries=tuple(sorted(items, key=_sort_key)))
        for (employee_id, work_date), items in sorted(grouped.items(), key=lambda kv: kv[0])
    ]


def _to_entry(event: AttendanceEvent):
    at = coerce_instant(event.recorded_at)
    if at is None:
        logger.warning("Skipping event %s: unreadable timestamp %r", event.event_id, event.recorded_at)
        return None
    try:
        status = EventStatus(event.status)
    except ValueError:
        logger.warning("Skipping event %s: unknown status %r", event.event_id, event.status)
        return None
    return BucketEntry(at=at, status=status, event=event)


def _sort_key(entry: BucketEntry):
    return (entry.at, entry.event.event_id)
