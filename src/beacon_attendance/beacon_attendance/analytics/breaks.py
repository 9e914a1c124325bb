"""Break classification and day-boundary markers.

Within a bucket, every checkin that follows a checkout closes a break; the
gap decides its label. The first checkin and the last checkout of the day
carry "First of day" / "Last of day" on top of whatever break label they
already have.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Dict, Iterable, Optional, Tuple

from ..core.constants import ANNOTATION_SEPARATOR, LUNCH_BREAK_MIN_SECONDS, SHORT_BREAK_MAX_SECONDS
from ..core.enums import BreakType, DayMarker, EventStatus
from .bucketizer import Bucket, BucketEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Annotation:
    break_type: Optional[BreakType] = None
    break_duration: Optional[str] = None
    first_of_day: bool = False
    last_of_day: bool = False

    @property
    def label(self) -> str:
        parts = []
        if self.break_type:
            parts.append(f"{self.break_type.value} ({self.break_duration})")
        if self.first_of_day:
            parts.append(DayMarker.FIRST.value)
        if self.last_of_day:
            parts.append(DayMarker.LAST.value)
        return ANNOTATION_SEPARATOR.join(parts)

    def to_dict(self) -> dict:
        return {
            "break_type": self.break_type.value if self.break_type else None,
            "break_duration": self.break_duration,
            "first_of_day": self.first_of_day,
            "last_of_day": self.last_of_day,
            "annotation": self.label,
        }


@dataclass(frozen=True)
class BreakWalk:
    """Reducer state for one chronological pass over a bucket."""

    open_checkout: Optional[BucketEntry] = None
    first_checkin: Optional[BucketEntry] = None
    last_checkout: Optional[BucketEntry] = None
    gaps: Tuple[Tuple[BucketEntry, int], ...] = ()

    @property
    def total_break_seconds(self) -> int:
        return sum(seconds for _, seconds in self.gaps)


def classify_gap(seconds: float) -> BreakType:
    if seconds < SHORT_BREAK_MAX_SECONDS:
        return BreakType.SHORT
    if seconds >= LUNCH_BREAK_MIN_SECONDS:
        return BreakType.LUNCH
    return BreakType.REGULAR


def format_duration(seconds: float) -> str:
    """'7m', '2m 30s', '45s'; zero components are omitted."""
    total = max(0, int(seconds))
    minutes, rest = divmod(total, 60)
    if minutes == 0:
        return f"{rest}s"
    if rest == 0:
        return f"{minutes}m"
    return f"{minutes}m {rest}s"


def _step(state: BreakWalk, entry: BucketEntry) -> BreakWalk:
    if entry.status == EventStatus.CHECKIN:
        first = state.first_checkin or entry
        if state.open_checkout is None:
            return replace(state, first_checkin=first)
        gap = int((entry.at - state.open_checkout.at).total_seconds())
        return replace(state, first_checkin=first, open_checkout=None, gaps=state.gaps + ((entry, gap),))
    return replace(state, open_checkout=entry, last_checkout=entry)


def walk_breaks(bucket: Bucket) -> BreakWalk:
    return reduce(_step, bucket.entries, BreakWalk())


def annotate_bucket(bucket: Bucket) -> Dict[int, Annotation]:
    walk = walk_breaks(bucket)

    annotations: Dict[int, Annotation] = {
        entry.event.event_id: Annotation(break_type=classify_gap(seconds), break_duration=format_duration(seconds))
        for entry, seconds in walk.gaps
    }
    if walk.first_checkin is not None:
        event_id = walk.first_checkin.event.event_id
        annotations[event_id] = replace(annotations.get(event_id, Annotation()), first_of_day=True)
    if walk.last_checkout is not None:
        event_id = walk.last_checkout.event.event_id
        annotations[event_id] = replace(annotations.get(event_id, Annotation()), last_of_day=True)
    return annotations


def annotate(buckets: Iterable[Bucket]) -> Dict[int, Annotation]:
    """Annotations for every bucket, keyed by event id."""

    out: Dict[int, Annotation] = {}
    for bucket in buckets:
        try:
            out.update(annotate_bucket(bucket))
        except (TypeError, ValueError) as e:
            logger.warning("Skipping annotations for bucket %s: %s", bucket.key, e)
    return out
