from datetime import datetime

import pytest

from src.beacon_attendance.beacon_attendance.attendance.recorder import EventRecorder
from src.beacon_attendance.beacon_attendance.core.enums import EventStatus
from src.beacon_attendance.beacon_attendance.core.exceptions import ValidationError


def test_status_defaults_to_checkin_and_fields_come_from_clock(attendance_repo, clock, ana):
    recorder = EventRecorder(attendance_repo, clock=clock)

    outcome = recorder.record(ana)

    assert outcome.deduped is False
    assert outcome.status == EventStatus.CHECKIN
    assert outcome.recorded_at == datetime(2026, 3, 2, 9, 0, 0)
    assert outcome.details.to_dict() == {
        "day": "Monday",
        "date": "2026-03-02",
        "time": "09:00:00",
        "month": "March",
        "year": 2026,
    }
    assert len(attendance_repo.rows) == 1
    assert attendance_repo.rows[0].identifier == ana.identifier


def test_same_status_within_window_is_deduped(attendance_repo, clock, ana):
    recorder = EventRecorder(attendance_repo, clock=clock)
    first = recorder.record(ana, "checkin")

    clock.advance(seconds=30)
    second = recorder.record(ana, "checkin")

    assert second.deduped is True
    assert second.event_id == first.event_id
    assert len(attendance_repo.rows) == 1
    assert second.to_dict() == {"success": True, "deduped": True}


def test_window_boundary_is_inclusive(attendance_repo, clock, ana):
    recorder = EventRecorder(attendance_repo, clock=clock)
    recorder.record(ana, "checkout")

    clock.advance(seconds=60)
    assert recorder.record(ana, "checkout").deduped is True


def test_same_status_more_than_window_apart_both_persist(attendance_repo, clock, ana):
    recorder = EventRecorder(attendance_repo, clock=clock)
    recorder.record(ana, "checkin")

    clock.advance(seconds=61)
    outcome = recorder.record(ana, "checkin")

    assert outcome.deduped is False
    assert len(attendance_repo.rows) == 2


def test_other_status_is_not_deduped(attendance_repo, clock, ana):
    recorder = EventRecorder(attendance_repo, clock=clock)
    recorder.record(ana, EventStatus.CHECKIN)

    clock.advance(seconds=5)
    outcome = recorder.record(ana, EventStatus.CHECKOUT)

    assert outcome.deduped is False
    assert [r.status for r in attendance_repo.rows] == [EventStatus.CHECKIN, EventStatus.CHECKOUT]


def test_configurable_window(attendance_repo, clock, ana):
    recorder = EventRecorder(attendance_repo, clock=clock, dedup_window_seconds=10)
    recorder.record(ana)

    clock.advance(seconds=11)
    assert recorder.record(ana).deduped is False


def test_unknown_action_is_rejected(attendance_repo, clock, ana):
    with pytest.raises(ValidationError):
        EventRecorder(attendance_repo, clock=clock).record(ana, "lunch")
    assert attendance_repo.rows == []
