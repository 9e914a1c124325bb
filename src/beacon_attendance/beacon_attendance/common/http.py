from __future__ import annotations

from flask import Request, jsonify

from ..attendance.model import EventFilter
from .validators import optional_date, optional_month, optional_positive_int, optional_status


def json_error(message: str, status_code: int, **extra):
    payload = {"success": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status_code


def filters_from_request(req: Request, *, with_limit: bool = True) -> EventFilter:
    args = req.args
    return EventFilter(
        date=optional_date(args.get("date")),
        month=optional_month(args.get("month")),
        employee_id=optional_positive_int(args.get("employee_id"), "employee_id"),
        status=optional_status(args.get("status")),
        department=(args.get("department") or "").strip() or None,
        role=(args.get("role") or "").strip() or None,
        limit=optional_positive_int(args.get("limit"), "limit") if with_limit else None,
    )
