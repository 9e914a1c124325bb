from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.auth import api_token_required
from ..common.http import filters_from_request, json_error
from ..common.validators import optional_positive_int
from ..container import Container
from ..core.exceptions import DecodeError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/esp32/detect", methods=["POST"], endpoint="esp32_detect")
    def esp32_detect():
        """Beacon ingestion: resolve the identifier and record one event."""
        data = request.get_json(silent=True) or {}
        identifier = str(data.get("hex_value") or data.get("identifier") or "").strip()
        action = data.get("action")

        if not identifier:
            return json_error("hex_value is required", 400)

        try:
            outcome = container.attendance_service.ingest(identifier, action)
            return jsonify(outcome.to_dict()), 200
        except DecodeError as e:
            return json_error("Invalid hex value - cannot convert to employee name", 400, details=str(e))
        except NotFoundError as e:
            return json_error("Employee not found", 404, details=str(e))
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError:
            return json_error("Failed to record attendance", 500)
        except Exception:
            logger.exception("Unexpected error while recording attendance")
            return json_error("Failed to record attendance", 500)

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @api_token_required
    def attendance_list():
        try:
            filters = filters_from_request(request)
            return jsonify(container.attendance_service.list_events(filters)), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError:
            return json_error("Failed to load attendance", 500)

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    @api_token_required
    def employee_attendance(employee_id: int):
        try:
            limit = optional_positive_int(request.args.get("limit"), "limit")
            return jsonify(container.attendance_service.list_for_employee(employee_id, limit=limit)), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError:
            return json_error("Failed to load attendance", 500)

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @api_token_required
    def attendance_stats():
        try:
            return jsonify(container.attendance_service.stats()), 200
        except StorageError:
            return json_error("Failed to load attendance statistics", 500)
