from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import api_token_required
from ..common.http import filters_from_request, json_error
from ..container import Container
from ..core.exceptions import StorageError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @api_token_required
    def attendance_summary():
        """Per-employee, per-day worked/break figures for a date or month."""
        try:
            filters = filters_from_request(request, with_limit=False)
            summaries = container.report_service.daily_summaries(filters)
            return jsonify([s.to_dict() for s in summaries]), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError:
            return json_error("Failed to build summary", 500)

    @app.route("/api/attendance/export", methods=["GET"], endpoint="attendance_export")
    @api_token_required
    def attendance_export():
        try:
            filters = filters_from_request(request, with_limit=False)
            data = container.report_service.build_export(filters)
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError:
            return json_error("Failed to export attendance", 500)

        return app.response_class(
            data.content.encode("utf-8"),
            mimetype="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="{data.filename}"',
            },
        )
