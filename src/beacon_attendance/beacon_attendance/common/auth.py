from __future__ import annotations

import hmac
from functools import wraps

from flask import current_app, jsonify, request


def _presented_token() -> str:
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        return header[7:].strip()
    return request.headers.get("X-API-Token", "").strip()


def api_token_required(view):
    """Gate read endpoints behind the shared API token.

    An empty ``API_TOKEN`` setting leaves the gate open (local development).
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        expected = str(current_app.config.get("API_TOKEN") or "")
        if expected and not hmac.compare_digest(_presented_token(), expected):
            return jsonify({"success": False, "error": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper
