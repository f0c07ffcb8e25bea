# --- storefront/utils/api.py ---
from flask import jsonify


def api_error(category, message, status_code):
    """Error envelope shared by every failure response."""
    resp = jsonify({
        "status": False,
        "error": category,
        "message": message,
    })
    resp.status_code = status_code
    return resp


def parse_bool(v, default=False):
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in {"1", "true", "yes", "y", "on"}
