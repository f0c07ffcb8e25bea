# --- storefront/errors.py ---
from werkzeug.exceptions import HTTPException

from .utils.api import api_error


class StorefrontError(Exception):
    status_code = 500
    category = "internal_error"
    default_message = "Internal error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(StorefrontError):
    status_code = 400
    category = "validation_error"
    default_message = "Invalid request"


class Unauthorized(StorefrontError):
    status_code = 401
    category = "unauthorized"
    default_message = "Unauthorized"


class NotFound(StorefrontError):
    status_code = 404
    category = "not_found"
    default_message = "Not found"


class ConflictError(StorefrontError):
    status_code = 409
    category = "conflict"
    default_message = "Unique constraint violation"


class StorageError(StorefrontError):
    status_code = 500
    category = "storage_error"
    default_message = "Storage failure"


_HTTP_CATEGORIES = {
    400: "validation_error",
    401: "unauthorized",
    404: "not_found",
    405: "method_not_allowed",
    413: "payload_too_large",
}


def register_error_handlers(app):
    @app.errorhandler(StorefrontError)
    def handle_storefront_error(e):
        # services log storage failures with the traceback before raising
        return api_error(e.category, e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        category = _HTTP_CATEGORIES.get(e.code, "http_error")
        return api_error(category, e.description or e.name, e.code)
