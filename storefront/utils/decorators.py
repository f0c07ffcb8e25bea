# ------- storefront/utils/decorators.py -------
from functools import wraps

from flask_jwt_extended import get_jwt, verify_jwt_in_request

from ..errors import Unauthorized
from ..services.auth_service import ADMIN_ROLE


def admin_required(fn):
    """Accept a signed, unexpired admin token from the Authorization header or the `token` cookie."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        claims = get_jwt()
        if claims.get("role") != ADMIN_ROLE:
            raise Unauthorized()
        return fn(*args, **kwargs)
    return wrapper
