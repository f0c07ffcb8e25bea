# storefront/auth/jwt_callbacks.py
from ..extensions import jwt
from ..utils.api import api_error


def _unauthorized(message="Unauthorized"):
    return api_error("unauthorized", message, 401)


def register_jwt_callbacks():
    # every token failure is a plain 401
    @jwt.unauthorized_loader
    def missing_token(reason):
        return _unauthorized()

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _unauthorized()

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_data):
        return _unauthorized("Session expired")

    @jwt.revoked_token_loader
    def revoked_token(jwt_header, jwt_data):
        return _unauthorized()

    @jwt.needs_fresh_token_loader
    def stale_token(jwt_header, jwt_data):
        return _unauthorized()

    @jwt.token_verification_failed_loader
    def failed_verification(jwt_header, jwt_data):
        return _unauthorized()
