# storefront/services/auth_service.py
"""
Admin authentication.

Credentials are checked by a pluggable CredentialVerifier; the built-in
SingleAdminVerifier knows exactly one username and a Werkzeug salted hash.
Sessions are stateless JWTs signed with JWT_SECRET_KEY.
"""
import hmac
from dataclasses import dataclass
from typing import Optional

from flask import current_app
from flask_jwt_extended import create_access_token
from werkzeug.security import check_password_hash, generate_password_hash

ADMIN_ROLE = "admin"
DEV_ADMIN_PASSWORD = "12345678"


@dataclass(frozen=True)
class Principal:
    username: str
    role: str = ADMIN_ROLE


class CredentialVerifier:
    """Interface: return a Principal for valid credentials, None otherwise."""

    def verify(self, username: str, password: str) -> Optional[Principal]:
        raise NotImplementedError


class SingleAdminVerifier(CredentialVerifier):
    def __init__(self, username: str, password_hash: str):
        self.username = username
        self.password_hash = password_hash

    def verify(self, username, password):
        # hash is checked even on a username mismatch so both paths cost the same
        name_ok = hmac.compare_digest((username or "").encode(), self.username.encode())
        password_ok = check_password_hash(self.password_hash, password or "")
        if name_ok and password_ok:
            return Principal(username=self.username, role=ADMIN_ROLE)
        return None


def verifier_from_config(app) -> SingleAdminVerifier:
    username = app.config.get("ADMIN_USERNAME") or "admin"
    password_hash = app.config.get("ADMIN_PASSWORD_HASH")
    if not password_hash:
        password = app.config.get("ADMIN_PASSWORD")
        if not password:
            password = DEV_ADMIN_PASSWORD
            app.logger.warning(
                "auth: ADMIN_PASSWORD_HASH not set, using the development admin password"
            )
        password_hash = generate_password_hash(password)
    return SingleAdminVerifier(username, password_hash)


def get_credential_verifier() -> CredentialVerifier:
    return current_app.extensions["credential_verifier"]


def authenticate(username, password) -> Optional[Principal]:
    principal = get_credential_verifier().verify(username, password)
    if principal:
        current_app.logger.info("auth: %s logged in", principal.username)
    else:
        current_app.logger.warning("auth: failed login for %r", username)
    return principal


def issue_token(principal: Principal) -> str:
    return create_access_token(
        identity=principal.username,
        additional_claims={"role": principal.role, "username": principal.username},
    )
