# storefront/auth/routes.py
from flask import request, jsonify
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies

from . import bp
from ..errors import Unauthorized
from ..schemas import LoginRequest
from ..services.auth_service import authenticate, issue_token


@bp.post("/login")
def login():
    body = LoginRequest.from_json(request.get_json(silent=True))
    principal = authenticate(body.username, body.password)
    if not principal:
        raise Unauthorized("Invalid credentials")

    token = issue_token(principal)
    resp = jsonify(token=token)
    set_access_cookies(resp, token)
    return resp, 200


@bp.post("/logout")
def logout():
    resp = jsonify(ok=True)
    unset_jwt_cookies(resp)
    return resp, 200
