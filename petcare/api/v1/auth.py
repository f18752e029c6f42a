"""Authentication endpoints: credential login and refresh token exchange."""

from __future__ import annotations

from flask import Blueprint, request

from petcare.api.deps import (
    build_context,
    json_response,
    password_hasher,
    service_errors,
    timing,
    token_codec,
    token_config,
)
from petcare.schemas import LoginSchema, RefreshSchema, TokenPairSchema
from petcare.services.auth.dto import LoginIn, RefreshIn
from petcare.services.auth.service import AuthService

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
refresh_schema = RefreshSchema()
token_schema = TokenPairSchema()


def _service() -> AuthService:
    return AuthService(
        token_codec=token_codec(),
        password_hasher=password_hasher(),
        token_cfg=token_config(),
        ctx=build_context(anonymous=True),
    )


@bp.post("/authenticate")
@timing
def authenticate():
    """Exchange login and password for an access/refresh token pair."""

    data = login_schema.load(request.get_json(silent=True) or {})
    with service_errors():
        pair = _service().authenticate(LoginIn(login=data["login"], password=data["password"]))
    return json_response({"data": token_schema.dump(pair)})


@bp.post("/refresh-token")
@timing
def refresh_token():
    """Exchange a refresh token for a new pair. The presented token is consumed."""

    data = refresh_schema.load(request.get_json(silent=True) or {})
    with service_errors():
        pair = _service().refresh(RefreshIn(refresh_token=data["refresh_token"]))
    return json_response({"data": token_schema.dump(pair)})
