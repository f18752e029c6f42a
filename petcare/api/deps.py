"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request
from flask_jwt_extended import get_jwt, verify_jwt_in_request

from petcare.core.errors import Forbidden, Unauthorized
from petcare.core.logger import ensure_request_id
from petcare.infra.jwt.jwt_token_codec import JWTTokenCodec
from petcare.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from petcare.schemas.common import PaginationQuerySchema
from petcare.services._shared.base import BaseService, ServiceContext
from petcare.services._shared.dto import PaginationIn
from petcare.services._shared.errors import ServiceError
from petcare.services.auth.dto import AuthTokenConfig

F = TypeVar("F", bound=Callable[..., Any])


def parse_pagination(default_limit: int = 20, max_limit: int = 200) -> PaginationIn:
    """Parse pagination parameters from ``request.args`` using Marshmallow."""

    schema = PaginationQuerySchema(default_limit=default_limit, max_limit=max_limit)
    data = schema.load(request.args)
    return PaginationIn(page=data["page"], limit=data["limit"], sort=data["sort"])


# ------------------------------ Authentication ------------------------------


def _verify_access_token() -> dict[str, Any]:
    verify_jwt_in_request(optional=False)
    claims = get_jwt() or {}
    # Refresh tokens verify with the same secret but carry no role claim.
    if "role" not in claims or "id" not in claims:
        raise Unauthorized("Access token required", code="token_invalid")
    return claims


def require_auth(func: F) -> F:
    """Ensure the request carries a valid access token."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        _verify_access_token()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def require_role(*roles: str) -> Callable[[F], F]:
    """Ensure the access token grants one of ``roles`` (e.g. ``"ADMIN"``)."""

    wanted = {f"ROLE_{role}" for role in roles}

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            claims = _verify_access_token()
            granted = {part.strip() for part in str(claims.get("role", "")).split(",")}
            if not wanted & granted:
                raise Forbidden("Insufficient role")
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def build_context(*, anonymous: bool = False) -> ServiceContext:
    """Build the request-scoped :class:`ServiceContext`.

    Anonymous requests get a context carrying only the request id. With
    ``anonymous=True`` any bearer token is ignored, so a stale access token
    sent along with a login or refresh call is not rejected.
    """

    request_id = ensure_request_id()
    if anonymous:
        return ServiceContext(request_id=request_id)
    verify_jwt_in_request(optional=True)
    claims = get_jwt() or {}
    if "role" not in claims:
        return ServiceContext(request_id=request_id)

    authority = str(claims["role"]).split(",")[0].strip()
    raw_id = claims.get("id")
    return ServiceContext(
        actor_id=int(raw_id) if raw_id is not None and str(raw_id).isdigit() else None,
        actor_login=claims.get("sub"),
        actor_role=authority.removeprefix("ROLE_") or None,
        request_id=request_id,
    )


# ------------------------------ Service wiring -------------------------------


def token_codec() -> JWTTokenCodec:
    return JWTTokenCodec(current_app.config["JWT_SECRET_KEY"])


def password_hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=current_app.config.get("PASSWORD_HASH_METHOD", "scrypt"))


def token_config() -> AuthTokenConfig:
    """Token lifetimes read from the application config."""

    cfg = current_app.config
    return AuthTokenConfig(
        access_expires=timedelta(minutes=int(cfg.get("ACCESS_TOKEN_TTL_MINUTES", 24))),
        refresh_expires=timedelta(hours=int(cfg.get("REFRESH_TOKEN_TTL_HOURS", 24))),
        reuse_window=timedelta(minutes=int(cfg.get("REFRESH_TOKEN_REUSE_WINDOW_MINUTES", 5))),
    )


@contextmanager
def service_errors() -> Iterator[None]:
    """Re-raise service errors as API errors rendered by the global handlers."""

    try:
        yield
    except ServiceError as exc:
        raise BaseService.translate_exceptions(exc) from exc


# --------------------------------- Responses ---------------------------------


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
