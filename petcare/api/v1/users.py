"""User endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from petcare.api.deps import (
    build_context,
    json_response,
    parse_pagination,
    password_hasher,
    require_auth,
    require_role,
    service_errors,
    timing,
)
from petcare.schemas import (
    EmailQuerySchema,
    RoleSchema,
    UserDetailsSchema,
    UserSchema,
    build_meta,
)
from petcare.services.users.service import UserService

bp = Blueprint("users", __name__)

user_schema = UserSchema()
user_list_schema = UserSchema(many=True)
details_schema = UserDetailsSchema()
role_list_schema = RoleSchema(many=True)
email_query_schema = EmailQuerySchema()


def _service() -> UserService:
    return UserService(password_hasher=password_hasher(), ctx=build_context())


@bp.get("")
@require_auth
@timing
def list_users():
    """Return a page of active users."""

    pagination = parse_pagination()
    page = _service().find_all(pagination)
    return json_response({"data": user_list_schema.dump(page.items), "meta": build_meta(page.meta)})


@bp.post("")
@timing
def create_user():
    """Register a new user. Open to anonymous callers."""

    dto = user_schema.load(request.get_json(silent=True) or {})
    with service_errors():
        user = _service().create(dto)
    return json_response({"data": user_schema.dump(user)}, status=201)


@bp.get("/roles")
@timing
def list_roles():
    """Return every role with its description."""

    return json_response({"data": role_list_schema.dump(UserService.list_roles())})


@bp.get("/check-email")
@timing
def check_email():
    """Return whether an active user already uses ``?email=``."""

    email = email_query_schema.load(request.args)["email"]
    with service_errors():
        taken = _service().exists_by_email(email)
    return json_response({"data": taken})


@bp.get("/details/<int:user_id>")
@require_auth
@timing
def user_details(user_id: int):
    """Return the flattened profile of a user."""

    with service_errors():
        details = _service().find_details(user_id)
    return json_response({"data": details_schema.dump(details)})


@bp.get("/<int:user_id>")
@require_auth
@timing
def get_user(user_id: int):
    """Return a single active user."""

    with service_errors():
        user = _service().find_by_id(user_id)
    return json_response({"data": user_schema.dump(user)})


@bp.put("/<int:user_id>")
@require_auth
@timing
def update_user(user_id: int):
    """Replace the profile of a user. The password is left untouched."""

    dto = user_schema.load(request.get_json(silent=True) or {})
    with service_errors():
        user = _service().update(user_id, dto)
    return json_response({"data": user_schema.dump(user)})


@bp.delete("/<int:user_id>")
@require_role("ADMIN")
@timing
def delete_user(user_id: int):
    """Soft-delete a user."""

    with service_errors():
        _service().delete_by_id(user_id)
    return json_response({"data": {"success": True}})
