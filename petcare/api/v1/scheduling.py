"""Scheduling endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from petcare.api.deps import (
    build_context,
    json_response,
    parse_pagination,
    require_auth,
    service_errors,
    timing,
)
from petcare.schemas import SchedulingSchema, build_meta
from petcare.services.scheduling.service import SchedulingService

bp = Blueprint("scheduling", __name__)

scheduling_schema = SchedulingSchema()
scheduling_list_schema = SchedulingSchema(many=True)


def _service() -> SchedulingService:
    return SchedulingService(ctx=build_context())


@bp.get("")
@require_auth
@timing
def list_schedulings():
    pagination = parse_pagination()
    page = _service().find_all(pagination)
    return json_response(
        {"data": scheduling_list_schema.dump(page.items), "meta": build_meta(page.meta)}
    )


@bp.post("")
@require_auth
@timing
def create_scheduling():
    dto = scheduling_schema.load(request.get_json(silent=True) or {})
    with service_errors():
        entry = _service().create(dto)
    return json_response({"data": scheduling_schema.dump(entry)}, status=201)


@bp.get("/<int:scheduling_id>")
@require_auth
@timing
def get_scheduling(scheduling_id: int):
    with service_errors():
        entry = _service().find_by_id(scheduling_id)
    return json_response({"data": scheduling_schema.dump(entry)})


@bp.put("/<int:scheduling_id>")
@require_auth
@timing
def update_scheduling(scheduling_id: int):
    dto = scheduling_schema.load(request.get_json(silent=True) or {})
    with service_errors():
        entry = _service().update(scheduling_id, dto)
    return json_response({"data": scheduling_schema.dump(entry)})


@bp.delete("/<int:scheduling_id>")
@require_auth
@timing
def delete_scheduling(scheduling_id: int):
    with service_errors():
        _service().delete_by_id(scheduling_id)
    return json_response({"data": {"success": True}})
