"""Scheduling resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load, validate

from petcare.models.enums import SchedulingType
from petcare.services.scheduling.dto import SchedulingDTO


class SchedulingSchema(Schema):
    """Create/update payload and public representation of a scheduling entry."""

    id = fields.Integer(allow_none=True, load_default=None)
    user_id = fields.Integer(required=True, data_key="userId")
    title = fields.String(required=True, validate=validate.Length(min=1, max=120))
    description = fields.String(allow_none=True, load_default=None)
    day = fields.Integer(required=True, validate=validate.Range(min=1, max=31))
    month = fields.Integer(required=True, validate=validate.Range(min=1, max=12))
    year = fields.Integer(required=True, validate=validate.Range(min=1900, max=9999))
    type = fields.Enum(SchedulingType, load_default=SchedulingType.SUCCESS)

    @post_load
    def make_dto(self, data: dict[str, Any], **_: Any) -> SchedulingDTO:
        return SchedulingDTO(**data)
