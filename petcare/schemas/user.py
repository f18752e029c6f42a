"""User resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load, validate

from petcare.models.enums import Role
from petcare.services.users.dto import PersonDTO, UserDTO


class PersonSchema(Schema):
    """Personal data nested in a user."""

    id = fields.Integer(allow_none=True, load_default=None)
    name = fields.String(required=True, validate=validate.Length(min=1, max=120))
    identifier = fields.String(required=True, validate=validate.Length(min=1, max=32))
    phone_number = fields.String(
        data_key="phoneNumber", allow_none=True, load_default=None, validate=validate.Length(max=32)
    )
    birth_date = fields.Date(data_key="birthDate", allow_none=True, load_default=None)

    @post_load
    def make_dto(self, data: dict[str, Any], **_: Any) -> PersonDTO:
        return PersonDTO(**data)


class UserSchema(Schema):
    """Create/update payload and public representation of a user.

    ``password`` is accepted on input only and never dumped.
    """

    id = fields.Integer(allow_none=True, load_default=None)
    person = fields.Nested(PersonSchema, required=True)
    login = fields.String(required=True, validate=validate.Length(min=1, max=50))
    email = fields.Email(required=True, validate=validate.Length(max=254))
    role = fields.Enum(Role, load_default=Role.USER)
    password = fields.String(
        load_only=True, load_default=None, validate=validate.Length(min=1, max=128)
    )

    @post_load
    def make_dto(self, data: dict[str, Any], **_: Any) -> UserDTO:
        return UserDTO(**data)


class UserDetailsSchema(Schema):
    """Flattened profile of a user."""

    id = fields.Integer(required=True)
    name = fields.String(required=True)
    identifier = fields.String(required=True)
    email = fields.Email(required=True)
    phone_number = fields.String(data_key="phoneNumber", allow_none=True)
    birth_date = fields.Date(data_key="birthDate", allow_none=True)
    role = fields.Enum(Role)
    login = fields.String(required=True)


class RoleSchema(Schema):
    """A role and its description."""

    name = fields.String(required=True)
    description = fields.String(required=True)


class EmailQuerySchema(Schema):
    """``?email=`` query parameter of the availability check."""

    email = fields.String(load_default="")
