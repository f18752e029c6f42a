"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, RefreshSchema, TokenPairSchema
from .common import MetaSchema, PaginationQuerySchema, build_meta
from .scheduling import SchedulingSchema
from .user import EmailQuerySchema, PersonSchema, RoleSchema, UserDetailsSchema, UserSchema

__all__ = [
    "EmailQuerySchema",
    "LoginSchema",
    "MetaSchema",
    "PaginationQuerySchema",
    "PersonSchema",
    "RefreshSchema",
    "RoleSchema",
    "SchedulingSchema",
    "TokenPairSchema",
    "UserDetailsSchema",
    "UserSchema",
    "build_meta",
]
