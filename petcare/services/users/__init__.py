"""User service layer."""

from __future__ import annotations

from .dto import PersonDTO, RoleOut, UserDetailsOut, UserDTO
from .service import UserService

__all__ = ["PersonDTO", "RoleOut", "UserDTO", "UserDetailsOut", "UserService"]
