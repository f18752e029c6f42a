"""Enumerations shared by models, services and schemas."""

from __future__ import annotations

from enum import Enum


class Role(Enum):
    """Access role granted to a user.

    Member values hold the human-readable description shown to clients;
    member names are what gets persisted and embedded in tokens.
    """

    ADMIN = "Administrador"
    USER = "Usuario"
    GROOMERS = "Tratadores"
    DOCTOR = "Médico"
    RECEPTIONIST = "Recepcionista"

    @property
    def description(self) -> str:
        return self.value

    @property
    def authority(self) -> str:
        """Authority string carried by the ``role`` claim, e.g. ``ROLE_ADMIN``."""
        return f"ROLE_{self.name}"


class SchedulingType(Enum):
    """Visual severity of a scheduling entry."""

    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
