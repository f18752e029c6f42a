"""Scheduling service layer."""

from __future__ import annotations

from .dto import SchedulingDTO
from .service import SchedulingService

__all__ = ["SchedulingDTO", "SchedulingService"]
