"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from petcare.repositories.base import (
    BaseRepository,
    Page,
    Pagination,
    apply_sorting,
    paginate_select,
)
from petcare.repositories.refresh_token import RefreshTokenRepository
from petcare.repositories.scheduling import SchedulingRepository
from petcare.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "Page",
    "Pagination",
    "apply_sorting",
    "paginate_select",
    # Domain
    "RefreshTokenRepository",
    "SchedulingRepository",
    "UserRepository",
]
