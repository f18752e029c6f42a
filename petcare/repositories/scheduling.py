"""Scheduling repository."""

from __future__ import annotations

from petcare.models.scheduling import Scheduling
from petcare.repositories.base import BaseRepository


class SchedulingRepository(BaseRepository[Scheduling]):
    """Persistence-only repository for :class:`Scheduling` entries."""

    model = Scheduling

    def _sortable_fields(self):
        return {
            "id": Scheduling.id,
            "year": Scheduling.year,
            "month": Scheduling.month,
            "day": Scheduling.day,
            "title": Scheduling.title,
            "created_at": Scheduling.created_at,
        }
