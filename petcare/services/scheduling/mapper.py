"""DTO ↔ entity translation for scheduling entries."""

from __future__ import annotations

from petcare.models.scheduling import Scheduling
from petcare.services.scheduling.dto import SchedulingDTO


class SchedulingMapper:
    def to_entity(self, dto: SchedulingDTO) -> Scheduling:
        return Scheduling(
            id=dto.id,
            user_id=dto.user_id,
            title=dto.title,
            description=dto.description,
            day=dto.day,
            month=dto.month,
            year=dto.year,
            type=dto.type,
        )

    def to_dto(self, entity: Scheduling) -> SchedulingDTO:
        return SchedulingDTO(
            id=entity.id,
            user_id=entity.user_id,
            title=entity.title,
            description=entity.description,
            day=entity.day,
            month=entity.month,
            year=entity.year,
            type=entity.type,
        )
