# petcare/services/scheduling/service.py
from __future__ import annotations

from petcare.models.scheduling import Scheduling
from petcare.services._shared.base import ServiceContext
from petcare.services.entities.service import EntityLifecycleService
from petcare.services.scheduling.dto import SchedulingDTO
from petcare.services.scheduling.mapper import SchedulingMapper
from petcare.services.scheduling.validator import SchedulingValidator


class SchedulingService(EntityLifecycleService[Scheduling, SchedulingDTO]):
    """Calendar entries; all behavior comes from the generic lifecycle."""

    entity_name = "Scheduling"
    repository_name = "schedulings"

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        super().__init__(mapper=SchedulingMapper(), validator=SchedulingValidator(), ctx=ctx)
