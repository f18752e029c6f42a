# petcare/services/scheduling/dto.py
from __future__ import annotations

from dataclasses import dataclass

from petcare.models.enums import SchedulingType


@dataclass(frozen=True, slots=True)
class SchedulingDTO:
    """
    Calendar entry payload and output shape.

    :param id: Entry identifier (``None`` when creating).
    :type id: int | None
    :param user_id: Owning user.
    :type user_id: int
    :param title: Short label.
    :type title: str
    :param day: Day of month (1-31).
    :type day: int
    :param month: Month (1-12).
    :type month: int
    :param year: Four-digit year.
    :type year: int
    :param type: Visual severity.
    :type type: SchedulingType
    :param description: Free text.
    :type description: str | None
    """

    id: int | None
    user_id: int
    title: str
    day: int
    month: int
    year: int
    type: SchedulingType = SchedulingType.SUCCESS
    description: str | None = None
