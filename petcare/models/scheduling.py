"""Calendar entries attached to a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petcare.core.extensions import db

from .base import PKMixin, ReprMixin, SoftDeleteMixin, TimestampMixin
from .enums import SchedulingType

if TYPE_CHECKING:
    from .user import User


class Scheduling(PKMixin, ReprMixin, SoftDeleteMixin, TimestampMixin, db.Model):
    """
    A dated note on a user's agenda.

    The date is stored as separate ``day``/``month``/``year`` integers, the
    shape clients already use for calendar cells.
    """

    __tablename__ = "schedulings"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    day: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[SchedulingType] = mapped_column(
        SAEnum(SchedulingType, name="scheduling_type", native_enum=False, length=16),
        nullable=False,
        default=SchedulingType.SUCCESS,
    )

    user: Mapped[User] = relationship()

    __table_args__ = (
        CheckConstraint("day BETWEEN 1 AND 31", name="day_range"),
        CheckConstraint("month BETWEEN 1 AND 12", name="month_range"),
    )
