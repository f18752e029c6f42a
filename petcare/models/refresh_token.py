"""Server-side record of an issued refresh token."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petcare.core.extensions import db

from .base import PKMixin, ReprMixin, as_utc, utcnow

if TYPE_CHECKING:
    from .user import User

#: How long after issuance a stored refresh token may still be exchanged.
DEFAULT_REUSE_WINDOW = timedelta(minutes=5)


class RefreshToken(PKMixin, ReprMixin, db.Model):
    """
    Refresh token issued to a user.

    The record is exchangeable only while it is unused **and** younger than
    the reuse window. This is checked independently from the ``exp`` claim
    signed into the token string.

    Fields
    ------
    token : str
        The encoded refresh token exactly as handed to the client.
    owner_id : int
        Owning user.
    used : bool
        ``True`` once exchanged or superseded by a newer login/refresh.
    created_at : datetime
        Issuance time (UTC).
    """

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(String(512), nullable=False, unique=True)
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    used: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    owner: Mapped[User] = relationship(back_populates="refresh_tokens")

    def is_valid(self, now: datetime, window: timedelta = DEFAULT_REUSE_WINDOW) -> bool:
        """
        Whether the record may still be exchanged at ``now``.

        :param now: Reference time (timezone-aware).
        :type now: datetime
        :param window: Maximum age of an exchangeable record.
        :type window: timedelta
        :returns: ``True`` if unused and at most ``window`` old.
        :rtype: bool
        """
        if self.used:
            return False
        return as_utc(now) - as_utc(self.created_at) <= window
