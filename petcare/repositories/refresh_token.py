"""SQL-backed refresh token store."""

from __future__ import annotations

from datetime import datetime
from typing import cast

from sqlalchemy import update
from sqlalchemy.engine import CursorResult

from petcare.models.refresh_token import RefreshToken
from petcare.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    """Persistence for :class:`RefreshToken` records (``RefreshTokenStore`` port).

    Records live in the same database transaction as the user they belong
    to, so invalidating old records and storing the new one commit or roll
    back together.

    Bulk statements run with ``synchronize_session=False``: records loaded
    earlier in the same session are not refreshed by them.
    """

    model = RefreshToken

    def _sortable_fields(self):
        return {"id": RefreshToken.id, "created_at": RefreshToken.created_at}

    def create(self, *, token: str, owner_id: int, created_at: datetime) -> RefreshToken:
        """
        Persist a new, unused record.

        :param token: Encoded refresh token.
        :param owner_id: Owning user id.
        :param created_at: Issuance time (UTC).
        :returns: The flushed record.
        """
        record = RefreshToken(token=token, owner_id=owner_id, used=False, created_at=created_at)
        return self.add(record)

    def find_by_token(self, token: str) -> RefreshToken | None:
        """Look a record up by its exact token string."""
        stmt = self._select().where(RefreshToken.token == token)
        return cast(RefreshToken | None, self.session.execute(stmt).scalars().first())

    def invalidate_all_for_owner(self, owner_id: int) -> int:
        """
        Mark every unused record of ``owner_id`` as used.

        :returns: Number of records affected.
        """
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.owner_id == owner_id, RefreshToken.used.is_(False))
            .values(used=True)
        )
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        return int(cast(CursorResult, result).rowcount or 0)

    def claim(self, *, token: str, owner_id: int, not_before: datetime) -> bool:
        """
        Atomically consume ``token``.

        A single conditional ``UPDATE`` flips ``used`` only when the record
        belongs to ``owner_id``, is still unused and was created at or after
        ``not_before``. Two transactions presenting the same token cannot
        both see an affected row.

        :param token: Encoded refresh token presented by the client.
        :param owner_id: User the token subject resolved to.
        :param not_before: Oldest acceptable ``created_at``.
        :returns: ``True`` if this call consumed the record.
        """
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.token == token,
                RefreshToken.owner_id == owner_id,
                RefreshToken.used.is_(False),
                RefreshToken.created_at >= not_before,
            )
            .values(used=True)
        )
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        return cast(CursorResult, result).rowcount == 1
