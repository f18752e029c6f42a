from __future__ import annotations

from datetime import datetime
from typing import Protocol

from petcare.models.refresh_token import RefreshToken


class RefreshTokenStore(Protocol):
    """
    Stateful store for refresh token records.

    Implementations MUST take part in the caller's transaction so that
    invalidation and creation commit or roll back together, and ``claim``
    MUST be atomic.
    """

    def create(self, *, token: str, owner_id: int, created_at: datetime) -> RefreshToken:
        """Persist a new unused record."""
        ...

    def find_by_token(self, token: str) -> RefreshToken | None:
        """Fetch a record by its exact token string (if present)."""
        ...

    def invalidate_all_for_owner(self, owner_id: int) -> int:
        """
        Mark every record of ``owner_id`` as used.

        :returns: Number of records affected.
        """
        ...

    def claim(self, *, token: str, owner_id: int, not_before: datetime) -> bool:
        """
        Atomically consume ``token`` if it is unused and not older than ``not_before``.

        :returns: ``True`` only for the single caller that consumed it.
        """
        ...
