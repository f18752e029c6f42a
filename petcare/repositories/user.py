"""User repository: active-user lookups and uniqueness checks."""

from __future__ import annotations

from typing import Any, cast

from sqlalchemy import Select

from petcare.models.user import Person, User
from petcare.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence-only repository for :class:`User`.

    Implements the ``UserDirectory`` port. Every lookup sees active users
    only, so soft-deleted accounts release their login, email and identifier.
    """

    model = User

    # ---------------------------- Whitelists ----------------------------

    def _sortable_fields(self):
        """Expose sortable fields for safe public sorting."""
        return {
            "id": User.id,
            "login": User.login,
            "email": User.email,
            "created_at": User.created_at,
        }

    # ---------------------------- Lookup helpers ----------------------------

    def get_by_login(self, login: str) -> User | None:
        """Fetch the active user owning ``login``.

        :param login: Login to search (surrounding whitespace ignored).
        :type login: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        stmt = self._select().where(User.login == login.strip())
        result = self.session.execute(self._default_eagerload(stmt)).scalars().first()
        return cast(User | None, result)

    # ---------------------------- Uniqueness checks ----------------------------

    def _matches(self, stmt: Select[Any], exclude_id: int | None) -> bool:
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        return self.session.execute(stmt.limit(1)).first() is not None

    def exists_by_login(self, login: str, *, exclude_id: int | None = None) -> bool:
        """Return ``True`` when an active user other than ``exclude_id`` uses ``login``."""
        return self._matches(self._select(User.id).where(User.login == login.strip()), exclude_id)

    def exists_by_email(self, email: str, *, exclude_id: int | None = None) -> bool:
        """Return ``True`` when an active user other than ``exclude_id`` uses ``email``."""
        stmt = self._select(User.id).where(User.email == email.strip().lower())
        return self._matches(stmt, exclude_id)

    def exists_by_identifier(self, identifier: str, *, exclude_id: int | None = None) -> bool:
        """Return ``True`` when an active user other than ``exclude_id`` has ``identifier``.

        :param identifier: Person document number.
        :type identifier: str
        :param exclude_id: User id to ignore (the record being updated).
        :type exclude_id: int | None
        :rtype: bool
        """
        stmt = (
            self._select(User.id)
            .join(Person, User.person_id == Person.id)
            .where(Person.identifier == identifier.strip())
        )
        return self._matches(stmt, exclude_id)

    def soft_delete(self, instance: User) -> None:
        """Soft-delete ``instance`` together with its person record."""
        instance.person.active = False
        super().soft_delete(instance)
