from __future__ import annotations

from typing import Protocol

from petcare.models.user import User


class UserDirectory(Protocol):
    """
    Lookup of *active* users, shared by authentication and uniqueness checks.

    ``exclude_id`` lets an update ignore the record being modified.
    """

    def get(self, entity_id: int) -> User | None: ...

    def get_by_login(self, login: str) -> User | None: ...

    def exists_by_login(self, login: str, *, exclude_id: int | None = None) -> bool: ...

    def exists_by_email(self, email: str, *, exclude_id: int | None = None) -> bool: ...

    def exists_by_identifier(self, identifier: str, *, exclude_id: int | None = None) -> bool: ...
