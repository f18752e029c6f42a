from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """Port for one-way credential hashing."""

    def hash(self, raw: str) -> str: ...

    def verify(self, password_hash: str, raw: str) -> bool: ...
