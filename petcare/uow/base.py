"""
Abstract Unit of Work contract shared by the read-write and read-only variants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from petcare.repositories import (
        RefreshTokenRepository,
        SchedulingRepository,
        UserRepository,
    )


class UnitOfWork(ABC):
    """
    One transactional boundary around a use case.

    Every repository exposed here shares the same session, so the writes of
    a use case (for example invalidating refresh records and inserting the
    new one) land in a single transaction.
    """

    users: UserRepository
    refresh_tokens: RefreshTokenRepository
    schedulings: SchedulingRepository

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...

    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...

    @abstractmethod
    def commit(self) -> None:
        """Make the work of the block durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard the work of the block."""
