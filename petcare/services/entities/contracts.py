"""Capabilities an entity type plugs into :class:`EntityLifecycleService`."""

from __future__ import annotations

from typing import Protocol, TypeVar

from petcare.uow.sqlalchemy_uow import SQLAlchemyRepositoryContainer

E = TypeVar("E")
D = TypeVar("D")


class EntityMapper(Protocol[E, D]):
    """Translate between a DTO and a (transient) entity."""

    def to_entity(self, dto: D) -> E:
        """Build a transient entity from ``dto``. Must not touch the session."""
        ...

    def to_dto(self, entity: E) -> D:
        """Project a loaded entity onto its output DTO."""
        ...


class EntityValidator(Protocol[E]):
    """
    Hooks run inside the write unit of work, before anything is persisted.

    Both receive the repositories bound to the current transaction so that
    checks see the same snapshot the write will commit against.
    """

    def validate_before_save(self, entity: E, repos: SQLAlchemyRepositoryContainer) -> None: ...

    def validate_before_update(
        self, candidate: E, existing: E, repos: SQLAlchemyRepositoryContainer
    ) -> None: ...


class NoopValidator:
    """Validator that accepts everything."""

    def validate_before_save(self, entity, repos) -> None:
        return None

    def validate_before_update(self, candidate, existing, repos) -> None:
        return None
