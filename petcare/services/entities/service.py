# petcare/services/entities/service.py
from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

from petcare.repositories.base import BaseRepository
from petcare.services._shared.base import BaseService, ServiceContext
from petcare.services._shared.dto import PageMeta, PageOut, PaginationIn
from petcare.services._shared.errors import BadRequestError, NotFoundError
from petcare.services.entities.contracts import EntityMapper, EntityValidator, NoopValidator
from petcare.uow.sqlalchemy_uow import SQLAlchemyRepositoryContainer

E = TypeVar("E")
D = TypeVar("D")

log = logging.getLogger(__name__)


class EntityLifecycleService(BaseService, Generic[E, D]):
    """
    Generic create / read / update / soft-delete over one entity type.

    Concrete services pick the repository (by its attribute name on the unit
    of work) and supply a mapper and a validator; no behavior is inherited
    beyond what is defined here.

    Invariants
    ----------
    * Reads only ever see active rows (the repository applies the filter).
    * ``update`` writes the entity once.
    * ``delete_by_id`` flips ``active`` and never removes the row.
    """

    #: Human-readable entity name used in errors and logs.
    entity_name: ClassVar[str]
    #: Attribute of the unit of work holding the repository (e.g. ``"users"``).
    repository_name: ClassVar[str]

    def __init__(
        self,
        *,
        mapper: EntityMapper[E, D],
        validator: EntityValidator[E] | None = None,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        :param mapper: DTO ↔ entity translation.
        :param validator: Pre-persist hooks; defaults to a no-op validator.
        :param ctx: Request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.mapper = mapper
        self.validator: EntityValidator[E] = validator or NoopValidator()

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def find_all(self, pagination: PaginationIn | None = None) -> PageOut[D]:
        """
        Return one page of active entities.

        :param pagination: Page, limit and sort tokens.
        :returns: DTOs plus metadata; ``total`` counts active rows only.
        """
        p = pagination or PaginationIn()
        page = self.ensure_pagination(page=p.page, limit=p.limit, sort=p.sort)
        with self.ro_uow() as uow:
            result = self._repository(uow).paginate(page)
            items = [self.mapper.to_dto(entity) for entity in result.items]
        return PageOut(
            items=items,
            meta=PageMeta.build(page=result.page, limit=result.limit, total=result.total),
        )

    def find_by_id(self, entity_id: int) -> D:
        """
        Return the active entity ``entity_id``.

        :raises NotFoundError: If it does not exist or was deleted.
        """
        with self.ro_uow() as uow:
            return self.mapper.to_dto(self._load(uow, entity_id))

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    def create(self, dto: D) -> D:
        """
        Map ``dto`` to a new entity, validate it and persist it.

        :returns: The stored form.
        """
        entity = self._to_entity(dto, entity_id=None)
        with self.rw_uow() as uow:
            self.validator.validate_before_save(entity, uow)
            stored = self._repository(uow).add(entity)
            out = self.mapper.to_dto(stored)
        self._log("created", out)
        return out

    def update(self, entity_id: int, dto: D) -> D:
        """
        Replace the state of the active entity ``entity_id`` with ``dto``.

        :raises NotFoundError: If no active entity has this id.
        """
        with self.rw_uow() as uow:
            existing = self._load(uow, entity_id)
            candidate = self._to_entity(dto, entity_id=entity_id)
            self.validator.validate_before_update(candidate, existing, uow)
            stored = self._repository(uow).save(candidate)
            out = self.mapper.to_dto(stored)
        self._log("updated", out)
        return out

    def delete_by_id(self, entity_id: int) -> None:
        """
        Soft-delete the active entity ``entity_id``.

        :raises NotFoundError: If no active entity has this id.
        """
        with self.rw_uow() as uow:
            entity = self._load(uow, entity_id)
            self._repository(uow).soft_delete(entity)
        log.info(
            "%s deleted",
            self.entity_name,
            extra={"entity": self.entity_name, "entity_id": entity_id, "actor": self.ctx.actor_login},
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _repository(self, uow: SQLAlchemyRepositoryContainer) -> BaseRepository[E]:
        return getattr(uow, self.repository_name)

    def _load(self, uow: SQLAlchemyRepositoryContainer, entity_id: int) -> E:
        entity = self._repository(uow).get(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    def _to_entity(self, dto: D, *, entity_id: int | None) -> E:
        """Map ``dto`` and force its id; model-level validation errors become 400s."""
        try:
            entity = self.mapper.to_entity(dto)
        except ValueError as exc:
            raise BadRequestError(str(exc)) from exc
        entity.id = entity_id  # type: ignore[attr-defined]
        return entity

    def _log(self, action: str, out: Any) -> None:
        log.info(
            "%s %s",
            self.entity_name,
            action,
            extra={
                "entity": self.entity_name,
                "entity_id": getattr(out, "id", None),
                "actor": self.ctx.actor_login,
            },
        )
