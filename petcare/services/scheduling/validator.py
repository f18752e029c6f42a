"""Pre-persist checks for scheduling entries."""

from __future__ import annotations

from datetime import date

from petcare.models.scheduling import Scheduling
from petcare.services._shared.errors import BadRequestError, NotFoundError
from petcare.uow.sqlalchemy_uow import SQLAlchemyRepositoryContainer


class SchedulingValidator:
    """
    Require an existing calendar date and an active owner.

    A deleted user cannot receive new entries nor have entries moved to them.
    """

    def validate_before_save(self, entity: Scheduling, repos: SQLAlchemyRepositoryContainer) -> None:
        self._check_date(entity)
        self._check_owner(entity, repos)

    def validate_before_update(
        self, candidate: Scheduling, existing: Scheduling, repos: SQLAlchemyRepositoryContainer
    ) -> None:
        self._check_date(candidate)
        if candidate.user_id != existing.user_id:
            self._check_owner(candidate, repos)

    @staticmethod
    def _check_date(entity: Scheduling) -> None:
        try:
            date(entity.year, entity.month, entity.day)
        except (TypeError, ValueError) as exc:
            raise BadRequestError(f"Invalid date: {exc}") from exc

    @staticmethod
    def _check_owner(entity: Scheduling, repos: SQLAlchemyRepositoryContainer) -> None:
        if repos.users.get(entity.user_id) is None:
            raise NotFoundError("User", entity.user_id)
