# petcare/services/_shared/base.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from petcare.core import errors as api_errors
from petcare.repositories.base import Pagination
from petcare.services._shared.errors import (
    BadRequestError,
    InternalServiceError,
    InvalidCredentialsError,
    NotFoundError,
    ServiceError,
    TokenInvalidError,
    TokenMalformedError,
    UniquenessViolationError,
)
from petcare.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


@dataclass(frozen=True, slots=True)
class ServiceContext:
    """
    Request-scoped data passed explicitly into services.

    Nothing in the service layer reads authentication state from globals;
    the API layer builds this value from the verified access token.

    :param actor_id: Authenticated user identifier.
    :param actor_login: Authenticated user login (token subject).
    :param actor_role: Role name of the authenticated user (e.g. ``"ADMIN"``).
    :param request_id: Correlation id for logging/tracing.
    """

    actor_id: int | None = None
    actor_login: str | None = None
    actor_role: str | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Centralize error translation.
    * Offer shared validation helpers (pagination/sorting).

    Notes
    -----
    Services never touch the global session directly; they always go through
    a Unit of Work.
    """

    DEFAULT_READ_ISOLATION = "READ COMMITTED"

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context.
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: SQLAlchemyUnitOfWork
        """
        return SQLAlchemyUnitOfWork()

    def ro_uow(
        self, *, isolation: str | None = None, enforce_db_readonly: bool = True
    ) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :param isolation: Transaction isolation level (e.g. "READ COMMITTED").
        :type isolation: str | None
        :param enforce_db_readonly: Apply `SET TRANSACTION READ ONLY` when supported.
        :type enforce_db_readonly: bool
        :returns: Read-only UoW instance.
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork(
            isolation_level=isolation or self.DEFAULT_READ_ISOLATION,
            enforce_db_readonly=enforce_db_readonly,
        )

    # ----------------------- Validation utilities ---------------------------

    def ensure_pagination(
        self, *, page: int, limit: int, sort: Iterable[str] | None = None
    ) -> Pagination:
        """
        Build a Pagination value object with basic clamping.

        :param page: 1-based page number.
        :type page: int
        :param limit: Page size.
        :type limit: int
        :param sort: Sort tokens like ["-created_at", "name"].
        :type sort: Iterable[str] | None
        :returns: Pagination instance.
        :rtype: Pagination
        """
        page = max(1, int(page))
        limit = max(1, int(limit))
        return Pagination(page=page, limit=limit, sort=list(sort or []))

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map service-level errors to API-level (HTTP) errors.

        The error kind travels as the problem ``code``.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            return api_errors.NotFound(str(exc))

        if isinstance(exc, (TokenInvalidError, TokenMalformedError)):
            return api_errors.Forbidden(str(exc), code=TokenInvalidError.kind)

        if isinstance(exc, InternalServiceError):
            return api_errors.InternalError(str(exc))

        if isinstance(exc, (InvalidCredentialsError, UniquenessViolationError, BadRequestError)):
            return api_errors.BadRequest(str(exc), code=exc.kind)

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(str(exc))

        return exc
