"""Generic repository base and query utilities for SQLAlchemy 2.x.

This module centralizes persistence-only concerns shared by all repositories:
- The soft-delete filter: every read goes through :meth:`BaseRepository._select`,
  which adds ``active IS true`` for models carrying the ``active`` flag.
- Safe sorting with a whitelist mapping (prevents SQL injection).
- Deterministic pagination (adds primary-key tiebreaker).
- No business logic, no commit/rollback; services own transactions.

Design decisions
----------------
* Repositories never hard-delete soft-deletable rows; :meth:`BaseRepository.soft_delete`
  is the only removal primitive.
* Sorting is opt-in per aggregate via ``_sortable_fields`` mapping.
* Eager-loading is opt-in via ``_default_eagerload`` to avoid N+1.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from petcare.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


# ------------------------------- Pagination ----------------------------------


@dataclass(slots=True)
class Pagination:
    """Pagination input parameters.

    :param page: 1-based page number (validated to be ``>= 1``).
    :type page: int
    :param limit: Page size (validated to be ``>= 1``).
    :type limit: int
    :param sort: Public sort tokens (e.g., ``["-created_at", "name"]``).
    :type sort: list[str]
    """

    page: int
    limit: int
    sort: list[str]


@dataclass(slots=True)
class Page(Generic[E]):
    """Result page with metadata.

    :param items: Listed entities in the current page.
    :type items: Sequence[E]
    :param total: Total item count for the query.
    :type total: int
    :param page: 1-based current page number.
    :type page: int
    :param limit: Page size.
    :type limit: int
    """

    items: Sequence[E]
    total: int
    page: int
    limit: int


# ----------------------------- Sorting utilities -----------------------------


def parse_sort_tokens(raw: Iterable[str]) -> list[tuple[str, bool]]:
    """Parse public sort tokens into ``(field, is_desc)`` tuples.

    :param raw: Public tokens like ``["-created_at", "name"]``.
    :type raw: Iterable[str]
    :returns: List of ``(field_name, is_desc)`` tokens.
    :rtype: list[tuple[str, bool]]
    """
    parsed: list[tuple[str, bool]] = []
    for token in raw:
        is_desc = token.startswith("-")
        field = token[1:] if is_desc else token
        field = field.strip()
        if field:
            parsed.append((field, is_desc))
    return parsed


def apply_sorting(
    stmt: Select[Any],
    sortable_fields: Mapping[str, InstrumentedAttribute[Any]],
    tokens: Iterable[str],
    *,
    pk_attr: InstrumentedAttribute[Any] | None,
) -> Select[Any]:
    """Apply safe ``ORDER BY`` clauses based on a whitelist mapping.

    Unknown sort tokens are ignored silently. The model's primary key is always
    appended as a final ascending tiebreaker to stabilize pagination.

    :param stmt: Base selectable.
    :type stmt: :class:`sqlalchemy.sql.Select`
    :param sortable_fields: Public field → SQLAlchemy attribute mapping.
    :type sortable_fields: Mapping[str, InstrumentedAttribute]
    :param tokens: Public sort tokens (e.g., ``["-created_at"]``).
    :type tokens: Iterable[str]
    :param pk_attr: Primary-key attribute used as a tiebreaker.
    :type pk_attr: InstrumentedAttribute | None
    :returns: Modified select with ``ORDER BY`` clauses.
    :rtype: :class:`sqlalchemy.sql.Select`
    """
    orders: list[Any] = []
    for field, is_desc in parse_sort_tokens(tokens):
        col = sortable_fields.get(field)
        if isinstance(col, InstrumentedAttribute):
            orders.append(col.desc() if is_desc else col.asc())

    if orders:
        stmt = stmt.order_by(*orders)

    if pk_attr is not None:
        stmt = stmt.order_by(pk_attr.asc())

    return stmt


def paginate_select(
    session: Session,
    stmt: Select[Any],
    *,
    page: int,
    limit: int,
) -> tuple[list[Any], int]:
    """Execute a select with pagination and a total count.

    The statement's existing ``ORDER BY`` is stripped for the ``COUNT`` to avoid
    unnecessary sorting overhead.

    :param session: Active SQLAlchemy session.
    :type session: :class:`sqlalchemy.orm.Session`
    :param stmt: Base select to paginate (already filtered/sorted).
    :type stmt: :class:`sqlalchemy.sql.Select`
    :param page: 1-based page number (will be clamped to ``>= 1``).
    :type page: int
    :param limit: Page size (will be clamped to ``>= 1``).
    :type limit: int
    :returns: Tuple of ``(items, total)``.
    :rtype: tuple[list[Any], int]
    """
    page = max(int(page), 1)
    limit = max(int(limit), 1)

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = int(session.execute(count_stmt).scalar_one())

    offset = (page - 1) * limit
    sliced = stmt.limit(limit).offset(offset)
    items = list(session.execute(sliced).scalars().all())
    return items, total


# ------------------------------ Base repository ------------------------------


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define:

    * ``model``: the SQLAlchemy mapped class.

    Subclasses MAY override:

    * ``_sortable_fields`` to expose safe sort keys.
    * ``_default_eagerload`` to attach eager-loading options.

    This class NEVER opens, commits or rolls back transactions.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        When no explicit session is provided the repository falls back to the
        Flask-scoped session exposed by ``petcare.core.extensions``.

        :param session: Session shared across the Unit of Work scope.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the active SQLAlchemy session."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        """Attach eager-loading options to generic get/list operations."""
        return stmt

    def _pk_attr(self) -> InstrumentedAttribute[Any] | None:
        """Return the model's primary-key attribute (``model.id``) if available."""
        return getattr(self.model, "id", None)

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist mapping of public sort keys to model attributes."""
        return {}

    # ------------------------------ Internals --------------------------------

    @property
    def soft_deletable(self) -> bool:
        """Whether the model carries the ``active`` flag."""
        return isinstance(getattr(self.model, "active", None), InstrumentedAttribute)

    def _active_filter(self) -> ColumnElement[bool] | None:
        """Return the ``active IS true`` predicate, or ``None`` for plain models."""
        if not self.soft_deletable:
            return None
        return cast(ColumnElement[bool], self.model.active.is_(True))  # type: ignore[attr-defined]

    def _select(self, *columns: Any) -> Select[Any]:
        """Base ``SELECT`` every read starts from, with the active filter applied.

        :param columns: Optional columns to select instead of the whole entity.
        :returns: Filtered select.
        :rtype: :class:`sqlalchemy.sql.Select`
        """
        stmt: Select[Any] = select(*columns) if columns else select(self.model)
        if columns:
            stmt = stmt.select_from(self.model)
        active = self._active_filter()
        if active is not None:
            stmt = stmt.where(active)
        return stmt

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage a new entity for persistence and flush to materialize the PK.

        :param instance: New entity instance.
        :type instance: E
        :returns: The same instance after ``flush()``.
        :rtype: E
        """
        self.session.add(instance)
        self.flush()
        return instance

    def save(self, instance: E) -> E:
        """Write the state of ``instance`` onto its persistent row in one flush.

        ``instance`` may be a detached or transient object carrying the
        primary key of an existing row; only attributes set on it are copied.

        :param instance: Entity holding the desired state.
        :type instance: E
        :returns: The persistent instance tracked by the session.
        :rtype: E
        """
        merged = self.session.merge(instance)
        self.flush()
        return merged

    def get(self, entity_id: Any) -> E | None:
        """Retrieve a single active entity by primary key.

        :param entity_id: Primary-key value.
        :type entity_id: Any
        :returns: Entity or ``None`` when missing or soft-deleted.
        :rtype: E | None
        :raises RuntimeError: If no PK attribute can be detected.
        """
        pk_attr = self._pk_attr()
        if pk_attr is None:
            raise RuntimeError("BaseRepository.get requires a detectable PK attribute.")
        stmt = self._default_eagerload(self._select().where(pk_attr == entity_id))
        result = self.session.execute(stmt).scalars().first()
        return cast(E | None, result)

    def count(self) -> int:
        """Return the number of active rows."""
        stmt = self._select(func.count(self._pk_attr()))
        return int(self.session.execute(stmt).scalar_one())

    def soft_delete(self, instance: E) -> None:
        """Flip ``active`` to ``False`` and flush. Rows are never removed.

        :param instance: Entity to deactivate.
        :type instance: E
        :raises TypeError: If the model has no ``active`` flag.
        """
        if not self.soft_deletable:
            raise TypeError(f"{self.model.__name__} does not support soft deletion.")
        instance.active = False  # type: ignore[attr-defined]
        self.flush()

    def flush(self) -> None:
        """Flush pending changes to the database without committing."""
        self.session.flush()

    # ------------------------------- Listing ---------------------------------

    def paginate(self, pagination: Pagination) -> Page[E]:
        """Paginate active entities with stable sorting.

        The total reflects active rows only.

        :param pagination: Pagination parameters.
        :type pagination: Pagination
        :returns: :class:`Page` with items and metadata.
        :rtype: Page[E]
        """
        stmt = self._default_eagerload(self._select())
        stmt = apply_sorting(
            stmt, self._sortable_fields(), pagination.sort, pk_attr=self._pk_attr()
        )
        raw_items, total = paginate_select(
            self.session,
            stmt,
            page=pagination.page,
            limit=pagination.limit,
        )
        return Page(
            items=cast(list[E], raw_items),
            total=total,
            page=pagination.page,
            limit=pagination.limit,
        )
