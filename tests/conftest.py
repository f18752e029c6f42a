"""Pytest fixtures for the PetCare API.

Each test gets a fresh schema on an in-memory SQLite database. Services
commit through their own units of work, so isolation comes from recreating
the tables rather than from an outer rolled-back transaction.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest
from flask import Flask

from petcare.core.config import TestingConfig
from petcare.core.extensions import db as _db
from petcare.factory import create_app


@pytest.fixture(scope="session")
def app() -> Flask:
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    return create_app(TestingConfig, instance_relative_config=False)


@pytest.fixture()
def db(app: Flask) -> Generator[Any, None, None]:
    """Create all tables inside an application context and drop them afterwards.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the testing application.
    """
    with app.app_context():
        _db.create_all()
        try:
            yield _db
        finally:
            _db.session.remove()
            _db.drop_all()


@pytest.fixture()
def session(db: Any) -> Any:
    """The Flask-scoped session shared by services, repositories and factories."""
    return db.session


@pytest.fixture()
def client(app: Flask, db: Any) -> Any:
    """Return a Flask test client bound to the per-test schema."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


@pytest.fixture()
def freeze_time() -> Callable[..., Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01 12:00:00") as frozen:
    ...         frozen.tick(60)
    """
    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None, **kwargs: Any) -> Any:
        return _freeze_time(target or "2024-01-01 12:00:00", **kwargs)

    return _factory


# -- Hook up Factory Boy to the session ----------------------------------------
@pytest.fixture(autouse=True)
def _factories_session(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Wire Factory Boy's session helper when the test uses the database."""
    from tests.factories import SQLAlchemySession

    if "db" in request.fixturenames:
        SQLAlchemySession.set(request.getfixturevalue("session"))
    yield
    SQLAlchemySession.set(None)
