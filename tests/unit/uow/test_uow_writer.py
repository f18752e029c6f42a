"""
Unit tests for :class:`SQLAlchemyUnitOfWork` (writer), using factories.
"""

from __future__ import annotations

import pytest

from petcare.uow import SQLAlchemyUnitOfWork
from tests.factories.user import UserFactory


class TestSQLAlchemyUnitOfWorkWriter:
    def test_commits_on_success(self, db):
        with SQLAlchemyUnitOfWork() as uow:
            uow.users.add(UserFactory.build())

        with SQLAlchemyUnitOfWork() as uow:
            assert uow.users.count() == 1

    def test_rolls_back_on_exception(self, db):
        with pytest.raises(RuntimeError), SQLAlchemyUnitOfWork() as uow:
            uow.users.add(UserFactory.build())
            raise RuntimeError("boom")

        with SQLAlchemyUnitOfWork() as uow:
            assert uow.users.count() == 0

    def test_repositories_share_the_session(self, db):
        with SQLAlchemyUnitOfWork() as uow:
            assert uow.users.session is uow.refresh_tokens.session is uow.schedulings.session
