"""Unit tests for :class:`UserRepository` and the shared soft-delete filter."""

from __future__ import annotations

import pytest

from petcare.repositories.base import Pagination
from petcare.repositories.user import UserRepository
from tests.factories.user import PersonFactory, UserFactory


class TestUserRepository:
    @pytest.fixture()
    def repo(self, session):
        return UserRepository(session=session)

    def test_get_by_login(self, repo):
        user = UserFactory(login="alice")

        assert repo.get_by_login(" alice ").id == user.id
        assert repo.get_by_login("nobody") is None

    def test_uniqueness_checks_honor_exclude_id(self, repo):
        user = UserFactory(
            login="bob", email="bob@example.com", person=PersonFactory(identifier="12345678901")
        )

        assert repo.exists_by_login("bob")
        assert repo.exists_by_email("bob@example.com")
        assert repo.exists_by_identifier("12345678901")
        assert not repo.exists_by_login("bob", exclude_id=user.id)
        assert not repo.exists_by_email("bob@example.com", exclude_id=user.id)
        assert not repo.exists_by_identifier("12345678901", exclude_id=user.id)

    def test_soft_deleted_rows_are_invisible(self, repo, session):
        kept = UserFactory()
        gone = UserFactory(login="gone", email="gone@example.com")

        repo.soft_delete(gone)
        session.commit()

        assert repo.get(gone.id) is None
        assert repo.get_by_login("gone") is None
        assert not repo.exists_by_login("gone")
        assert not repo.exists_by_email("gone@example.com")
        assert repo.count() == 1
        page = repo.paginate(Pagination(page=1, limit=10, sort=[]))
        assert [u.id for u in page.items] == [kept.id]

    def test_soft_delete_deactivates_person(self, repo, session):
        user = UserFactory()
        repo.soft_delete(user)
        session.commit()

        session.refresh(user)
        assert user.active is False
        assert user.person.active is False

    def test_paginate_counts_active_rows_only(self, repo, session):
        users = UserFactory.create_batch(5)
        repo.soft_delete(users[0])
        session.commit()

        page = repo.paginate(Pagination(page=1, limit=3, sort=["-id"]))

        assert page.total == 4
        assert [u.id for u in page.items] == [users[4].id, users[3].id, users[2].id]

    def test_unknown_sort_fields_are_ignored(self, repo):
        users = UserFactory.create_batch(2)
        page = repo.paginate(Pagination(page=1, limit=10, sort=["password_hash"]))
        assert [u.id for u in page.items] == [u.id for u in users]

    def test_save_merges_in_one_write(self, repo, session):
        user = UserFactory(login="before")
        created_at = user.created_at

        candidate = type(user)(
            id=user.id,
            login="after",
            email=user.email,
            role=user.role,
            password_hash=user.password_hash,
        )
        candidate.person_id = user.person_id
        stored = repo.save(candidate)
        session.commit()

        assert stored is user
        assert user.login == "after"
        assert user.active is True
        assert user.created_at == created_at
