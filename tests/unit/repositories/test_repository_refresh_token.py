"""Unit tests for :class:`RefreshTokenRepository`."""

from __future__ import annotations

from datetime import timedelta

import pytest

from petcare.models.base import utcnow
from petcare.models.refresh_token import RefreshToken
from petcare.repositories.refresh_token import RefreshTokenRepository
from tests.factories.refresh_token import RefreshTokenFactory
from tests.factories.user import UserFactory


class TestRefreshTokenRepository:
    @pytest.fixture()
    def repo(self, session):
        return RefreshTokenRepository(session=session)

    def test_create_and_find(self, repo, session):
        user = UserFactory()
        repo.create(token="abc", owner_id=user.id, created_at=utcnow())
        session.commit()

        record = repo.find_by_token("abc")
        assert record is not None
        assert record.owner_id == user.id
        assert record.used is False
        assert repo.find_by_token("missing") is None

    def test_invalidate_all_for_owner(self, repo, session):
        user = UserFactory()
        other = UserFactory()
        RefreshTokenFactory.create_batch(2, owner=user)
        foreign = RefreshTokenFactory(owner=other)

        assert repo.invalidate_all_for_owner(user.id) == 2
        session.commit()

        rows = session.query(RefreshToken).filter_by(owner_id=user.id).all()
        assert all(row.used for row in rows)
        session.refresh(foreign)
        assert foreign.used is False

    def test_claim_consumes_once(self, repo, session):
        record = RefreshTokenFactory()
        not_before = utcnow() - timedelta(minutes=5)

        assert repo.claim(token=record.token, owner_id=record.owner_id, not_before=not_before)
        assert not repo.claim(token=record.token, owner_id=record.owner_id, not_before=not_before)
        session.commit()

        session.refresh(record)
        assert record.used is True

    def test_claim_rejects_stale_record(self, repo, freeze_time):
        with freeze_time("2024-01-01 12:00:00") as frozen:
            record = RefreshTokenFactory()
            frozen.tick(timedelta(minutes=5, seconds=1))
            not_before = utcnow() - timedelta(minutes=5)

            assert not repo.claim(
                token=record.token, owner_id=record.owner_id, not_before=not_before
            )

    def test_claim_rejects_foreign_owner(self, repo):
        record = RefreshTokenFactory()
        intruder = UserFactory()
        assert not repo.claim(
            token=record.token,
            owner_id=intruder.id,
            not_before=utcnow() - timedelta(minutes=5),
        )
