# tests/unit/services/test_auth_service.py
from __future__ import annotations

import logging
from datetime import timedelta
from unittest.mock import patch

import pytest

from petcare.models.refresh_token import RefreshToken
from petcare.services._shared.errors import (
    InternalServiceError,
    InvalidCredentialsError,
    TokenInvalidError,
)
from petcare.services.auth.dto import AuthTokenConfig, LoginIn, RefreshIn, TokenPairOut
from petcare.services.users.service import UserService
from tests.factories.user import DEFAULT_PASSWORD, UserFactory
from tests.helpers.auth import build_auth_service


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def service(db):
    return build_auth_service()


@pytest.fixture()
def user(db):
    return UserFactory(login="alice", email="alice@example.com")


def _records(session, owner_id: int) -> list[RefreshToken]:
    session.expire_all()
    return session.query(RefreshToken).filter_by(owner_id=owner_id).order_by(RefreshToken.id).all()


# ---------------------------- Authenticate -------------------------------- #
class TestAuthenticate:
    def test_issues_pair_and_stores_unused_record(self, service, user, session):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        assert isinstance(pair, TokenPairOut)
        assert pair.access_token and pair.refresh_token
        records = _records(session, user.id)
        assert [(r.token, r.used) for r in records] == [(pair.refresh_token, False)]

    def test_access_claims(self, service, user):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        claims = service.tokens.verify_and_parse(pair.access_token)

        assert claims["sub"] == "alice"
        assert claims["id"] == str(user.id)
        assert claims["name"] == user.person.name
        assert claims["email"] == "alice@example.com"
        assert claims["role"] == "ROLE_USER"
        assert claims["exp"] - claims["iat"] == 24 * 60

    def test_refresh_token_lifetime_is_24_hours(self, service, user):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        claims = service.tokens.verify_and_parse(pair.refresh_token)

        assert claims["sub"] == "alice"
        assert claims["exp"] - claims["iat"] == 24 * 3600
        assert "role" not in claims

    def test_refresh_claims_carry_no_user_data(self, service, user, freeze_time):
        with freeze_time():
            first = service.mint_refresh_token("alice")
            second = service.mint_refresh_token("alice")

        claims = service.tokens.verify_and_parse(first)
        assert set(claims) == {"sub", "iat", "exp", "jti"}
        assert first != second

    def test_second_login_invalidates_previous_records(self, service, user, session):
        first = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        second = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        by_token = {r.token: r.used for r in _records(session, user.id)}
        assert by_token == {first.refresh_token: True, second.refresh_token: False}

    @pytest.mark.parametrize(
        ("login", "password"), [("alice", "wrong-password"), ("nobody", DEFAULT_PASSWORD)]
    )
    def test_invalid_credentials(self, service, user, session, login, password, caplog):
        with caplog.at_level(logging.WARNING), pytest.raises(InvalidCredentialsError):
            service.authenticate(LoginIn(login=login, password=password))

        assert _records(session, user.id) == []
        assert "Authentication failed" in caplog.text

    def test_soft_deleted_user_cannot_authenticate(self, service, user):
        UserService(password_hasher=service.hasher).delete_by_id(user.id)

        with pytest.raises(InvalidCredentialsError):
            service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

    def test_failure_while_storing_rolls_back(self, service, user, session):
        service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        with (
            patch(
                "petcare.repositories.refresh_token.RefreshTokenRepository.create",
                side_effect=RuntimeError("disk full"),
            ),
            pytest.raises(RuntimeError),
        ):
            service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        # The earlier record was not invalidated by the failed attempt.
        assert [r.used for r in _records(session, user.id)] == [False]


# ------------------------------ Refresh ----------------------------------- #
class TestRefresh:
    def test_refresh_consumes_presented_token(self, service, user, session):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        new_pair = service.refresh(RefreshIn(refresh_token=pair.refresh_token))

        assert new_pair.refresh_token != pair.refresh_token
        by_token = {r.token: r.used for r in _records(session, user.id)}
        assert by_token == {pair.refresh_token: True, new_pair.refresh_token: False}

    def test_reuse_is_rejected(self, service, user):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        service.refresh(RefreshIn(refresh_token=pair.refresh_token))

        with pytest.raises(TokenInvalidError):
            service.refresh(RefreshIn(refresh_token=pair.refresh_token))

    def test_chain_of_refreshes(self, service, user):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        for _ in range(3):
            pair = service.refresh(RefreshIn(refresh_token=pair.refresh_token))
        assert service.tokens.extract_subject(pair.access_token) == "alice"

    def test_record_older_than_window_is_rejected(self, service, user, freeze_time, caplog):
        with freeze_time("2024-01-01 12:00:00") as frozen:
            pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
            frozen.tick(timedelta(minutes=5, seconds=1))

            # The JWT itself is still far from its 24 hour expiry.
            assert service.tokens.is_currently_valid(pair.refresh_token, "alice")
            with caplog.at_level(logging.WARNING), pytest.raises(TokenInvalidError):
                service.refresh(RefreshIn(refresh_token=pair.refresh_token))

        assert "stale" in caplog.text

    def test_record_within_window_is_accepted(self, service, user, freeze_time):
        with freeze_time("2024-01-01 12:00:00") as frozen:
            pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
            frozen.tick(timedelta(minutes=4, seconds=59))
            assert service.refresh(RefreshIn(refresh_token=pair.refresh_token))

    def test_superseded_by_new_login_is_rejected(self, service, user, caplog):
        old = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        with caplog.at_level(logging.WARNING), pytest.raises(TokenInvalidError):
            service.refresh(RefreshIn(refresh_token=old.refresh_token))
        assert "already_used" in caplog.text

    def test_malformed_token_is_rejected(self, service, user):
        with pytest.raises(TokenInvalidError):
            service.refresh(RefreshIn(refresh_token="garbage"))

    def test_expired_token_is_rejected(self, db, user):
        service = build_auth_service(AuthTokenConfig(refresh_expires=timedelta(seconds=-1)))
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        with pytest.raises(TokenInvalidError):
            service.refresh(RefreshIn(refresh_token=pair.refresh_token))

    def test_unknown_token_for_valid_subject_is_rejected(self, service, user):
        forged = service.mint_refresh_token("alice")
        with pytest.raises(TokenInvalidError):
            service.refresh(RefreshIn(refresh_token=forged))

    def test_deleted_subject_is_rejected(self, service, user):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        UserService(password_hasher=service.hasher).delete_by_id(user.id)

        with pytest.raises(TokenInvalidError):
            service.refresh(RefreshIn(refresh_token=pair.refresh_token))

    def test_token_of_another_user_is_rejected(self, service, user):
        UserFactory(login="mallory")
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))
        mallory_token = service.tokens.sign({}, "mallory", timedelta(hours=1))

        with pytest.raises(TokenInvalidError):
            service.refresh(RefreshIn(refresh_token=mallory_token))
        # Alice's token is untouched by the failed attempt.
        assert service.refresh(RefreshIn(refresh_token=pair.refresh_token))

    def test_unexpected_failure_becomes_internal(self, service, user):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        with (
            patch(
                "petcare.repositories.refresh_token.RefreshTokenRepository.claim",
                side_effect=RuntimeError("db down"),
            ),
            pytest.raises(InternalServiceError) as excinfo,
        ):
            service.refresh(RefreshIn(refresh_token=pair.refresh_token))

        assert isinstance(excinfo.value.__cause__, RuntimeError)

    def test_token_invalid_is_not_downgraded(self, service, user):
        pair = service.authenticate(LoginIn(login="alice", password=DEFAULT_PASSWORD))

        with (
            patch(
                "petcare.repositories.refresh_token.RefreshTokenRepository.claim",
                return_value=False,
            ),
            pytest.raises(TokenInvalidError),
        ):
            service.refresh(RefreshIn(refresh_token=pair.refresh_token))
