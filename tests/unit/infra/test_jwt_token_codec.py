"""Unit tests for :class:`JWTTokenCodec`."""

from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from petcare.infra.jwt.jwt_token_codec import JWTTokenCodec
from petcare.services._shared.errors import TokenMalformedError

SECRET = "unit-test-secret-with-at-least-32-bytes!"


@pytest.fixture()
def codec() -> JWTTokenCodec:
    return JWTTokenCodec(SECRET)


class TestSignAndParse:
    def test_sign_embeds_subject_times_and_claims(self, codec, freeze_time):
        with freeze_time("2024-03-01 10:00:00"):
            token = codec.sign({"email": "a@example.com"}, "alice", timedelta(minutes=24))
            claims = codec.verify_and_parse(token)

        assert claims["sub"] == "alice"
        assert claims["email"] == "a@example.com"
        assert claims["exp"] - claims["iat"] == 24 * 60

    def test_signature_is_hs256(self, codec):
        token = codec.sign({}, "alice", timedelta(minutes=1))
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_expired_token_still_parses(self, codec, freeze_time):
        with freeze_time("2024-03-01 10:00:00") as frozen:
            token = codec.sign({"role": "ROLE_USER"}, "alice", timedelta(minutes=1))
            frozen.tick(timedelta(hours=1))
            assert codec.extract_claim(token, "role") == "ROLE_USER"

    def test_tampered_token_is_malformed(self, codec):
        token = codec.sign({}, "alice", timedelta(minutes=1))
        other = JWTTokenCodec("another-secret-with-at-least-32-bytes!!")
        with pytest.raises(TokenMalformedError):
            other.verify_and_parse(token)

    def test_garbage_is_malformed(self, codec):
        with pytest.raises(TokenMalformedError):
            codec.extract_subject("not-a-jwt")

    def test_empty_secret_cannot_sign_or_verify(self, codec):
        token = codec.sign({}, "alice", timedelta(minutes=1))
        broken = JWTTokenCodec("")
        with pytest.raises(ValueError):
            broken.sign({}, "alice", timedelta(minutes=1))
        with pytest.raises(TokenMalformedError):
            broken.verify_and_parse(token)


class TestIsCurrentlyValid:
    def test_valid_for_matching_subject_before_expiry(self, codec):
        token = codec.sign({}, "alice", timedelta(minutes=5))
        assert codec.is_currently_valid(token, "alice") is True

    def test_subject_mismatch_is_invalid(self, codec):
        token = codec.sign({}, "alice", timedelta(minutes=5))
        assert codec.is_currently_valid(token, "bob") is False

    def test_expired_access_token_is_invalid(self, codec, freeze_time):
        with freeze_time("2024-03-01 10:00:00") as frozen:
            token = codec.sign({}, "alice", timedelta(minutes=24))
            frozen.tick(timedelta(minutes=24, seconds=1))
            assert codec.is_currently_valid(token, "alice") is False

    def test_malformed_token_is_invalid(self, codec):
        assert codec.is_currently_valid("x.y.z", "alice") is False
