"""Unit tests for :class:`User` and :class:`Person` attribute validation."""

from __future__ import annotations

import pytest

from petcare.models.enums import Role
from petcare.models.user import Person, User


def test_email_is_normalized():
    user = User(login="  alice ", email="  Alice@Example.COM ")
    assert user.email == "alice@example.com"
    assert user.login == "alice"


@pytest.mark.parametrize("email", ["", "no-at-sign", "user@nodot"])
def test_invalid_email_rejected(email):
    with pytest.raises(ValueError):
        User(login="alice", email=email)


def test_blank_identifier_rejected():
    with pytest.raises(ValueError):
        Person(name="Alice", identifier="   ")


def test_role_authority_and_description():
    assert Role.ADMIN.authority == "ROLE_ADMIN"
    assert Role.DOCTOR.description == "Médico"
