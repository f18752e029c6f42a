"""Tests for the ``flask seed`` command group."""

from __future__ import annotations

from sqlalchemy import select

from petcare.models.enums import Role
from petcare.models.user import User
from tests.factories.user import UserFactory


def _invoke(app, *args: str):
    return app.test_cli_runner().invoke(
        args=["seed", "admin", "--password", "Adm1n!pass", *args],
    )


def test_seed_admin_creates_administrator(app, session) -> None:
    result = _invoke(app, "--login", "root", "--email", "root@petcare.test")

    assert result.exit_code == 0, result.output
    assert "Created admin 'root'" in result.output

    admin = session.execute(select(User).where(User.login == "root")).scalar_one()
    assert admin.role is Role.ADMIN
    assert admin.password_hash != "Adm1n!pass"
    assert admin.person.name == "Administrator"


def test_seed_admin_rejects_taken_login(app, session) -> None:
    UserFactory(login="root")

    result = _invoke(app, "--login", "root", "--email", "other@petcare.test")

    assert result.exit_code != 0
    assert "Seeding failed" in result.output
