"""Integration tests for authentication endpoints."""

from __future__ import annotations

from tests.factories.user import DEFAULT_PASSWORD, UserFactory
from tests.helpers.assertions import assert_problem
from tests.helpers.auth import auth_headers

AUTH = "/api/v1/auth/authenticate"
REFRESH = "/api/v1/auth/refresh-token"


def _login(client, login: str = "alice", password: str = DEFAULT_PASSWORD):
    return client.post(AUTH, json={"login": login, "password": password})


def test_authenticate_returns_token_pair(client) -> None:
    UserFactory(login="alice")

    resp = _login(client)

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["accessToken"] and data["refreshToken"]
    assert resp.headers["X-Request-ID"]


def test_authenticate_wrong_password(client) -> None:
    UserFactory(login="alice")
    assert_problem(_login(client, password="nope"), 400, "invalid_credentials")


def test_authenticate_validation_error(client) -> None:
    resp = client.post(AUTH, json={"login": "alice"})
    body = assert_problem(resp, 422, "validation_error")
    assert "password" in body["details"]["errors"]


def test_authenticate_refresh_then_reuse(client) -> None:
    """authenticate -> refresh -> refresh again with the first token fails with 403."""
    UserFactory(login="alice")
    first = _login(client).get_json()["data"]

    resp = client.post(REFRESH, json={"refreshToken": first["refreshToken"]})
    assert resp.status_code == 200
    second = resp.get_json()["data"]
    assert second["refreshToken"] != first["refreshToken"]

    reuse = client.post(REFRESH, json={"refreshToken": first["refreshToken"]})
    assert_problem(reuse, 403, "token_invalid")


def test_refresh_with_garbage(client) -> None:
    assert_problem(client.post(REFRESH, json={"refreshToken": "garbage"}), 403, "token_invalid")


def test_access_token_opens_protected_routes(client) -> None:
    user = UserFactory(login="alice")
    tokens = _login(client).get_json()["data"]

    resp = client.get(f"/api/v1/users/{user.id}", headers=auth_headers(tokens["accessToken"]))

    assert resp.status_code == 200
    assert resp.get_json()["data"]["login"] == "alice"


def test_refresh_token_is_not_an_access_token(client) -> None:
    user = UserFactory(login="alice")
    tokens = _login(client).get_json()["data"]

    resp = client.get(f"/api/v1/users/{user.id}", headers=auth_headers(tokens["refreshToken"]))

    assert_problem(resp, 401, "token_invalid")


def test_missing_token(client) -> None:
    assert_problem(client.get("/api/v1/users"), 401, "unauthorized")
