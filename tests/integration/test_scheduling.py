"""Integration tests for the scheduling endpoints."""

from __future__ import annotations

import pytest

from tests.factories.scheduling import SchedulingFactory
from tests.factories.user import UserFactory
from tests.helpers.assertions import assert_pagination, assert_problem
from tests.helpers.auth import auth_headers, issue_access_token

SCHEDULING = "/api/v1/scheduling"


@pytest.fixture()
def owner(db):
    return UserFactory()


@pytest.fixture()
def headers(owner) -> dict[str, str]:
    return auth_headers(issue_access_token(owner))


def test_crud_round(client, owner, headers) -> None:
    payload = {
        "userId": owner.id,
        "title": "Grooming",
        "description": "Bath and trim",
        "day": 10,
        "month": 6,
        "year": 2024,
        "type": "WARNING",
    }

    created = client.post(SCHEDULING, json=payload, headers=headers)
    assert created.status_code == 201
    entry_id = created.get_json()["data"]["id"]

    updated = client.put(
        f"{SCHEDULING}/{entry_id}", json={**payload, "title": "Bath"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.get_json()["data"]["title"] == "Bath"

    deleted = client.delete(f"{SCHEDULING}/{entry_id}", headers=headers)
    assert deleted.get_json()["data"] == {"success": True}
    assert_problem(client.get(f"{SCHEDULING}/{entry_id}", headers=headers), 404, "not_found")


def test_list_hides_deleted(client, headers) -> None:
    entries = SchedulingFactory.create_batch(2)
    client.delete(f"{SCHEDULING}/{entries[0].id}", headers=headers)

    body = client.get(SCHEDULING, headers=headers).get_json()

    assert [e["id"] for e in body["data"]] == [entries[1].id]
    assert_pagination(body["meta"], total=1)


def test_create_for_unknown_user(client, headers) -> None:
    payload = {"userId": 999, "title": "X", "day": 1, "month": 1, "year": 2024}
    assert_problem(client.post(SCHEDULING, json=payload, headers=headers), 404, "not_found")


def test_invalid_date(client, owner, headers) -> None:
    payload = {"userId": owner.id, "title": "X", "day": 30, "month": 2, "year": 2024}
    assert_problem(client.post(SCHEDULING, json=payload, headers=headers), 400, "bad_request")


def test_requires_auth(client) -> None:
    assert_problem(client.get(SCHEDULING), 401, "unauthorized")
