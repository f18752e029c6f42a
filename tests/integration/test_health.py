"""Smoke test for the health endpoint."""

from __future__ import annotations


def test_health(client) -> None:
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.get_json()["db"] == "ok"
