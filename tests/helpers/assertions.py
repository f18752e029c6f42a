"""Assertion helper utilities for tests."""

from __future__ import annotations


def assert_problem(response, status: int, code: str) -> dict:
    """Check that ``response`` is an RFC 7807 problem with ``status`` and ``code``.

    Returns
    -------
    dict
        The decoded problem document.
    """

    assert response.status_code == status, response.get_data(as_text=True)
    assert response.mimetype == "application/problem+json"
    body = response.get_json()
    assert body["status"] == status
    assert body["code"] == code
    return body


def assert_pagination(meta: dict, *, total: int, page: int = 1) -> None:
    """Validate the ``meta`` block of a paginated response."""

    assert {"total", "page", "limit", "hasPrev", "hasNext"} <= meta.keys()
    assert meta["total"] == total
    assert meta["page"] == page
