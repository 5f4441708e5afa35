"""Shared pytest fixtures and configuration for the ghpp test suite.

Guidelines
----------
* No internet access in any test.
* HTTP is mocked at the transport with respx.
* Core tests must be pure — no side effects.
* Relative-time tests pass an explicit ``now``.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Any

import pytest
import respx

from ghpp.core.models import License, Owner, RepositoryRecord

API_URL = "https://api.github.com"


def make_record(**overrides: object) -> RepositoryRecord:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "name": "hello",
        "full_name": "octo/hello",
        "html_url": "https://github.com/octo/hello",
        "created_at": datetime(2015, 3, 10, 8, 30, 0, tzinfo=timezone.utc),
        "updated_at": datetime(2025, 1, 15, 10, 0, 0, tzinfo=timezone.utc),
        "stargazers_count": 100,
        "forks": 10,
        "watchers": 7,
        "size": 2048,
        "owner": Owner(login="octo"),
        "license": License(name="MIT License"),
    }
    defaults.update(overrides)
    return RepositoryRecord(**defaults)  # type: ignore[arg-type]


def make_payload(**overrides: object) -> dict[str, Any]:
    """Raw repository object shaped like the GitHub REST response."""
    payload: dict[str, Any] = {
        "id": 1296269,
        "name": "hello",
        "full_name": "octo/hello",
        "html_url": "https://github.com/octo/hello",
        "description": "My first repository on GitHub!",
        "created_at": "2015-03-10T08:30:00Z",
        "updated_at": "2025-01-15T10:00:00Z",
        "stargazers_count": 100,
        "forks": 10,
        "watchers": 7,
        "size": 2048,
        "owner": {"login": "octo", "id": 1},
        "license": {"key": "mit", "name": "MIT License"},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def record() -> RepositoryRecord:
    return make_record()


@pytest.fixture
def payload() -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def github_api() -> Iterator[respx.MockRouter]:
    """Mocked GitHub API; any unmatched request fails the test."""
    with respx.mock(base_url=API_URL, assert_all_called=False) as router:
        yield router
