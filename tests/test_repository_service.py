"""Tests for RepositoryService (core/repository_service.py).

The :class:`RepositoryProvider` dependency is **mocked** — no internet
access.  These tests verify:

* ``owner/repo`` validation
* Raw-dict → domain-model parsing
* Exception mapping (provider errors → our hierarchy)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest

from conftest import make_payload
from ghpp.core.models import License, Owner, RepositoryRecord
from ghpp.core.repository_service import RepositoryService, parse_repo_spec
from ghpp.exceptions import APIError, DecodeError, TransportError, UsageError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fake_provider(info: dict[str, Any] | Exception) -> MagicMock:
    """Return a mock RepositoryProvider.

    If *info* is a dict, ``fetch_repository`` returns it.
    If *info* is an exception, ``fetch_repository`` raises it.
    """
    provider = MagicMock()
    if isinstance(info, Exception):
        provider.fetch_repository.side_effect = info
    else:
        provider.fetch_repository.return_value = info
    return provider


# ---------------------------------------------------------------------------
# owner/repo validation
# ---------------------------------------------------------------------------

class TestParseRepoSpec:
    def test_valid(self) -> None:
        assert parse_repo_spec("psf/requests") == ("psf", "requests")

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert parse_repo_spec("  psf/requests ") == ("psf", "requests")

    @pytest.mark.parametrize("spec", [None, "", "   "])
    def test_missing(self, spec: str | None) -> None:
        with pytest.raises(UsageError, match="Missing repository") as exc_info:
            parse_repo_spec(spec)
        assert exc_info.value.hint is not None
        assert "Usage: ghpp" in exc_info.value.hint

    @pytest.mark.parametrize(
        "spec",
        ["requests", "psf/requests/extra", "/requests", "psf/", "/", "psf//requests"],
    )
    def test_malformed(self, spec: str) -> None:
        with pytest.raises(UsageError, match="Invalid repo format"):
            parse_repo_spec(spec)


# ---------------------------------------------------------------------------
# get_repository — fetch + parse
# ---------------------------------------------------------------------------

class TestGetRepository:
    def test_returns_record(self) -> None:
        provider = _fake_provider(make_payload())
        record = RepositoryService(provider).get_repository("octo/hello")

        provider.fetch_repository.assert_called_once_with("octo", "hello")
        assert isinstance(record, RepositoryRecord)
        assert record.name == "hello"
        assert record.full_name == "octo/hello"
        assert record.stargazers_count == 100
        assert record.forks == 10
        assert record.watchers == 7
        assert record.size == 2048
        assert record.owner == Owner(login="octo")
        assert record.license == License(name="MIT License")
        assert record.created_at == datetime(2015, 3, 10, 8, 30, tzinfo=timezone.utc)

    def test_bad_spec_never_calls_provider(self) -> None:
        provider = _fake_provider(make_payload())
        with pytest.raises(UsageError):
            RepositoryService(provider).get_repository("nope")
        provider.fetch_repository.assert_not_called()

    def test_our_errors_propagate_unchanged(self) -> None:
        err = APIError(404)
        svc = RepositoryService(_fake_provider(err))
        with pytest.raises(APIError) as exc_info:
            svc.get_repository("octo/hello")
        assert exc_info.value is err

    def test_unexpected_provider_error_wrapped(self) -> None:
        svc = RepositoryService(_fake_provider(RuntimeError("socket closed")))
        with pytest.raises(TransportError, match="socket closed"):
            svc.get_repository("octo/hello")


# ---------------------------------------------------------------------------
# parse_repository
# ---------------------------------------------------------------------------

class TestParseRepository:
    def test_null_license(self) -> None:
        record = RepositoryService.parse_repository(make_payload(license=None))
        assert record.license is None

    def test_absent_license(self) -> None:
        payload = make_payload()
        del payload["license"]
        assert RepositoryService.parse_repository(payload).license is None

    def test_extra_keys_ignored(self) -> None:
        record = RepositoryService.parse_repository(make_payload(topics=["cli"]))
        assert record.name == "hello"

    @pytest.mark.parametrize(
        "key",
        ["name", "full_name", "html_url", "created_at", "updated_at",
         "stargazers_count", "forks", "watchers", "size", "owner"],
    )
    def test_missing_required_field(self, key: str) -> None:
        payload = make_payload()
        del payload[key]
        with pytest.raises(DecodeError, match=key):
            RepositoryService.parse_repository(payload)

    def test_missing_owner_login(self) -> None:
        with pytest.raises(DecodeError, match="owner.login"):
            RepositoryService.parse_repository(make_payload(owner={"id": 1}))

    def test_license_without_name(self) -> None:
        with pytest.raises(DecodeError, match="license.name"):
            RepositoryService.parse_repository(make_payload(license={"key": "mit"}))

    def test_license_wrong_type(self) -> None:
        with pytest.raises(DecodeError, match="license"):
            RepositoryService.parse_repository(make_payload(license="MIT"))

    def test_count_as_string_rejected(self) -> None:
        with pytest.raises(DecodeError, match="forks"):
            RepositoryService.parse_repository(make_payload(forks="10"))

    def test_count_as_bool_rejected(self) -> None:
        with pytest.raises(DecodeError, match="watchers"):
            RepositoryService.parse_repository(make_payload(watchers=True))

    @pytest.mark.parametrize(
        "raw",
        [
            "yesterday",
            "2015-03-10T08:30:00",
            "2015-03-10",
            "2015-03-10 08:30:00Z",
            "20150310T083000Z",
            "2015-13-10T08:30:00Z",
        ],
    )
    def test_bad_timestamp(self, raw: str) -> None:
        with pytest.raises(DecodeError, match="created_at"):
            RepositoryService.parse_repository(make_payload(created_at=raw))

    def test_naive_updated_at_rejected(self) -> None:
        with pytest.raises(DecodeError, match="updated_at"):
            RepositoryService.parse_repository(
                make_payload(updated_at="2025-01-15T10:00:00"),
            )

    def test_offset_timestamp_accepted(self) -> None:
        record = RepositoryService.parse_repository(
            make_payload(created_at="2015-03-10T10:30:00+02:00"),
        )
        assert record.created_at == datetime(2015, 3, 10, 8, 30, tzinfo=timezone.utc)

    def test_not_an_object(self) -> None:
        with pytest.raises(DecodeError, match="expected an object"):
            RepositoryService.parse_repository([])  # type: ignore[arg-type]
