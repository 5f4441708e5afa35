"""Core repository service — validates the target and decodes the response.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~ghpp.core.protocols.RepositoryProvider` injected
at construction time (dependency inversion), keeping the core free of
any external-system imports.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~ghpp.exceptions.GhppError` subclasses escape.
* The whole record is decoded before anything is returned, so a bad
  response never produces partial output.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ghpp.core.duration import parse_timestamp
from ghpp.core.models import License, Owner, RepositoryRecord
from ghpp.core.protocols import RepositoryProvider
from ghpp.exceptions import DecodeError, GhppError, TransportError, UsageError

USAGE: str = "Usage: ghpp <owner>/<repo> [--include=\"\"] [--exclude=\"\"] [--since] [--short]"


def parse_repo_spec(spec: str | None) -> tuple[str, str]:
    """Split ``owner/repo`` into its two segments.

    Raises
    ------
    UsageError
        If *spec* is missing, has anything other than exactly one ``/``,
        or either segment is empty.
    """
    if spec is None or not spec.strip():
        raise UsageError("Missing repository argument.", hint=USAGE)

    parts = spec.strip().split("/")
    if len(parts) != 2 or not all(parts):
        raise UsageError(
            f"Invalid repo format: {spec}",
            hint="Use <owner>/<repo>, e.g. psf/requests",
        )
    owner, repo = parts
    return owner, repo


class RepositoryService:
    """Stateless service that fetches and decodes one repository.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`RepositoryProvider` protocol.
    """

    def __init__(self, provider: RepositoryProvider) -> None:
        self._provider: RepositoryProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_repository(self, spec: str | None) -> RepositoryRecord:
        """Fetch ``owner/repo`` and return it as a :class:`RepositoryRecord`.

        Raises
        ------
        UsageError
            If *spec* is not of the form ``owner/repo``.
        TransportError
            If the request could not be completed.
        APIError
            If GitHub returned a non-success status.
        DecodeError
            If the response does not describe a repository.
        """
        owner, repo = parse_repo_spec(spec)
        info = self._fetch(owner, repo)
        return self.parse_repository(info)

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, owner: str, repo: str) -> dict[str, Any]:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.fetch_repository(owner, repo)
        except GhppError:
            raise
        except Exception as exc:
            raise TransportError(
                f"Unexpected provider error: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @classmethod
    def parse_repository(cls, info: dict[str, Any]) -> RepositoryRecord:
        """Convert a raw GitHub repository object into a :class:`RepositoryRecord`.

        Absent counts and strings are rejected rather than defaulted to
        zero or ``""``; only ``license`` may be missing.

        Raises
        ------
        DecodeError
            If a required field is missing or has the wrong type, or a
            timestamp is not RFC-3339.
        """
        if not isinstance(info, dict):
            raise DecodeError("Failed to parse JSON: expected an object.")

        owner = cls._require(info, "owner", dict)
        return RepositoryRecord(
            name=cls._require(info, "name", str),
            full_name=cls._require(info, "full_name", str),
            html_url=cls._require(info, "html_url", str),
            created_at=cls._timestamp(info, "created_at"),
            updated_at=cls._timestamp(info, "updated_at"),
            stargazers_count=cls._integer(info, "stargazers_count"),
            forks=cls._integer(info, "forks"),
            watchers=cls._integer(info, "watchers"),
            size=cls._integer(info, "size"),
            owner=Owner(login=cls._require(owner, "login", str, prefix="owner.")),
            license=cls._parse_license(info.get("license")),
        )

    @staticmethod
    def _require(
        info: dict[str, Any],
        key: str,
        kind: type,
        *,
        prefix: str = "",
    ) -> Any:
        value = info.get(key)
        if not isinstance(value, kind):
            raise DecodeError(
                f"Failed to parse JSON: field '{prefix}{key}' is missing "
                f"or not of type {kind.__name__}.",
            )
        return value

    @classmethod
    def _integer(cls, info: dict[str, Any], key: str) -> int:
        # bool is an int subclass; JSON true/false is not a count
        value = info.get(key)
        if isinstance(value, bool):
            raise DecodeError(f"Failed to parse JSON: field '{key}' is not of type int.")
        return cls._require(info, key, int)

    @classmethod
    def _timestamp(cls, info: dict[str, Any], key: str) -> datetime:
        raw: str = cls._require(info, key, str)
        try:
            return parse_timestamp(raw)
        except ValueError as exc:
            raise DecodeError(
                f"Failed to parse JSON: field '{key}' is not a timestamp: {raw}",
            ) from exc

    @classmethod
    def _parse_license(cls, raw: object) -> License | None:
        """``null`` or an absent key both mean "no license"."""
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise DecodeError("Failed to parse JSON: field 'license' is not an object.")
        return License(name=cls._require(raw, "name", str, prefix="license."))
