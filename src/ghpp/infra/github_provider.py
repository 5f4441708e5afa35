"""httpx-backed implementation of :class:`~ghpp.core.protocols.RepositoryProvider`.

This module is the **only** place in the codebase that imports ``httpx``.
All httpx exceptions are caught here and re-raised as typed
:class:`~ghpp.exceptions.GhppError` subclasses — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

from typing import Any

import httpx

from ghpp.exceptions import APIError, DecodeError, TransportError, hint_for_status
from ghpp.utils.constants import DEFAULT_TIMEOUT, GITHUB_API_URL, REQUEST_HEADERS


class GitHubRepositoryProvider:
    """Concrete :class:`RepositoryProvider` backed by the GitHub REST API.

    Usage::

        provider = GitHubRepositoryProvider()
        info = provider.fetch_repository("psf", "requests")

    A fresh client is opened per call and closed before returning, on
    success and on every failure path.
    """

    def __init__(
        self,
        base_url: str = GITHUB_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout

    @property
    def headers(self) -> dict[str, str]:
        return dict(REQUEST_HEADERS)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
        )

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def fetch_repository(self, owner: str, repo: str) -> dict[str, Any]:
        """GET ``/repos/{owner}/{repo}`` and return the decoded JSON object.

        Raises
        ------
        TransportError
            On DNS, connection, TLS or timeout failures.
        APIError
            When the status code is anything other than 200.
        DecodeError
            When the body is not a JSON object.
        """
        try:
            with self._client() as client:
                resp = client.get(f"/repos/{owner}/{repo}")
        except httpx.RequestError as exc:
            raise TransportError(
                f"Failed to fetch repository: {exc}",
                hint="Check your network connection and try again.",
            ) from exc

        if resp.status_code != httpx.codes.OK:
            raise APIError(resp.status_code, hint=hint_for_status(resp.status_code))

        try:
            data: Any = resp.json()
        except ValueError as exc:
            raise DecodeError(f"Failed to parse JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise DecodeError("Failed to parse JSON: expected an object.")
        return data
