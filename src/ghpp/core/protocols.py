"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol


class RepositoryProvider(Protocol):
    """Contract for repository metadata backends.

    Any object that implements :meth:`fetch_repository` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def fetch_repository(self, owner: str, repo: str) -> dict[str, Any]:
        """Fetch the raw JSON object describing ``owner/repo``.

        Implementations must map all backend-specific exceptions to
        :class:`~ghpp.exceptions.GhppError` subclasses.

        Raises
        ------
        TransportError
            When no response could be obtained.
        APIError
            When the backend answers with a non-success status.
        DecodeError
            When the body is not a JSON object.
        """
        ...  # pragma: no cover
