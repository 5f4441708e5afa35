"""Custom exception hierarchy for ghpp.

All exceptions that cross layer boundaries must inherit from
:class:`GhppError`.  Raw third-party exceptions (e.g. from httpx)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
GhppError
├── UsageError
├── TransportError
├── APIError
├── DecodeError
└── EnvironmentError
"""

from __future__ import annotations


class GhppError(Exception):
    """Base exception for all ghpp errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arguments -------------------------------------------------------------

class UsageError(GhppError):
    """Raised when the command line is missing or has a malformed repo."""


# --- Network ---------------------------------------------------------------

class TransportError(GhppError):
    """Raised when the request never produced a response (DNS, connect, timeout)."""


class APIError(GhppError):
    """Raised when the GitHub API answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"GitHub API returned status {status_code}", hint=hint)
        self.status_code: int = status_code


# --- Response decoding -----------------------------------------------------

class DecodeError(GhppError):
    """Raised when the response body cannot be decoded into a repository."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(GhppError):
    """Raised when a required runtime dependency is not available."""


def hint_for_status(status_code: int) -> str | None:
    """Return user guidance for well-known GitHub API status codes."""
    if status_code == 404:
        return "Check the owner and repository name; private repos are not visible."
    if status_code in (403, 429):
        return "The unauthenticated rate limit may be exhausted. Wait and retry."
    return None
