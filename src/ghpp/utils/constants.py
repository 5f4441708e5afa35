"""Process-wide constants.

ghpp reads no configuration files and no environment variables; every
tunable lives here as an immutable module-level value.
"""

from __future__ import annotations

from ghpp.version import __version__

GITHUB_API_URL: str = "https://api.github.com"
"""Base URL of the GitHub REST API."""

DEFAULT_TIMEOUT: float = 10.0
"""Seconds allowed for connect, read, write and pool acquisition."""

REQUEST_HEADERS: tuple[tuple[str, str], ...] = (
    ("Accept", "application/vnd.github+json"),
    ("X-GitHub-Api-Version", "2022-11-28"),
    ("User-Agent", f"ghpp/{__version__}"),
)

DEFAULT_FIELDS: tuple[str, ...] = (
    "name",
    "full_name",
    "html_url",
    "created_at",
    "updated_at",
    "stargazers_count",
)
"""Fields shown when neither ``--include`` nor ``--exclude`` is given."""
