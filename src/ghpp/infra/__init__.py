"""Infrastructure layer — external system integration.

This layer wraps all interaction with the GitHub REST API.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~ghpp.exceptions.GhppError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from ghpp.infra.github_provider import GitHubRepositoryProvider

__all__: list[str] = [
    "GitHubRepositoryProvider",
]
