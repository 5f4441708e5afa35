"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from ghpp.core.fields import resolve_fields
from ghpp.core.models import DurationParts, FieldSet, License, Owner, RenderedLine, RepositoryRecord
from ghpp.core.protocols import RepositoryProvider
from ghpp.core.render import Field, render_fields
from ghpp.core.repository_service import RepositoryService, parse_repo_spec

__all__: list[str] = [
    "DurationParts",
    "Field",
    "FieldSet",
    "License",
    "Owner",
    "RenderedLine",
    "RepositoryProvider",
    "RepositoryRecord",
    "RepositoryService",
    "parse_repo_spec",
    "render_fields",
    "resolve_fields",
]
