"""Domain models for ghpp.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime


# ---------------------------------------------------------------------------
# Repository snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Owner:
    """Account that owns the repository."""

    login: str


@dataclass(frozen=True, slots=True)
class License:
    """License detected by GitHub for the repository."""

    name: str


@dataclass(frozen=True, slots=True)
class RepositoryRecord:
    """One fetched repository, decoded once per run and never mutated."""

    name: str
    full_name: str
    html_url: str
    created_at: datetime
    updated_at: datetime
    stargazers_count: int
    forks: int
    watchers: int

    size: int
    """Repository size in kilobytes, as reported by GitHub."""

    owner: Owner

    license: License | None
    """``None`` when GitHub reports no license."""


# ---------------------------------------------------------------------------
# Elapsed time
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DurationParts:
    """Calendar-field difference between two dates."""

    years: int
    months: int
    days: int


# ---------------------------------------------------------------------------
# Field selection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldSet:
    """Immutable collection of unique field identifiers.

    Iteration order is display order.  Membership and length behave like
    a set; the resolver guarantees there are no duplicates.
    """

    fields: tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self.fields

    def __len__(self) -> int:
        return len(self.fields)

    def __bool__(self) -> bool:
        return len(self.fields) > 0


# ---------------------------------------------------------------------------
# Rendered output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RenderedLine:
    """A single output line and the colour it is printed in."""

    text: str
    color: str
