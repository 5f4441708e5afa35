"""Field rendering — map each selected field to one styled output line.

The set of known fields is closed: :class:`Field` enumerates every
identifier ghpp understands together with its glyph, label and colour.
Anything else resolves to ``None`` and is rendered as an explicit
"Unknown field" notice, never dropped silently.

This module builds :class:`~ghpp.core.models.RenderedLine` values only;
writing them to the terminal is the CLI layer's job.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from ghpp.core.duration import format_timestamp, time_since
from ghpp.core.models import RenderedLine, RepositoryRecord


class Field(Enum):
    """Every displayable repository attribute.

    Each member's value is ``(field_id, label, color)``.
    """

    NAME = ("name", "📦 Name", "cyan")
    FULL_NAME = ("full_name", "📛 Full Name", "cyan")
    HTML_URL = ("html_url", "🌐 URL", "blue")
    CREATED_AT = ("created_at", "📅 Created", "green")
    UPDATED_AT = ("updated_at", "🔄 Updated", "yellow")
    STARGAZERS_COUNT = ("stargazers_count", "⭐ Stars", "magenta")
    FORKS = ("forks", "🍴 Forks", "magenta")
    WATCHERS = ("watchers", "👀 Watchers", "magenta")
    SIZE = ("size", "📦 Size", "magenta")
    OWNER_LOGIN = ("owner.login", "👤 Owner", "cyan")
    LICENSE_NAME = ("license.name", "📝 License", "cyan")

    def __init__(self, field_id: str, label: str, color: str) -> None:
        self.field_id = field_id
        self.label = label
        self.color = color

    @classmethod
    def lookup(cls, field_id: str) -> Field | None:
        """Return the member for *field_id*, or ``None`` if unknown."""
        return _FIELDS_BY_ID.get(field_id)


_FIELDS_BY_ID: dict[str, Field] = {member.field_id: member for member in Field}

UNKNOWN_COLOR: str = "red"
UNKNOWN_LABEL: str = "❓ Unknown field"


def _field_value(
    field: Field,
    record: RepositoryRecord,
    *,
    since: bool,
    short: bool,
    now: datetime | None,
) -> str | None:
    """Return the display value of *field*, or ``None`` to suppress the line."""
    if field is Field.NAME:
        return record.name
    if field is Field.FULL_NAME:
        return record.full_name
    if field is Field.HTML_URL:
        return record.html_url
    if field is Field.CREATED_AT:
        if since:
            return time_since(record.created_at, short=short, now=now)
        return format_timestamp(record.created_at)
    if field is Field.UPDATED_AT:
        return format_timestamp(record.updated_at)
    if field is Field.STARGAZERS_COUNT:
        return str(record.stargazers_count)
    if field is Field.FORKS:
        return str(record.forks)
    if field is Field.WATCHERS:
        return str(record.watchers)
    if field is Field.SIZE:
        return f"{record.size} KB"
    if field is Field.OWNER_LOGIN:
        return record.owner.login
    if field is Field.LICENSE_NAME:
        if record.license is None:
            return None
        return record.license.name
    raise AssertionError(f"unhandled field: {field!r}")


def render_field(
    field_id: str,
    record: RepositoryRecord,
    *,
    since: bool = False,
    short: bool = False,
    now: datetime | None = None,
) -> RenderedLine | None:
    """Render one field of *record*.

    Returns ``None`` only for ``license.name`` on an unlicensed repository.
    """
    field = Field.lookup(field_id)
    if field is None:
        return RenderedLine(text=f"{UNKNOWN_LABEL}: {field_id}", color=UNKNOWN_COLOR)

    value = _field_value(field, record, since=since, short=short, now=now)
    if value is None:
        return None
    return RenderedLine(text=f"{field.label}: {value}", color=field.color)


def render_fields(
    record: RepositoryRecord,
    fields: Iterable[str],
    *,
    since: bool = False,
    short: bool = False,
    now: datetime | None = None,
) -> list[RenderedLine]:
    """Render every field in *fields*, in iteration order.

    *short* selects the compact relative form and only matters when
    *since* is true.
    """
    lines: list[RenderedLine] = []
    for field_id in fields:
        line = render_field(field_id, record, since=since, short=short, now=now)
        if line is not None:
            lines.append(line)
    return lines
