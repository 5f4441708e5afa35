"""Timestamp formatting: RFC-3339 display and relative "time ago" text.

Relative time uses calendar-field subtraction with a fixed 30-day
borrow rather than exact elapsed-duration arithmetic, so a repository
created on the 28th is reported as 7 days old on the 5th of the next
month regardless of that month's length.
"""

from __future__ import annotations

import re
from datetime import datetime

from ghpp.core.models import DurationParts

_RFC3339 = re.compile(
    r"(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})"
)

_BORROW_DAYS: int = 30
_MONTHS_PER_YEAR: int = 12

_LONG_UNITS: tuple[str, ...] = ("year", "month", "day")
_SHORT_UNITS: tuple[str, ...] = ("y", "m", "d")


def duration_between(start: datetime, now: datetime) -> DurationParts:
    """Return the years/months/days between *start* and *now*.

    Only the calendar fields are compared; the time of day is ignored.
    Results for ``start > now`` are not meaningful.
    """
    years = now.year - start.year
    months = now.month - start.month
    days = now.day - start.day

    if days < 0:
        months -= 1
        days += _BORROW_DAYS
    if months < 0:
        years -= 1
        months += _MONTHS_PER_YEAR

    return DurationParts(years=years, months=months, days=days)


def _plural(value: int) -> str:
    return "" if value == 1 else "s"


def format_duration(parts: DurationParts, *, short: bool = False) -> str:
    """Render *parts* as ``"2 years 3 days ago"`` or ``"2y 3d ago"``.

    Zero components are omitted.  When every component is zero the
    literal ``"today"`` is returned without the ``" ago"`` suffix.
    """
    values = (parts.years, parts.months, parts.days)
    pieces: list[str] = []
    for value, long_unit, short_unit in zip(values, _LONG_UNITS, _SHORT_UNITS):
        if value <= 0:
            continue
        if short:
            pieces.append(f"{value}{short_unit}")
        else:
            pieces.append(f"{value} {long_unit}{_plural(value)}")

    if not pieces:
        return "today"
    return " ".join(pieces) + " ago"


def time_since(
    moment: datetime,
    *,
    short: bool = False,
    now: datetime | None = None,
) -> str:
    """Describe how long ago *moment* was.

    *now* defaults to the current time in *moment*'s own timezone (or
    local naive time when *moment* is naive).
    """
    if now is None:
        now = datetime.now(moment.tzinfo)
    return format_duration(duration_between(moment, now), short=short)


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as RFC-3339 at second precision.

    UTC is written with a ``Z`` suffix (``2020-01-02T03:04:05Z``).
    """
    text = moment.replace(microsecond=0).isoformat()
    offset = moment.utcoffset()
    if offset is not None and not offset:
        text = text.removesuffix("+00:00") + "Z"
    return text


def parse_timestamp(raw: str) -> datetime:
    """Parse an RFC-3339 timestamp as returned by the GitHub API.

    A full date, a ``T``-separated time and an explicit offset (``Z`` or
    ``±HH:MM``) are required; fractional seconds are optional and kept to
    microsecond precision.  The result is always timezone-aware.

    Raises
    ------
    ValueError
        If *raw* is not a valid RFC-3339 timestamp.
    """
    match = _RFC3339.fullmatch(raw)
    if match is None:
        raise ValueError(f"not an RFC-3339 timestamp: {raw!r}")

    fraction = match.group("fraction")
    micros = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    offset = match.group("offset")
    if offset == "Z":
        offset = "+00:00"
    return datetime.fromisoformat(f"{match.group('base')}{micros}{offset}")
