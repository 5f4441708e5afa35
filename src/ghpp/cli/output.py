"""Terminal output for a fetched repository.

Writes one coloured line per rendered field to stdout.  Values are
printed verbatim: Rich markup, ``:emoji:`` codes and automatic
highlighting are disabled, and lines are never wrapped.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ghpp.cli.console import get_rich_console
from ghpp.core.models import RenderedLine, RepositoryRecord
from ghpp.core.render import render_fields


def print_lines(lines: Iterable[RenderedLine], *, out: Any | None = None) -> None:
    """Print each line in its colour on *out* (a stdout Rich console by default)."""
    if out is None:
        out = get_rich_console(stderr=False)
    for line in lines:
        out.print(
            line.text,
            style=line.color,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )


def print_repository(
    record: RepositoryRecord,
    fields: Iterable[str],
    *,
    since: bool = False,
    short: bool = False,
    out: Any | None = None,
) -> None:
    """Render *fields* of *record* and print them in order."""
    lines = render_fields(record, fields, since=since, short=short)
    print_lines(lines, out=out)
