"""Field-set resolution: defaults, plus ``--include``, minus ``--exclude``.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

Resolution order:

1. **Seed** — every identifier from the defaults.
2. **Include** — add each comma-separated token.
3. **Exclude** — remove each comma-separated token; exclusion always wins.

Identifiers are not validated here.  Unknown names survive resolution
and are reported by the renderer instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ghpp.core.models import FieldSet


def split_field_list(raw: str) -> list[str]:
    """Split a comma-separated list and trim whitespace around each token.

    An empty string yields no tokens.  Empty tokens produced by stray
    commas are kept as ``""`` and behave like any other identifier.
    """
    if not raw:
        return []
    return [token.strip() for token in raw.split(",")]


def resolve_fields(
    defaults: Sequence[str],
    include: str = "",
    exclude: str = "",
) -> FieldSet:
    """Compute the fields to display.

    Display order is defaults first, then newly included identifiers, each
    in first-seen order.
    """
    # dict keeps insertion order and drops duplicates
    selected: dict[str, None] = dict.fromkeys(defaults)
    selected.update(dict.fromkeys(split_field_list(include)))
    _discard(selected, split_field_list(exclude))
    return FieldSet(fields=tuple(selected))


def _discard(selected: dict[str, None], names: Iterable[str]) -> None:
    for name in names:
        selected.pop(name, None)
