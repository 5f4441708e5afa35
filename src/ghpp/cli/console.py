"""CLI console helpers with lazy Rich loading.

Rich is imported on first use rather than at module import so that
bootstrap paths (``--help``, ``--version``) never depend on it.  Error
messages fall back to plain stderr when Rich cannot be loaded; field
output requires Rich.
"""

from __future__ import annotations

import sys
from typing import Any

from ghpp.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console targeting stderr, or stdout when *stderr* is false."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy for diagnostics on stderr."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; unchanged when Rich is unavailable."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)
