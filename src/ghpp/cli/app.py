"""CLI application entry point for ghpp.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ghpp.exceptions.GhppError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from ghpp.cli import exit_codes
from ghpp.cli.console import console, escape
from ghpp.exceptions import GhppError
from ghpp.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``ghpp <owner>/<repo> [--include CSV] [--exclude CSV] [--since] [--short]``
    * ``ghpp --version``
    """
    parser = argparse.ArgumentParser(
        prog="ghpp",
        description="Pretty-print GitHub repository metadata.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "repo",
        nargs="?",
        default=None,
        help="Repository to show, as <owner>/<repo>.",
    )
    parser.add_argument(
        "--include",
        default="",
        help="Comma-separated fields to include",
    )
    parser.add_argument(
        "--exclude",
        default="",
        help="Comma-separated fields to exclude",
    )
    parser.add_argument(
        "--since",
        action="store_true",
        help="Show created_at as 'X years Y months Z days ago'",
    )
    parser.add_argument(
        "--short",
        action="store_true",
        help="Show time difference in short format (e.g., 2y 5m ago)",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_show(args: argparse.Namespace) -> int:
    """Fetch one repository and print the selected fields.

    Flow:
    1. Validate ``owner/repo`` and fetch via the GitHub provider.
    2. Decode the full record (nothing is printed on failure).
    3. Resolve defaults + include − exclude.
    4. Print one coloured line per field.
    """
    from ghpp.cli.output import print_repository
    from ghpp.core.fields import resolve_fields
    from ghpp.core.repository_service import RepositoryService
    from ghpp.infra.github_provider import GitHubRepositoryProvider
    from ghpp.utils.constants import DEFAULT_FIELDS

    service = RepositoryService(GitHubRepositoryProvider())
    record = service.get_repository(args.repo)

    fields = resolve_fields(DEFAULT_FIELDS, args.include, args.exclude)
    print_repository(
        record,
        fields,
        since=args.since or args.short,
        short=args.short,
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ghpp CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    GhppError
        Propagated to :func:`cli`, which renders it.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _handle_show(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def report_error(exc: GhppError) -> None:
    """Render a known error and its optional hint on stderr."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GhppError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
