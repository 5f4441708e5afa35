"""Process exit codes returned by ``ghpp``.

Every failure ghpp knows about (bad ``owner/repo``, network failure,
non-200 API status, undecodable body) shares :data:`GENERAL_ERROR`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The repository was fetched and its fields printed."""

GENERAL_ERROR: int = 1
"""A GhppError was caught and its message shown on stderr."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped; also argparse's code for bad options."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
