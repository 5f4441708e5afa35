"""``python -m ghpp`` runs the same error-boundary entry point as the console script."""

from __future__ import annotations

from ghpp.cli.app import cli

if __name__ == "__main__":
    cli()
