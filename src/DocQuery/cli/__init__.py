"""CLI package for DocQuery command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from DocQuery.cli.runner import CommandRunner
from DocQuery.cli.ui import cli


def main() -> None:
    """Run DocQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
