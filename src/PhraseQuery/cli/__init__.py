"""CLI package for PhraseQuery.

Click definitions live in `ui`, command orchestration in `runner`, and the
per-command work in `commands`.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from dotenv import load_dotenv

from PhraseQuery.cli.runner import CommandRunner
from PhraseQuery.cli.ui import cli


def main() -> None:
    """Run PhraseQuery CLI.

    Entry point referenced by console script in pyproject.toml. Loads a `.env`
    file first so PHRASE_QUERY_CONFIG can be set there.
    """
    load_dotenv()
    cli()
