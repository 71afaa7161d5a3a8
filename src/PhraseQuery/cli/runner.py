"""Command runner for coordinating CLI execution.

Configures logging, builds command components, and turns failures into
`click.Abort`.
"""

from __future__ import annotations

import click

from PhraseQuery.backends import create_backend
from PhraseQuery.cli.commands import CompileCommand, ParseCommand
from PhraseQuery.config import AppConfig
from PhraseQuery.renderers import render_json
from PhraseQuery.utils.log import configure_logging, log


class CommandRunner:
    """Run CLI commands against one application configuration."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_parse(self, action: str, text: str) -> None:
        """Parse a query and log its grouped clauses.

        Args:
            action: The CLI command name (e.g., 'parse').
            text: Raw query text.

        Raises:
            click.Abort: When the query cannot be parsed.
        """
        self._configure_logging(action)
        try:
            ParseCommand(text=text).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Parse failed: %s", e)
            raise click.Abort from e

    def run_compile(self, action: str, text: str, backend_name: str | None = None) -> None:
        """Compile a query and print the backend body as JSON.

        Args:
            action: The CLI command name (e.g., 'compile').
            text: Raw query text.
            backend_name: Optional backend overriding ``backend.name``.

        Raises:
            click.Abort: When parsing or compiling fails.
        """
        self._configure_logging(action)
        try:
            backend = create_backend(self.config, backend_name)
            compiled = CompileCommand(text=text, backend=backend).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Compile failed: %s", e)
            raise click.Abort from e
        click.echo(render_json(compiled))
