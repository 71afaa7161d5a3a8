"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click

from PhraseQuery.backends import supported_backend_names
from PhraseQuery.cli.runner import CommandRunner
from PhraseQuery.config import load_config

_QUERY_HELP = "Queries starting with '+' or '-' must come after '--'."


@click.group(help="PhraseQuery: parse search queries into required/optional/excluded clauses.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    envvar="PHRASE_QUERY_CONFIG",
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    ctx.obj = load_config(config_path)


@cli.command("parse", epilog=_QUERY_HELP)
@click.argument("text", metavar="QUERY")
@click.pass_context
def parse_cmd(ctx: click.Context, text: str) -> None:
    """Parse QUERY and log its clauses grouped by role."""
    CommandRunner(ctx.obj).run_parse(action=ctx.command.name, text=text)


@cli.command("compile", epilog=_QUERY_HELP)
@click.argument("text", metavar="QUERY")
@click.option(
    "--backend",
    "backend_name",
    type=click.Choice(supported_backend_names(), case_sensitive=False),
    default=None,
    help="Backend to compile for. Defaults to backend.name from config.",
)
@click.pass_context
def compile_cmd(ctx: click.Context, text: str, backend_name: str | None) -> None:
    """Compile QUERY into a backend query and print it as JSON."""
    CommandRunner(ctx.obj).run_compile(action=ctx.command.name, text=text, backend_name=backend_name)
