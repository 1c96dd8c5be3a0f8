"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click

from DocQuery.cli.runner import CommandRunner
from DocQuery.config import load_config_with_defaults


@click.group(help="DocQuery: compile structured queries to JMESPath and run them on JSON data.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file, merged over config/default.yml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    ctx.obj = load_config_with_defaults(config_path)


@cli.command("compile")
@click.option("--data", "data_path", type=click.Path(dir_okay=False), default=None, help="JSON document.")
@click.pass_context
def compile_cmd(ctx: click.Context, data_path: str | None) -> None:
    """Print the query compiled from ``query.spec``."""
    runner = CommandRunner(ctx.obj)
    runner.run_compile(action=ctx.command.name, data_path=data_path)


@cli.command("run")
@click.option("--data", "data_path", type=click.Path(dir_okay=False), default=None, help="JSON document.")
@click.option("--query", "query_text", default=None, help="Raw query text to run instead of query.spec.")
@click.pass_context
def run_cmd(ctx: click.Context, data_path: str | None, query_text: str | None) -> None:
    """Run the configured query against a JSON document.

    Raises:
        click.Abort: When the query fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_query(action=ctx.command.name, data_path=data_path, query_text=query_text)
