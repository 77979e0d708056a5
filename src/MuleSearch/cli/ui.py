"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from MuleSearch.cli.commands import filter_names
from MuleSearch.cli.runner import CommandRunner
from MuleSearch.config import DEFAULT_CONFIG_PATH, load_config_with_defaults
from MuleSearch.core.query import format_query, parse_query


@click.group(help="MuleSearch: search file hits across sources and filter them with boolean queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file, merged onto the defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file, then the config. The config
    is loaded lazily so that ``match`` works without one.
    """
    load_dotenv()
    ctx.obj = {"config_path": config_path}


@cli.command("search")
@click.argument("query")
@click.option("--ext", "extension", default=None, help="Only keep files with this extension.")
@click.pass_context
def search_cmd(ctx: click.Context, query: str, extension: str | None) -> None:
    """Search QUERY on all configured sources.

    Raises:
        click.Abort: When the search fails.
    """
    config_path: Path = ctx.obj["config_path"]
    default_path = DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.is_file() else config_path
    try:
        cfg = load_config_with_defaults(config_path, default_path=default_path)
    except (OSError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e
    CommandRunner(cfg).run_search(action=ctx.command.name, query=query, extension=extension)


@cli.command("match")
@click.argument("query")
@click.argument("names", nargs=-1)
@click.option("--show-tree", is_flag=True, help="Print the parsed query before the results.")
def match_cmd(query: str, names: tuple[str, ...], show_tree: bool) -> None:
    """Print the NAMES (or stdin lines) that satisfy QUERY."""
    if show_tree:
        click.echo(f"# {format_query(parse_query(query))}")
    candidates = names or (line.rstrip("\n") for line in sys.stdin)
    for name in filter_names(query, candidates):
        click.echo(name)
