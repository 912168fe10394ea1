"""Command-line interface for catalog-search."""

from __future__ import annotations

import os
from pathlib import Path

import click

from catalog_search import __version__
from catalog_search.config import Config, load_config
from catalog_search.utils.output import (
    configure_logging,
    error,
    set_color,
    set_pager,
    warning,
)


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False
        self.pager: bool | None = None  # None = auto


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/catalog-search/config.toml)",
)
@click.option(
    "--data",
    "-d",
    type=click.Path(exists=True, path_type=Path),
    help="Catalog workbook, CSV file or folder (overrides config)",
)
@click.option(
    "--sheet",
    default=None,
    help="Worksheet to load (overrides config, default: first sheet)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.option(
    "--pager/--no-pager",
    default=None,
    help="Force pager on/off (default: auto-detect)",
)
@click.version_option(version=__version__, prog_name="catalog-search")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    data: Path | None,
    sheet: str | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
    pager: bool | None,
) -> None:
    """catalog-search: Filter spreadsheet catalogs with a one-line query.

    Loads a product or material catalog (XLSX or CSV) and narrows it down
    to the rows matching a free-text or per-column query.

    Configuration is loaded from ~/.config/catalog-search/config.toml by default.
    Use --config to specify an alternative configuration file.

    Examples:

        # Rows where any column contains "eiche"
        catalog-search --data doors.xlsx search eiche

        # Column criteria are ANDed; * is a wildcard
        catalog-search search "Tuertyp:VS* Dicke:39"
    """
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet
    app_ctx.pager = pager

    configure_logging(verbose=verbose, debug=debug)

    set_pager(pager)

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
        app_ctx.config = loaded_config

        if data is not None:
            loaded_config.catalog = data.expanduser().resolve()
        if sheet is not None:
            loaded_config.sheet = sheet

        if not disable_color and not loaded_config.colored_output:
            set_color(False)

        if not quiet:
            for warn in warnings:
                # The configured catalog is irrelevant when --data replaces it
                if data is not None and warn.startswith("Catalog not found"):
                    continue
                warning(warn)

    except Exception as e:
        error(str(e))
        ctx.exit(1)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    # Resolve subcommand chain
    for name in command:
        cmd = group.get_command(ctx, name)
        if cmd is None:
            error(f"Unknown command: {name}")
            ctx.exit(1)
            return
        if isinstance(cmd, click.Group):
            group = cmd
        else:
            click.echo(cmd.get_help(ctx))
            return
    click.echo(group.get_help(ctx))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from catalog_search.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
