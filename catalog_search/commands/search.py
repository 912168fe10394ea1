"""Search the loaded catalog."""

from __future__ import annotations

import csv
import io
import json

import click
from rich.markup import escape
from rich.text import Text

from catalog_search.cli import Context, pass_context
from catalog_search.commands._common import EXIT_SUCCESS, EXIT_USAGE_ERROR, load_catalog
from catalog_search.search.parser import parse_query
from catalog_search.search.query import search_table
from catalog_search.search.resolver import resolve_column
from catalog_search.table import Table, cell_text
from catalog_search.utils.matching import suggest_columns, unresolved_keys
from catalog_search.utils.output import (
    THEME,
    clip_text,
    console,
    create_table,
    error,
    info,
    pager_print,
    warning,
)


@click.command("search")
@click.argument("query", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "csv", "json"]),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=None,
    help="Limit number of results",
)
@click.option(
    "--columns",
    "-C",
    default=None,
    help="Comma-separated list of columns to display (default: all). "
    "Names are resolved like query keys.",
)
@click.option(
    "--clip",
    "-W",
    type=click.IntRange(min=0),
    default=None,
    help="Max cell width in table output (0 = no clip, default from config)",
)
@pass_context
def cli(
    ctx: Context,
    query: tuple[str, ...],
    output_format: str,
    limit: int | None,
    columns: str | None,
    clip: int | None,
) -> None:
    """Filter catalog rows with a one-line query.

    QUERY is joined with spaces. Tokens of the form Key:Value restrict
    the column resolved from Key; several are ANDed. Tokens without a
    colon are ignored as soon as one Key:Value token is present. A
    query without any Key:Value token is matched as a whole against
    every column. '*' matches any sequence of characters and makes the
    pattern match the complete cell; without it, cells match when they
    contain the pattern. Matching is case-insensitive.

    Column keys resolve by exact name, then alias (e.g. Dicke ->
    Dicke_mm), then the first column containing the key. Criteria with
    unknown keys are ignored.

    \b
    Syntax examples:
      catalog-search search eiche
      catalog-search search "*39*"
      catalog-search search Tuertyp:VSR Dicke:39
      catalog-search search "Tuertyp:VS*"

    \b
    Output formats:
      --format table   Rich table (default)
      --format csv     CSV with header row (for piping)
      --format json    JSON array of row objects
    """
    config = ctx.config
    aliases = config.aliases if config is not None else None

    table = load_catalog(ctx)

    display_columns: list[str] | None = None
    if columns:
        display_columns = []
        for key in (c.strip() for c in columns.split(",")):
            if not key:
                continue
            resolved = resolve_column(key, table.columns, aliases)
            if resolved is None:
                error(
                    f"Unknown column: {escape(key)}",
                    hint=escape(f"Available: {', '.join(table.columns)}"),
                )
                raise SystemExit(EXIT_USAGE_ERROR)
            if resolved not in display_columns:
                display_columns.append(resolved)

    query_string = " ".join(query)

    if not ctx.quiet:
        plan = parse_query(query_string)
        for key in unresolved_keys(plan, table.columns, aliases):
            suggestions = suggest_columns(key, table.columns)
            message = f"Unknown column '{escape(key)}', criterion ignored"
            if suggestions:
                message += escape(f" (did you mean: {', '.join(suggestions)}?)")
            warning(message)

    result = search_table(table, query_string, aliases)

    if limit is not None:
        result = result.with_rows(result.rows[:limit])

    if display_columns:
        result = result.select(display_columns)

    if not result.rows:
        info(f"No results for: {escape(query_string)}")
        raise SystemExit(EXIT_SUCCESS)

    if output_format == "table":
        clip_width = config.clip if clip is None and config is not None else clip
        _print_table(result, query_string, len(table), clip_width or None)
    elif output_format == "csv":
        _print_csv(result)
    elif output_format == "json":
        _print_json(result)

    raise SystemExit(EXIT_SUCCESS)


def _print_table(
    result: Table,
    query_string: str,
    total: int,
    clip_width: int | None = None,
) -> None:
    """Print results as a Rich table, using pager when appropriate."""
    from rich.console import Console

    info(f"Search: {escape(query_string)} ({len(result)} of {total} rows)")

    table = create_table(show_header=True, header_style="column.name")
    for column in result.columns:
        table.add_column(Text(column), no_wrap=True)

    for row in result.rows:
        table.add_row(*(Text(clip_text(cell_text(value), clip_width)) for value in row))

    # Render wide so columns auto-size to content; the pager handles scrolling
    buf = io.StringIO()
    render_console = Console(
        file=buf,
        theme=THEME,
        force_terminal=not console.no_color,
        width=1000,
        no_color=console.no_color,
    )
    render_console.print(table)

    # top border + header + header border
    pager_print(buf.getvalue(), header_lines=3)


def _print_csv(result: Table) -> None:
    """Print results as CSV with a header row."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(result.columns)
    for row in result.rows:
        writer.writerow([cell_text(value) for value in row])
    click.echo(buf.getvalue(), nl=False)


def _print_json(result: Table) -> None:
    """Print results as JSON array of row objects."""
    click.echo(json.dumps(result.records(), indent=2, ensure_ascii=False, default=str))
