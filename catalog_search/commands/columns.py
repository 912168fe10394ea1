"""List the columns of the loaded catalog sheet."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.text import Text

from catalog_search.cli import Context, pass_context
from catalog_search.commands._common import load_catalog
from catalog_search.search.resolver import resolve_column
from catalog_search.table import cell_text
from catalog_search.utils.output import console, create_table


@click.command("columns")
@click.option(
    "--samples",
    "-n",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Number of sample values shown per column",
)
@pass_context
def cli(ctx: Context, samples: int) -> None:
    """Show the columns usable as query keys.

    Lists every column of the loaded sheet with a few sample values,
    followed by the configured aliases whose target column exists.
    """
    table = load_catalog(ctx)
    aliases = ctx.config.aliases if ctx.config is not None else {}

    listing = create_table(title=f"{len(table.columns)} columns, {len(table)} rows")
    listing.add_column("#", justify="right")
    listing.add_column("Column", style="column.name")
    if samples:
        listing.add_column("Samples")

    for position, name in enumerate(table.columns, start=1):
        cells: list[str | Text] = [str(position), Text(name)]
        if samples:
            values: list[str] = []
            for value in table.column_values(name):
                text = cell_text(value)
                if text and text not in values:
                    values.append(text)
                if len(values) >= samples:
                    break
            cells.append(Text(", ".join(values)))
        listing.add_row(*cells)
    console.print(listing)

    active = {
        alias: target
        for alias, target in aliases.items()
        if table.column_index(alias) is None and table.column_index(target) is not None
    }
    if active:
        console.print()
        console.print("Aliases:")
        for alias in sorted(active):
            resolved = resolve_column(alias, table.columns, aliases) or active[alias]
            console.print(f"  [column.alias]{escape(alias)}[/column.alias] -> {escape(resolved)}")
