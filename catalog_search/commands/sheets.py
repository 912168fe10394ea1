"""List the sheets of the configured catalog."""

from __future__ import annotations

import click
from rich.markup import escape

from catalog_search.cli import Context, pass_context
from catalog_search.commands._common import EXIT_DATASET_ERROR, EXIT_NO_DATASET
from catalog_search.exceptions import DatasetError
from catalog_search.loader import list_sheets, resolve_dataset
from catalog_search.utils.output import console, error, info


@click.command("sheets")
@pass_context
def cli(ctx: Context) -> None:
    """List the worksheets of the catalog workbook.

    The sheet searched by default is marked with '*'. Select another one
    with the global --sheet option or [data] sheet in the config file.
    """
    config = ctx.config
    if config is None or config.catalog is None:
        error(
            "No catalog configured",
            hint="Pass --data PATH or set [data] catalog in the config file",
        )
        raise SystemExit(EXIT_NO_DATASET)

    try:
        path = resolve_dataset(config.catalog)
        names = list_sheets(path)
    except DatasetError as e:
        error(str(e))
        raise SystemExit(EXIT_DATASET_ERROR)

    if not ctx.quiet:
        info(f"Sheets in {escape(str(path))}:")
    selected = config.sheet if config.sheet is not None else (names[0] if names else None)
    for name in names:
        marker = "*" if name == selected else " "
        console.print(f"{marker} {name}", markup=False, highlight=False)
