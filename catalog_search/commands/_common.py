"""Helpers shared by commands that work on the loaded catalog."""

from __future__ import annotations

from catalog_search.cli import Context
from catalog_search.exceptions import DatasetError
from catalog_search.loader import load_table
from catalog_search.table import Table
from catalog_search.utils.output import error

EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_DATASET_ERROR = 2
EXIT_NO_DATASET = 3


def load_catalog(ctx: Context) -> Table:
    """Load the configured catalog sheet or exit with a dataset error code."""
    config = ctx.config
    if config is None:
        error("Configuration not loaded")
        raise SystemExit(EXIT_NO_DATASET)

    if config.catalog is None:
        error(
            "No catalog configured",
            hint="Pass --data PATH or set [data] catalog in the config file",
        )
        raise SystemExit(EXIT_NO_DATASET)

    try:
        return load_table(config.catalog, config.sheet)
    except DatasetError as e:
        error(str(e))
        raise SystemExit(EXIT_DATASET_ERROR)
