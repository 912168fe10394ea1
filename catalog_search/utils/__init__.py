"""Utility modules for catalog-search."""

from catalog_search.utils.matching import suggest_columns, unresolved_keys
from catalog_search.utils.output import (
    console,
    error,
    info,
    success,
    warning,
)

__all__ = [
    "console",
    "error",
    "info",
    "suggest_columns",
    "success",
    "unresolved_keys",
    "warning",
]
