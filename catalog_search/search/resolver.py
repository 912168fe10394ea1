"""Map user-typed column keys onto the columns of a table."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

# Friendly key -> real column name, consulted when no column matches exactly.
DEFAULT_ALIASES: dict[str, str] = {
    "Dicke": "Dicke_mm",
}


def _find_exact(key: str, columns: Sequence[str]) -> str | None:
    folded = key.casefold()
    for column in columns:
        if column.casefold() == folded:
            return column
    return None


def _find_alias(key: str, columns: Sequence[str], aliases: Mapping[str, str]) -> str | None:
    folded = key.casefold()
    for alias, target in aliases.items():
        if alias.casefold() == folded:
            return _find_exact(target, columns)
    return None


def _find_substring(key: str, columns: Sequence[str]) -> str | None:
    folded = key.casefold()
    for column in columns:
        if folded in column.casefold():
            return column
    return None


def resolve_column(
    key: str,
    columns: Sequence[str],
    aliases: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve a column key to a column name of the table.

    Resolution order, first hit wins:

    1. case-insensitive exact match,
    2. alias whose target column exists,
    3. first column (in table order) containing the key as a
       case-insensitive substring.

    Args:
        key: Column key as typed by the user.
        columns: Column names in table order.
        aliases: Alias map; defaults to :data:`DEFAULT_ALIASES`.

    Returns:
        The column name as spelled in ``columns``, or None when
        the key is unresolved.
    """
    if aliases is None:
        aliases = DEFAULT_ALIASES

    return (
        _find_exact(key, columns)
        or _find_alias(key, columns, aliases)
        or _find_substring(key, columns)
    )
