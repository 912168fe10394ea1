"""In-memory catalog table shared by the loader, the search engine and the CLI."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from catalog_search.exceptions import TableSchemaError

Row = tuple[Any, ...]


def cell_text(value: Any) -> str:
    """Return the text form of a cell used for matching.

    Missing values match as empty text. Integral floats render without
    the fractional part (``39.0`` -> ``"39"``), the way a spreadsheet
    displays them.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Table:
    """Ordered columns plus ordered rows.

    A table is never mutated after construction. Filtering produces a
    new table through :meth:`with_rows` or :meth:`empty_like`; cells keep
    their original typed values and are projected to text only when
    matched or displayed.

    Attributes:
        columns: Column names, unique when compared case-insensitively.
        rows: Row tuples, each with exactly one field per column.
    """

    columns: tuple[str, ...]
    rows: tuple[Row, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in self.rows))

        seen: set[str] = set()
        for name in self.columns:
            if not isinstance(name, str):
                raise TableSchemaError(name, "column names must be strings")
            folded = name.casefold()
            if folded in seen:
                raise TableSchemaError(name, f"duplicate column name '{name}'")
            seen.add(folded)

        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise TableSchemaError(
                    row, f"row {index} has {len(row)} fields, expected {width}"
                )

    def __len__(self) -> int:
        return len(self.rows)

    def column_index(self, name: str) -> int | None:
        """Return the position of a column (case-insensitive), or None."""
        folded = name.casefold()
        for index, column in enumerate(self.columns):
            if column.casefold() == folded:
                return index
        return None

    def column_values(self, name: str) -> list[Any]:
        """Return every value of a column in row order."""
        index = self.column_index(name)
        if index is None:
            raise KeyError(name)
        return [row[index] for row in self.rows]

    def with_rows(self, rows: Iterable[Sequence[Any]]) -> Table:
        """Return a new table with this schema and the given rows."""
        return Table(columns=self.columns, rows=tuple(tuple(r) for r in rows))

    def empty_like(self) -> Table:
        """Return a table with this schema and zero rows."""
        return Table(columns=self.columns, rows=())

    def select(self, columns: Sequence[str]) -> Table:
        """Project the table onto a subset of columns, in the given order."""
        indexes: list[int] = []
        names: list[str] = []
        for name in columns:
            index = self.column_index(name)
            if index is None:
                raise KeyError(name)
            indexes.append(index)
            names.append(self.columns[index])
        return Table(
            columns=tuple(names),
            rows=tuple(tuple(row[i] for i in indexes) for row in self.rows),
        )

    def records(self) -> list[dict[str, Any]]:
        """Return rows as ``{column: value}`` dicts."""
        return [dict(zip(self.columns, row)) for row in self.rows]
