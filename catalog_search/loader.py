"""Load catalog spreadsheets (XLSX or CSV) into tables."""

from __future__ import annotations

import csv
import logging
import zipfile
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from catalog_search.exceptions import (
    DatasetLoadError,
    DatasetNotFoundError,
    SheetNotFoundError,
    UnsupportedFormatError,
)
from catalog_search.table import Table, cell_text

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES: frozenset[str] = frozenset({".xlsx", ".xlsm"})
CSV_SUFFIXES: frozenset[str] = frozenset({".csv"})

# Delimiters tried when sniffing CSV files exported from spreadsheets
_CSV_DELIMITERS = ",;\t|"
_CSV_SAMPLE_SIZE = 64 * 1024


def resolve_dataset(path: Path) -> Path:
    """Return the dataset file for a path.

    A directory resolves to its first ``.xlsx`` file by name, then to its
    first ``.csv`` file.

    Raises:
        DatasetNotFoundError: If the path doesn't exist or the directory
            holds no dataset.
    """
    path = path.expanduser()
    if not path.exists():
        raise DatasetNotFoundError(path)
    if not path.is_dir():
        return path

    for pattern in ("*.xlsx", "*.csv"):
        candidates = sorted(p for p in path.glob(pattern) if not p.name.startswith("~$"))
        if candidates:
            logger.debug("Using %s from folder %s", candidates[0].name, path)
            return candidates[0]
    raise DatasetNotFoundError(path)


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in EXCEL_SUFFIXES and suffix not in CSV_SUFFIXES:
        raise UnsupportedFormatError(path)
    return suffix


def list_sheets(path: Path) -> list[str]:
    """List the sheet names of a dataset in workbook order.

    A CSV file has a single sheet named after the file stem.
    """
    path = resolve_dataset(path)
    if _check_suffix(path) in CSV_SUFFIXES:
        return [path.stem]

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, OSError) as e:
        raise DatasetLoadError(path, str(e)) from e
    try:
        return list(workbook.sheetnames)
    finally:
        workbook.close()


def _header_names(header: Sequence[Any]) -> tuple[str, ...]:
    """Build unique column names from a header row.

    Blank headers become ``Column{n}`` (1-based); repeated names get a
    ``_2``, ``_3``... suffix.
    """
    names: list[str] = []
    seen: set[str] = set()
    for position, value in enumerate(header, start=1):
        name = cell_text(value).strip() or f"Column{position}"
        candidate = name
        counter = 2
        while candidate.casefold() in seen:
            candidate = f"{name}_{counter}"
            counter += 1
        seen.add(candidate.casefold())
        names.append(candidate)
    return tuple(names)


def _is_blank(row: Sequence[Any]) -> bool:
    return all(cell_text(value).strip() == "" for value in row)


def _build_table(raw_rows: Iterable[Sequence[Any]]) -> Table:
    """Turn raw sheet rows (header first) into a table."""
    iterator = iter(raw_rows)
    header: Sequence[Any] | None = None
    for candidate in iterator:
        if not _is_blank(candidate):
            header = candidate
            break
    if header is None:
        return Table(columns=())

    # Trailing blank header cells beyond the last used column are dropped
    last_used = max(i for i, value in enumerate(header) if cell_text(value).strip())
    columns = _header_names(header[: last_used + 1])
    width = len(columns)

    rows: list[tuple[Any, ...]] = []
    for raw in iterator:
        values = tuple(raw[:width])
        # Values beyond the last header column do not keep a row alive
        if _is_blank(values):
            continue
        if len(values) < width:
            values = values + (None,) * (width - len(values))
        rows.append(values)
    return Table(columns=columns, rows=tuple(rows))


def _load_excel(path: Path, sheet: str | None) -> tuple[Table, str]:
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, OSError) as e:
        raise DatasetLoadError(path, str(e)) from e

    try:
        if sheet is None:
            worksheet = workbook.worksheets[0]
        elif sheet in workbook.sheetnames:
            worksheet = workbook[sheet]
        else:
            raise SheetNotFoundError(path, sheet)
        table = _build_table(worksheet.iter_rows(values_only=True))
        return table, worksheet.title
    finally:
        workbook.close()


def _load_csv(path: Path, sheet: str | None) -> tuple[Table, str]:
    if sheet is not None and sheet != path.stem:
        raise SheetNotFoundError(path, sheet)

    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            sample = f.read(_CSV_SAMPLE_SIZE)
            f.seek(0)
            try:
                dialect = csv.Sniffer().sniff(sample, delimiters=_CSV_DELIMITERS)
            except csv.Error:
                # Single-column files and ragged samples can't be sniffed
                dialect = csv.excel
            table = _build_table(csv.reader(f, dialect))
    except (csv.Error, UnicodeDecodeError, OSError) as e:
        raise DatasetLoadError(path, str(e)) from e
    return table, path.stem


def load_table(path: Path, sheet: str | None = None) -> Table:
    """Load one sheet of a dataset into a table.

    Args:
        path: Workbook, CSV file, or a folder holding one.
        sheet: Sheet name; None selects the first sheet.

    Returns:
        Table whose columns come from the header row.

    Raises:
        DatasetNotFoundError: If no dataset exists at the path.
        UnsupportedFormatError: If the file is neither XLSX nor CSV.
        SheetNotFoundError: If the sheet is not in the workbook.
        DatasetLoadError: If the file cannot be parsed.
    """
    path = resolve_dataset(path)
    suffix = _check_suffix(path)

    if suffix in EXCEL_SUFFIXES:
        table, sheet_name = _load_excel(path, sheet)
    else:
        table, sheet_name = _load_csv(path, sheet)

    logger.info("Loaded %d rows from %s sheet '%s'", len(table), path, sheet_name)
    return table
