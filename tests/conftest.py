"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from openpyxl import Workbook

from catalog_search.table import Table

if TYPE_CHECKING:
    from collections.abc import Generator

DOOR_COLUMNS = ("Artikel", "Tuertyp", "Dicke_mm", "Oberflaeche", "Preis")

DOOR_ROWS = [
    ("T-100", "VSR", 39, "Eiche natur", 412.5),
    ("T-101", "VSR", 45, "Buche", 455.0),
    ("T-102", "LS", 39, "Weisslack", 298.0),
    ("T-103", "VS30", 52, "Eiche geraeuchert", 610.0),
    ("T-104", "XVS", None, "Esche", 380.0),
]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def door_table() -> Table:
    """A small door catalog with mixed cell types."""
    return Table(columns=DOOR_COLUMNS, rows=DOOR_ROWS)


@pytest.fixture
def door_csv(temp_dir: Path) -> Path:
    """Write the door catalog as a semicolon-separated CSV file."""
    path = temp_dir / "doors.csv"
    lines = [";".join(DOOR_COLUMNS)]
    for row in DOOR_ROWS:
        lines.append(";".join("" if v is None else str(v) for v in row))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def door_xlsx(temp_dir: Path) -> Path:
    """Write the door catalog to a workbook with a second, smaller sheet."""
    path = temp_dir / "doors.xlsx"
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Tueren"
    sheet.append(list(DOOR_COLUMNS))
    for row in DOOR_ROWS:
        sheet.append(list(row))

    frames = workbook.create_sheet("Zargen")
    frames.append(["Zarge", "Breite_mm"])
    frames.append(["Z-1", 80])
    workbook.save(path)
    return path


@pytest.fixture
def sample_config(temp_dir: Path, door_xlsx: Path) -> Path:
    """Create a sample config file pointing at the door workbook."""
    config_path = temp_dir / "config.toml"
    config_path.write_text(f"""[data]
catalog = "{door_xlsx.as_posix()}"
sheet = "Tueren"

[search]
aliases = {{ Dicke = "Dicke_mm", Typ = "Tuertyp" }}

[display]
colored_output = false
clip = 20
""")
    return config_path
