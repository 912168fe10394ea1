"""Write a starter configuration file for catalog-search."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import click
import tomli_w
from rich.markup import escape

from catalog_search.cli import Context, pass_context
from catalog_search.commands._common import EXIT_DATASET_ERROR, EXIT_USAGE_ERROR
from catalog_search.config import get_default_config_path
from catalog_search.exceptions import DatasetError
from catalog_search.loader import list_sheets
from catalog_search.search.resolver import DEFAULT_ALIASES
from catalog_search.utils.output import error, info, success


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("catalog_search").joinpath("config.example.toml").read_text()


def _parse_aliases(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    aliases: dict[str, str] = {}
    for value in values:
        alias, _, target = value.partition("=")
        alias, target = alias.strip(), target.strip()
        if not alias or not target:
            raise click.BadParameter(f"expected ALIAS=COLUMN, got {value!r}")
        aliases[alias] = target
    return aliases


def _toml_line(key: str, value: str) -> str:
    return tomli_w.dumps({key: value}).rstrip("\n")


def _inline_table(key: str, mapping: dict[str, str]) -> str:
    pairs = ", ".join(_toml_line(k, v) for k, v in mapping.items())
    return f"{key} = {{ {pairs} }}"


def render_config(
    template: str,
    catalog: Path | None = None,
    sheet: str | None = None,
    aliases: dict[str, str] | None = None,
) -> str:
    """Fill the example config with a catalog, sheet and extra aliases.

    Settings left unset keep the template's commented-out line. Aliases
    are merged over the built-in ones.
    """
    lines = []
    for line in template.splitlines():
        if catalog is not None and line.startswith("# catalog = "):
            line = _toml_line("catalog", str(catalog))
        elif sheet is not None and line.startswith("# sheet = "):
            line = _toml_line("sheet", sheet)
        elif aliases and line.startswith("aliases = "):
            line = _inline_table("aliases", {**DEFAULT_ALIASES, **aliases})
        lines.append(line)
    return "\n".join(lines) + "\n"


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/catalog-search/config.toml)",
)
@click.option(
    "--catalog",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Workbook, CSV file or folder to store as [data] catalog",
)
@click.option(
    "--sheet",
    default=None,
    help="Worksheet to store as [data] sheet (checked against --catalog)",
)
@click.option(
    "--alias",
    "aliases",
    multiple=True,
    callback=_parse_aliases,
    metavar="ALIAS=COLUMN",
    help="Extra column alias, may be repeated",
)
@pass_context
def cli(
    ctx: Context,
    force: bool,
    output: Path | None,
    catalog: Path | None,
    sheet: str | None,
    aliases: dict[str, str],
) -> None:
    """Create a configuration file for a catalog.

    Writes the documented example configuration to the default location
    (~/.config/catalog-search/config.toml) or to --output. With --catalog
    and --sheet the [data] section points at that catalog right away;
    --alias adds friendly column keys next to the built-in Dicke alias.

    Examples:

    \b
      # Commented template at the default location
      catalog-search init-config

    \b
      # Ready-to-use config for a door catalog
      catalog-search init-config --catalog ~/catalogs/doors.xlsx --sheet Tueren

    \b
      # Extra alias, written next to the project
      catalog-search init-config -o ./catalog.toml --alias Typ=Tuertyp
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {escape(str(config_path))}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(EXIT_USAGE_ERROR)

    if catalog is not None:
        catalog = catalog.expanduser().resolve()
        if sheet is not None:
            try:
                sheets = list_sheets(catalog)
            except DatasetError as e:
                error(escape(str(e)))
                raise SystemExit(EXIT_DATASET_ERROR)
            if sheet not in sheets:
                error(
                    f"Sheet '{escape(sheet)}' not found in {escape(str(catalog))}",
                    hint=escape(f"Available: {', '.join(sheets)}"),
                )
                raise SystemExit(EXIT_DATASET_ERROR)

    content = render_config(_load_example_config(), catalog, sheet, aliases)

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(content)
    except OSError as e:
        error(f"Failed to write config file: {escape(str(e))}")
        raise SystemExit(EXIT_USAGE_ERROR)

    success(f"Created config file: {escape(str(config_path))}")
    if catalog is None:
        info("Set [data] catalog to the workbook you want to search.")
    else:
        info(f"Catalog: {escape(str(catalog))}")
