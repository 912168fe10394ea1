"""Configuration management for catalog-search."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from catalog_search.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from catalog_search.search.resolver import DEFAULT_ALIASES

DEFAULT_CLIP = 30


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "catalog-search" / "config.toml"


def _default_aliases() -> dict[str, str]:
    return dict(DEFAULT_ALIASES)


@dataclass
class Config:
    """Application configuration.

    Attributes:
        catalog: Workbook or CSV to search, or a folder whose first
            ``.xlsx`` (else ``.csv``) file is used.
        sheet: Worksheet name; None selects the first sheet.
        aliases: Friendly column keys mapped to real column names.
        colored_output: Whether to use colored terminal output.
        clip: Maximum cell width in table output (0 = no clip).
        config_path: Path where config was loaded from (None if defaults).
    """

    catalog: Path | None = None
    sheet: str | None = None
    aliases: dict[str, str] = field(default_factory=_default_aliases)
    colored_output: bool = True
    clip: int = DEFAULT_CLIP
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.

        Raises:
            ConfigValidationError: If a critical validation fails.
        """
        warnings: list[str] = []

        if self.clip < 0:
            raise ConfigValidationError("display.clip", self.clip, "must be 0 or greater")

        if self.catalog is not None:
            self.catalog = self.catalog.expanduser().resolve()
            # Might be mounted or created later
            if not self.catalog.exists():
                warnings.append(f"Catalog not found: {self.catalog}")

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: catalog-search init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [data] section
    data_section = data.get("data", {})
    if "catalog" in data_section:
        value = data_section["catalog"]
        if not isinstance(value, str):
            raise ConfigValidationError("data.catalog", value, "must be a string path")
        config.catalog = Path(value)
        if not config.catalog.is_absolute():
            # Relative catalog paths are relative to the config file
            config.catalog = config_path.parent / config.catalog

    if "sheet" in data_section:
        value = data_section["sheet"]
        if not isinstance(value, str):
            raise ConfigValidationError("data.sheet", value, "must be a string")
        config.sheet = value

    # Parse [search] section
    search = data.get("search", {})
    if "aliases" in search:
        value = search["aliases"]
        if not isinstance(value, dict):
            raise ConfigValidationError("search.aliases", value, "must be a table")
        for alias, target in value.items():
            if not isinstance(target, str) or not target:
                raise ConfigValidationError(
                    f"search.aliases.{alias}", target, "must be a column name"
                )
        config.aliases = dict(value)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    if "clip" in display:
        value = display["clip"]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError("display.clip", value, "must be an integer")
        config.clip = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
    }

    data_section: dict[str, Any] = {}
    if config.catalog is not None:
        data_section["catalog"] = str(config.catalog)
    if config.sheet is not None:
        data_section["sheet"] = config.sheet
    if data_section:
        data["data"] = data_section

    if config.aliases != DEFAULT_ALIASES:
        data["search"] = {"aliases": dict(config.aliases)}

    if config.clip != DEFAULT_CLIP:
        data["display"]["clip"] = config.clip

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
