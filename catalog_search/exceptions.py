"""Exception hierarchy for catalog-search."""

from pathlib import Path


class CatalogSearchError(Exception):
    """Base exception for all catalog-search errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all catalog-search errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(CatalogSearchError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Dataset Errors
class DatasetError(CatalogSearchError):
    """Errors while locating or reading a catalog dataset."""

    pass


class DatasetNotFoundError(DatasetError):
    """Dataset file (or a dataset inside a folder) doesn't exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Dataset not found: {path}")


class SheetNotFoundError(DatasetError):
    """Requested worksheet is not part of the workbook."""

    def __init__(self, path: Path, sheet: str) -> None:
        self.path = path
        self.sheet = sheet
        super().__init__(f"Sheet '{sheet}' not found in {path}")


class UnsupportedFormatError(DatasetError):
    """File suffix is not a supported dataset format."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Unsupported dataset format: {path.suffix or path.name}")


class DatasetLoadError(DatasetError):
    """Dataset exists but could not be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


# Validation Errors
class ValidationError(CatalogSearchError):
    """Invalid input value."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class TableSchemaError(ValidationError):
    """Table columns or rows violate the table invariants."""

    def __init__(self, value: object, reason: str) -> None:
        super().__init__("table", value, reason)
