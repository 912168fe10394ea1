"""catalog-search: filter spreadsheet catalogs with a one-line query."""

__version__ = "0.3.0"
