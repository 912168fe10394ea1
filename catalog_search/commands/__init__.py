"""Command discovery and registration.

Every public module in this package that defines a click command named
``cli`` contributes one subcommand. Modules starting with ``_`` hold
shared helpers and are skipped.
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from collections.abc import Iterator

_PACKAGE = __name__


def discover_commands() -> Iterator[click.Command]:
    """Yield the click command of every public command module, by module name."""
    names = sorted(
        info.name for info in pkgutil.iter_modules(__path__) if not info.name.startswith("_")
    )
    for name in names:
        module = importlib.import_module(f"{_PACKAGE}.{name}")
        command = getattr(module, "cli", None)
        if isinstance(command, click.Command):
            yield command
