"""Compile search patterns into field predicates."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from catalog_search.table import cell_text

WILDCARD = "*"

FieldPredicate = Callable[[Any], bool]


def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a ``*`` wildcard pattern into a compiled regex.

    Every character except ``*`` is matched literally; ``*`` matches
    any sequence of characters, including none.
    """
    parts = (re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(".*".join(parts), re.IGNORECASE | re.DOTALL)


def compile_pattern(pattern: str) -> FieldPredicate:
    """Compile a pattern into a predicate over cell values.

    With a ``*`` the pattern must match the whole field; without one, the
    field matches when it contains the pattern. Both rules compare
    case-folded text, so ``strasse`` also finds ``Straße``. Missing values
    are treated as empty text, and the empty pattern matches everything.
    """
    if WILDCARD in pattern:
        regex = wildcard_to_regex(pattern.casefold())

        def _matches_wildcard(value: Any) -> bool:
            return regex.fullmatch(cell_text(value).casefold()) is not None

        return _matches_wildcard

    needle = pattern.casefold()

    def _contains(value: Any) -> bool:
        return needle in cell_text(value).casefold()

    return _contains
