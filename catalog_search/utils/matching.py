"""Fuzzy column-name suggestions for unresolved search keys.

Suggestions are hints for the user only; column resolution for filtering
stays exact, alias, then substring (see ``search.resolver``).
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from rapidfuzz import fuzz, process

from catalog_search.search.ast_nodes import CriteriaList, QueryPlan
from catalog_search.search.resolver import resolve_column

_MULTI_SPACE = re.compile(r"\s+")
_SEPARATORS = re.compile(r"[_\-./]+")

DEFAULT_SCORE_CUTOFF = 60


def normalize(s: str) -> str:
    """Lowercase, strip edges, collapse whitespace."""
    return _MULTI_SPACE.sub(" ", s.lower().strip())


def normalize_column_name(s: str) -> str:
    """Normalize a column name, treating ``_``, ``-``, ``.`` and ``/`` as spaces."""
    return normalize(_SEPARATORS.sub(" ", s))


def suggest_columns(
    key: str,
    columns: Sequence[str],
    limit: int = 3,
    score_cutoff: float = DEFAULT_SCORE_CUTOFF,
) -> list[str]:
    """Return the column names closest to ``key``, best first.

    Args:
        key: Column key typed by the user.
        columns: Column names of the table.
        limit: Maximum number of suggestions.
        score_cutoff: Minimum rapidfuzz WRatio score (0-100).
    """
    if not key or not columns:
        return []
    matches = process.extract(
        key,
        list(columns),
        scorer=fuzz.WRatio,
        processor=normalize_column_name,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    return [choice for choice, _score, _index in matches]


def unresolved_keys(
    plan: QueryPlan,
    columns: Sequence[str],
    aliases: Mapping[str, str] | None = None,
) -> list[str]:
    """List criterion keys that resolve to no column, in query order."""
    if not isinstance(plan, CriteriaList):
        return []
    return [
        c.column_key
        for c in plan.criteria
        if resolve_column(c.column_key, columns, aliases) is None
    ]
