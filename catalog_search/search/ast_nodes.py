"""Data classes for parsed search queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GlobalText:
    """Free-text search matched against every column.

    ``pattern`` is the whole trimmed query string, spaces included.
    """

    pattern: str


@dataclass
class Criterion:
    """A single ``key:value`` constraint on one column."""

    column_key: str
    pattern: str


@dataclass
class CriteriaList:
    """Column criteria, implicitly ANDed in query order."""

    criteria: list[Criterion] = field(default_factory=list)


QueryPlan = GlobalText | CriteriaList
