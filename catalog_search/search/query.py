"""Execute a query plan against a catalog table."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from catalog_search.search.ast_nodes import CriteriaList, GlobalText, QueryPlan
from catalog_search.search.parser import parse_query
from catalog_search.search.patterns import compile_pattern
from catalog_search.search.resolver import resolve_column
from catalog_search.table import Row, Table

logger = logging.getLogger(__name__)


def _filter_global_text(table: Table, plan: GlobalText) -> list[Row]:
    """Keep rows where any field matches the pattern."""
    predicate = compile_pattern(plan.pattern)
    return [row for row in table.rows if any(predicate(value) for value in row)]


def _filter_criteria(
    table: Table,
    plan: CriteriaList,
    aliases: Mapping[str, str] | None,
) -> list[Row]:
    """AND all resolvable criteria together; unresolved keys are skipped."""
    rows = list(table.rows)
    for criterion in plan.criteria:
        column = resolve_column(criterion.column_key, table.columns, aliases)
        if column is None:
            logger.debug("Skipping criterion on unknown column: %s", criterion.column_key)
            continue

        index = table.columns.index(column)
        predicate = compile_pattern(criterion.pattern)
        rows = [row for row in rows if predicate(row[index])]
        logger.debug(
            "Criterion %s:%s on column %s leaves %d rows",
            criterion.column_key,
            criterion.pattern,
            column,
            len(rows),
        )
    return rows


def execute_search(
    table: Table,
    plan: QueryPlan,
    aliases: Mapping[str, str] | None = None,
) -> Table:
    """Execute a parsed query plan against a table.

    The source table is never modified. The result keeps the source
    schema and row order; when nothing matches it has zero rows.

    Args:
        table: The loaded catalog table.
        plan: Parsed query plan.
        aliases: Column alias map passed to the resolver.

    Returns:
        A new table holding the matching rows.
    """
    if isinstance(plan, GlobalText):
        rows = _filter_global_text(table, plan)
    else:
        rows = _filter_criteria(table, plan, aliases)

    if not rows:
        return table.empty_like()
    return table.with_rows(rows)


def search_table(
    table: Table,
    query_string: str,
    aliases: Mapping[str, str] | None = None,
) -> Table:
    """Parse and execute a raw search string.

    An empty or whitespace-only query is no filter at all: the source
    table is returned as is, without running the engine.
    """
    if not query_string.strip():
        return table
    return execute_search(table, parse_query(query_string), aliases)
