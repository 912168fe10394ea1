"""Split a raw search string into a query plan."""

from __future__ import annotations

from catalog_search.search.ast_nodes import CriteriaList, Criterion, GlobalText, QueryPlan

KEY_VALUE_SEP = ":"


def _parse_criterion(token: str) -> Criterion | None:
    """Split a token on its first colon into a criterion.

    Returns None unless both the key and the value are non-empty.
    """
    key, sep, value = token.partition(KEY_VALUE_SEP)
    key = key.strip()
    value = value.strip()
    if not sep or not key or not value:
        return None
    return Criterion(column_key=key, pattern=value)


def parse_query(query_string: str) -> QueryPlan:
    """Parse a search string into a query plan.

    Whitespace-separated ``Key:Value`` tokens become column criteria.
    Tokens that are not ``Key:Value`` are dropped whenever at least one
    criterion exists. Without any criterion, the whole trimmed string
    becomes a free-text search.

    Args:
        query_string: The search query to parse.

    Returns:
        ``CriteriaList`` when any token parsed as a criterion, otherwise
        ``GlobalText``. An empty query yields ``GlobalText("")``, which
        matches every row.
    """
    query_string = query_string.strip()

    criteria: list[Criterion] = []
    for token in query_string.split():
        criterion = _parse_criterion(token)
        if criterion is not None:
            criteria.append(criterion)

    if criteria:
        return CriteriaList(criteria=criteria)
    return GlobalText(pattern=query_string)
