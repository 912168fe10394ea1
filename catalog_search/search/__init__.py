"""Search query parsing and execution for catalog tables."""

from catalog_search.search.ast_nodes import (
    CriteriaList,
    Criterion,
    GlobalText,
    QueryPlan,
)
from catalog_search.search.parser import parse_query
from catalog_search.search.patterns import compile_pattern
from catalog_search.search.query import execute_search, search_table
from catalog_search.search.resolver import DEFAULT_ALIASES, resolve_column

__all__ = [
    "DEFAULT_ALIASES",
    "CriteriaList",
    "Criterion",
    "GlobalText",
    "QueryPlan",
    "compile_pattern",
    "execute_search",
    "parse_query",
    "resolve_column",
    "search_table",
]
