"""Unit tests for search query execution."""

from __future__ import annotations

import logging

import pytest

from catalog_search.search.ast_nodes import CriteriaList, Criterion, GlobalText
from catalog_search.search.parser import parse_query
from catalog_search.search.query import execute_search, search_table
from catalog_search.table import Table


def _articles(table: Table) -> list[str]:
    return [row[0] for row in table.rows]


@pytest.fixture
def and_table() -> Table:
    return Table(
        columns=("Artikel", "Tuertyp", "Dicke_mm"),
        rows=[
            ("A1", "VSR", "39"),
            ("A2", "VSR", "45"),
            ("A3", "LS", "39"),
        ],
    )


class TestGlobalTextSearch:
    def test_matches_any_column(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("eiche"))
        assert _articles(result) == ["T-100", "T-103"]

    def test_wildcard_across_columns(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("*39*"))
        assert _articles(result) == ["T-100", "T-102"]

    def test_whole_string_used_as_pattern(self, door_table: Table) -> None:
        result = execute_search(door_table, GlobalText(pattern="eiche natur"))
        assert _articles(result) == ["T-100"]

    def test_numeric_cells_matched_as_text(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("412.5"))
        assert _articles(result) == ["T-100"]


class TestCriteriaSearch:
    def test_substring_match(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("Tuertyp:VSR"))
        assert _articles(result) == ["T-100", "T-101"]

    def test_and_semantics(self, and_table: Table) -> None:
        result = execute_search(and_table, parse_query("Tuertyp:VSR Dicke:39"))
        assert result.rows == (("A1", "VSR", "39"),)

    def test_alias_equivalent_to_real_name(self, and_table: Table) -> None:
        via_alias = execute_search(and_table, parse_query("Dicke:39"))
        via_name = execute_search(and_table, parse_query("Dicke_mm:39"))
        assert via_alias == via_name
        assert _articles(via_alias) == ["A1", "A3"]

    def test_custom_aliases(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("Typ:LS"), aliases={"Typ": "Tuertyp"})
        assert _articles(result) == ["T-102"]

    def test_fuzzy_column_key(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("flaeche:buche"))
        assert _articles(result) == ["T-101"]

    def test_wildcard_criterion(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("Tuertyp:VS*"))
        assert _articles(result) == ["T-100", "T-101", "T-103"]

    def test_missing_value_is_empty_text(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("Dicke:*"))
        assert len(result) == 5

    def test_unknown_key_is_ignored(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("Foo:bar"))
        assert result == door_table

    def test_unknown_key_does_not_affect_other_criteria(self, door_table: Table) -> None:
        with_unknown = execute_search(door_table, parse_query("Foo:bar Tuertyp:LS"))
        without = execute_search(door_table, parse_query("Tuertyp:LS"))
        assert with_unknown == without

    def test_unknown_key_logged(
        self, door_table: Table, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="catalog_search.search.query"):
            execute_search(door_table, CriteriaList([Criterion("Foo", "bar")]))
        assert "unknown column: Foo" in caplog.text

    def test_plain_tokens_ignored_with_criteria(self, door_table: Table) -> None:
        # "buche" would exclude T-100 if it were applied
        result = execute_search(door_table, parse_query("buche Tuertyp:VSR"))
        assert _articles(result) == ["T-100", "T-101"]


class TestResultShape:
    def test_no_match_keeps_schema(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("Tuertyp:ZZZ"))
        assert result.columns == door_table.columns
        assert result.rows == ()

    def test_no_match_free_text(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("nothing-like-this"))
        assert result.columns == door_table.columns
        assert len(result) == 0

    def test_order_preserved(self, door_table: Table) -> None:
        result = execute_search(door_table, parse_query("T-10*"))
        assert _articles(result) == _articles(door_table)

    def test_source_not_mutated(self, door_table: Table) -> None:
        before = door_table.rows
        execute_search(door_table, parse_query("Tuertyp:LS"))
        assert door_table.rows == before

    def test_searches_do_not_compose(self, door_table: Table) -> None:
        first = execute_search(door_table, parse_query("Tuertyp:LS"))
        second = execute_search(door_table, parse_query("Tuertyp:VSR"))
        assert _articles(first) == ["T-102"]
        assert _articles(second) == ["T-100", "T-101"]

    def test_empty_table(self) -> None:
        table = Table(columns=("a", "b"))
        assert execute_search(table, parse_query("x")) == table

    @pytest.mark.parametrize(
        "query",
        ["", ":", "::", "*", "a:", ":b", "(", "[*", "\\", "Foo:(*", "a:b:c"],
    )
    def test_never_raises(self, door_table: Table, query: str) -> None:
        result = execute_search(door_table, parse_query(query))
        assert result.columns == door_table.columns


class TestSearchTable:
    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_empty_query_is_identity(self, door_table: Table, query: str) -> None:
        assert search_table(door_table, query) is door_table

    def test_parses_and_executes(self, door_table: Table) -> None:
        result = search_table(door_table, "Tuertyp:VSR Dicke:45")
        assert _articles(result) == ["T-101"]
