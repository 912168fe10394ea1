"""Unit tests for column suggestions."""

from __future__ import annotations

from catalog_search.search.parser import parse_query
from catalog_search.utils.matching import (
    normalize_column_name,
    suggest_columns,
    unresolved_keys,
)

COLUMNS = ("Artikel", "Tuertyp", "Dicke_mm", "Oberflaeche", "Preis")


class TestNormalizeColumnName:
    def test_separators_become_spaces(self) -> None:
        assert normalize_column_name("Dicke_mm") == "dicke mm"
        assert normalize_column_name(" Breite-mm / Zoll ") == "breite mm zoll"


class TestSuggestColumns:
    def test_typo_suggests_column(self) -> None:
        assert suggest_columns("Turetyp", COLUMNS)[0] == "Tuertyp"

    def test_limit(self) -> None:
        assert len(suggest_columns("e", COLUMNS, limit=2, score_cutoff=0)) <= 2

    def test_nothing_close(self) -> None:
        assert suggest_columns("qqqqqq", COLUMNS) == []

    def test_empty_inputs(self) -> None:
        assert suggest_columns("", COLUMNS) == []
        assert suggest_columns("Typ", ()) == []


class TestUnresolvedKeys:
    def test_lists_unknown_keys_in_order(self) -> None:
        plan = parse_query("Foo:1 Tuertyp:VSR Bar:2")
        assert unresolved_keys(plan, COLUMNS) == ["Foo", "Bar"]

    def test_alias_and_substring_count_as_resolved(self) -> None:
        plan = parse_query("Dicke:39 flaeche:eiche")
        assert unresolved_keys(plan, COLUMNS) == []

    def test_free_text_has_no_keys(self) -> None:
        assert unresolved_keys(parse_query("Foo bar"), COLUMNS) == []
