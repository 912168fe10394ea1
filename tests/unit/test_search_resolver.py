"""Unit tests for column key resolution."""

from __future__ import annotations

from catalog_search.search.resolver import DEFAULT_ALIASES, resolve_column

COLUMNS = ("Artikel", "Tuertyp", "Dicke_mm", "Oberflaeche", "Preis")


class TestExactMatch:
    def test_exact(self) -> None:
        assert resolve_column("Tuertyp", COLUMNS) == "Tuertyp"

    def test_case_insensitive_returns_schema_spelling(self) -> None:
        assert resolve_column("TUERTYP", COLUMNS) == "Tuertyp"

    def test_exact_beats_alias(self) -> None:
        columns = ("Dicke", "Dicke_mm")
        assert resolve_column("dicke", columns, {"Dicke": "Dicke_mm"}) == "Dicke"


class TestAlias:
    def test_default_alias(self) -> None:
        assert DEFAULT_ALIASES == {"Dicke": "Dicke_mm"}
        assert resolve_column("Dicke", COLUMNS) == "Dicke_mm"

    def test_alias_key_case_insensitive(self) -> None:
        assert resolve_column("dICKE", COLUMNS, {"Dicke": "Dicke_mm"}) == "Dicke_mm"

    def test_alias_target_case_insensitive(self) -> None:
        assert resolve_column("Typ", COLUMNS, {"Typ": "TUERTYP"}) == "Tuertyp"

    def test_alias_beats_substring(self) -> None:
        columns = ("Typnummer", "Tuertyp")
        assert resolve_column("Typ", columns, {"Typ": "Tuertyp"}) == "Tuertyp"

    def test_alias_to_missing_column_falls_through(self) -> None:
        # Target absent: the substring tier still applies
        assert resolve_column("Preis", ("Preis_EUR",), {"Preis": "Preis_CHF"}) == "Preis_EUR"

    def test_empty_alias_map_disables_aliases(self) -> None:
        assert resolve_column("Dicke", ("Staerke_mm",), {}) is None


class TestSubstring:
    def test_first_column_in_order_wins(self) -> None:
        columns = ("Breite_mm", "Hoehe_mm", "Dicke_mm")
        assert resolve_column("_mm", columns, {}) == "Breite_mm"

    def test_substring_case_insensitive(self) -> None:
        assert resolve_column("flaeche", COLUMNS) == "Oberflaeche"

    def test_unresolved(self) -> None:
        assert resolve_column("Foo", COLUMNS) is None

    def test_no_columns(self) -> None:
        assert resolve_column("Foo", ()) is None
