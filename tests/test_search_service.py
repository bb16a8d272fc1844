"""Tests for search_service.py — index building, primary/cross matching, result shape."""

import pytest
from constants import CALCULATORS, CONVERTER_GROUPS
from search_service import (
    SearchableEntry, build_calculator_index, build_converter_index, search,
)


def _titles(entries):
    return [e.title for e in entries]


# ── Indices ──

class TestIndices:
    def test_calculator_index_follows_catalog(self):
        index = build_calculator_index()
        assert [e.href for e in index] == [f"/calculators/{c['slug']}" for c in CALCULATORS]
        assert all(e.kind == "calculator" for e in index)

    def test_converter_index_skips_hidden_groups(self):
        titles = _titles(build_converter_index())
        visible = [g['name'] for g in CONVERTER_GROUPS if not g.get('hidden')]
        assert titles == visible
        assert "Energy" not in titles
        assert "Mechanics" not in titles

    def test_indices_are_memoized(self):
        assert build_converter_index() is build_converter_index()
        assert build_calculator_index() is build_calculator_index()

    def test_converter_keywords_include_units(self):
        pressure = next(e for e in build_converter_index() if e.href == "/converters/pressure")
        assert "psi" in pressure.keywords
        assert "kilopascal" in pressure.keywords


class TestSearchableEntry:
    def test_matches_title_description_features_keywords(self):
        entry = SearchableEntry(
            title="Pump Power Calculator",
            description="Shaft power from flow and head",
            href="/calculators/pump-power-calculator",
            kind="calculator",
            keywords=frozenset({"hydraulic"}),
            features=("Differential Head",),
        )
        assert entry.matches("pump power")
        assert entry.matches("shaft")
        assert entry.matches("differential")
        assert entry.matches("hydra")
        assert not entry.matches("viscosity")

    def test_to_dict(self):
        entry = build_calculator_index()[0]
        data = entry.to_dict()
        assert data["type"] == "calculator"
        assert data["href"] == entry.href
        assert data["features"] == list(entry.features)


# ── Query ──

class TestSearch:
    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_empty_query(self, query):
        results = search(query, "converter")
        assert results.primary_results == ()
        assert results.cross_results == ()
        assert results.show_cross_results is False

    def test_npsh_from_converter_page_shows_cross_results(self):
        results = search("npsh", "converter")
        assert results.primary_results == ()
        assert _titles(results.cross_results) == ["Suction Specific Speed Calculator"]
        assert results.show_cross_results is True
        assert results.cross_kind == "calculator"

    def test_npsh_from_calculator_page(self):
        results = search("npsh", "calculator")
        assert _titles(results.primary_results) == ["Suction Specific Speed Calculator"]
        assert results.show_cross_results is False

    def test_case_insensitive(self):
        assert "Pressure" in _titles(search("KPA", "converter").primary_results)
        assert "Pressure" in _titles(search("psi", "converter").primary_results)

    def test_query_is_stripped(self):
        assert _titles(search("  voltage  ", "converter").primary_results) == ["Electrical"]

    def test_flow_units(self):
        assert "Flow & Rate" in _titles(search("gpm", "converter").primary_results)

    def test_hidden_group_not_found(self):
        results = search("joule", "converter")
        assert results.primary_results == ()
        assert results.cross_results == ()
        assert results.show_cross_results is False

    def test_results_keep_catalog_order(self):
        results = search("pump", "calculator")
        order = {c['title']: i for i, c in enumerate(CALCULATORS)}
        positions = [order[t] for t in _titles(results.primary_results)]
        assert positions == sorted(positions)
        assert len(positions) >= 5

    def test_no_cross_when_primary_has_results(self):
        results = search("pump", "calculator")
        assert results.primary_results
        assert results.show_cross_results is False

    def test_invalid_kind(self):
        with pytest.raises(ValueError):
            search("pump", "article")

    def test_to_dict_shape(self):
        data = search("npsh", "converter").to_dict()
        assert set(data) == {
            "primary_results", "cross_results", "show_cross_results",
            "primary_type", "cross_type",
        }
        assert data["primary_type"] == "converter"
        assert data["cross_results"][0]["href"] == "/calculators/suction-specific-speed-calculator"
