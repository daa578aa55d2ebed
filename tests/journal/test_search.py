"""Tests for didi.journal.search."""

import pytest

from didi.core.exceptions import ValidationError
from didi.journal.search import all_of, matches_any, normalize_terms, search, visible


@pytest.fixture
def populated(store):
    store.insert("Trip to Rome", "Colosseum", ["travel", "rome"])
    store.insert("Grocery list", "eggs", ["chores"])
    store.insert("Roman holiday film", "", ["movies"])
    store.insert("Weekend", "", ["Travel", "hiking"])
    return store


def _titles(entries):
    return [e.title for e in entries]


class TestPredicates:
    def test_visible(self, populated):
        entry = populated.get(1)
        assert visible(False)(entry)
        assert not visible(False)(entry.with_hidden(True))
        assert visible(True)(entry.with_hidden(True))

    def test_normalize_terms(self):
        assert normalize_terms(["Rome", "  ", "", "TRAVEL "]) == ["rome", "travel"]

    def test_single_string_term(self):
        assert normalize_terms("Rome") == ["rome"]

    def test_no_terms_raises(self):
        with pytest.raises(ValidationError):
            normalize_terms([])
        with pytest.raises(ValidationError):
            matches_any(["", "   "])

    def test_all_of(self, populated):
        entry = populated.get(1)
        assert all_of(visible(False), matches_any(["rome"]))(entry)
        assert not all_of(visible(False), matches_any(["chores"]))(entry)


class TestSearch:
    def test_title_substring_case_insensitive(self, populated):
        assert _titles(search(populated, ["ROM"])) == ["Trip to Rome", "Roman holiday film"]

    def test_keyword_exact_match(self, populated):
        assert _titles(search(populated, ["chores"])) == ["Grocery list"]

    def test_keyword_partial_does_not_match(self, populated):
        assert search(populated, ["chore"]) == []

    def test_keyword_case_insensitive(self, populated):
        assert _titles(search(populated, ["TRAVEL"])) == ["Trip to Rome", "Weekend"]

    def test_content_not_searched(self, populated):
        assert search(populated, ["colosseum"]) == []

    def test_terms_are_or_combined(self, populated):
        assert _titles(search(populated, ["movies", "hiking"])) == ["Roman holiday film", "Weekend"]

    def test_entry_listed_once(self, populated):
        assert _titles(search(populated, ["rome", "travel", "trip"])) == [
            "Trip to Rome",
            "Weekend",
        ]

    def test_no_match(self, populated):
        assert search(populated, ["quantum"]) == []

    def test_hide_unhide_scenario(self, store):
        a = store.insert("Trip to Rome", "", ["travel", "rome"])
        assert _titles(search(store, ["rome"], include_hidden=False)) == ["Trip to Rome"]

        store.set_hidden([a.id], True)
        assert search(store, ["rome"], include_hidden=False) == []
        found = search(store, ["rome"], include_hidden=True)
        assert [e.id for e in found] == [a.id]
        assert found[0].hidden is True

    def test_blank_terms_rejected(self, populated):
        with pytest.raises(ValidationError):
            search(populated, [" "])
