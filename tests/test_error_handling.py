"""
Tests for error handling across the index, engine and facade.

Verifies graceful degradation when things go wrong:
- Malformed dictionary leaves
- Engine failures during a search
- Unknown languages and categories
"""

from unittest.mock import MagicMock

from academy_search.search.engine import SearchEngine
from academy_search.search.index import SearchIndex
from academy_search.services.actions import SearchActions
from academy_search.services.session import SearchStore


class TestMalformedContent:
    """Test the index builder skips leaves it cannot index."""

    def test_non_string_leaves_are_skipped(self):
        index = SearchIndex({"ru": {"a": 1, "b": None, "c": 2.5, "d": False, "e": "ok"}})
        assert [e.key for e in index.build()] == ["e"]

    def test_non_mapping_language_tree(self):
        index = SearchIndex({"ru": "not a tree", "en": {"a": "x"}})
        assert [e.id for e in index.build()] == ["a_en"]

    def test_search_over_empty_index(self):
        assert SearchEngine(SearchIndex({})).search("что-то", "ru") == []


class TestFacadeFailures:
    """Test SearchActions contains engine failures."""

    def test_engine_exception_yields_empty_results(self):
        engine = MagicMock()
        engine.search.side_effect = RuntimeError("index exploded")
        actions = SearchActions(SearchStore(), engine)

        # Should not raise - logs exception internally
        actions.perform_search("музей")

        state = actions.store.state
        assert state.results == ()
        assert state.is_loading is False

    def test_previous_results_replaced_on_failure(self, engine):
        actions = SearchActions(SearchStore(), engine)
        actions.perform_search("история")
        assert actions.store.state.results

        actions.engine = MagicMock()
        actions.engine.search.side_effect = ValueError("boom")
        actions.perform_search("история")
        assert actions.store.state.results == ()

    def test_unknown_language_and_category(self, session):
        session.set_language("fr")
        session.set_category("nowhere")
        session.perform_search("история")
        assert session.store.state.results == ()
