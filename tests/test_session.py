"""
Tests for the search session reducer and store.
"""

from academy_search.services.session import (
    Action,
    ActionType,
    SearchFilters,
    SearchState,
    SearchStore,
    search_reducer,
)


class TestReducer:
    """Test each action's transition."""

    def test_initial_state(self):
        state = SearchState()
        assert state.query == ""
        assert state.results == ()
        assert state.is_loading is False
        assert state.is_open is False
        assert state.filters.category == "all"

    def test_set_query(self):
        state = search_reducer(SearchState(), Action(ActionType.SET_QUERY, "музей"))
        assert state.query == "музей"

    def test_set_results_clears_loading(self):
        loading = SearchState(is_loading=True)
        state = search_reducer(loading, Action(ActionType.SET_RESULTS, ["a", "b"]))
        assert state.results == ("a", "b")
        assert state.is_loading is False

    def test_set_loading(self):
        state = search_reducer(SearchState(), Action(ActionType.SET_LOADING, True))
        assert state.is_loading is True

    def test_set_open(self):
        state = search_reducer(SearchState(), Action(ActionType.SET_OPEN, True))
        assert state.is_open is True

    def test_set_language(self):
        state = search_reducer(SearchState(), Action(ActionType.SET_LANGUAGE, "kg"))
        assert state.language == "kg"

    def test_set_category(self):
        state = search_reducer(SearchState(), Action(ActionType.SET_CATEGORY, "science"))
        assert state.filters == SearchFilters(category="science")

    def test_clear_filters_is_compound_reset(self):
        state = SearchState(
            query="музей",
            results=("x",),
            is_open=True,
            language="en",
            filters=SearchFilters(category="academy"),
        )
        cleared = search_reducer(state, Action(ActionType.CLEAR_FILTERS))
        assert cleared.query == ""
        assert cleared.results == ()
        assert cleared.filters.category == "all"
        # Visibility and language are untouched
        assert cleared.is_open is True
        assert cleared.language == "en"

    def test_unknown_action_returns_same_state(self):
        state = SearchState(query="q")
        assert search_reducer(state, Action("BOGUS", 1)) is state

    def test_reducer_does_not_mutate(self):
        state = SearchState()
        search_reducer(state, Action(ActionType.SET_QUERY, "x"))
        assert state.query == ""


class TestStore:
    """Test dispatch and change listeners."""

    def test_initial_language(self):
        assert SearchStore(language="en").state.language == "en"

    def test_dispatch_updates_state(self):
        store = SearchStore()
        store.dispatch(Action(ActionType.SET_OPEN, True))
        assert store.state.is_open is True

    def test_listeners_receive_new_state(self):
        store = SearchStore()
        seen = []
        store.subscribe(seen.append)
        store.dispatch(Action(ActionType.SET_QUERY, "a"))
        assert [s.query for s in seen] == ["a"]

    def test_unsubscribe(self):
        store = SearchStore()
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        store.dispatch(Action(ActionType.SET_QUERY, "a"))
        assert seen == []
