"""
Search Actions - Imperative operations on a search session.

Wraps a SearchStore and a SearchEngine. Search runs synchronously; the
loading flag only exists so the UI can show a spinner. Debouncing keystrokes
is the caller's job (see panels.search).
"""

from loguru import logger

from academy_search.search.engine import SearchEngine

from .navigation import NavigationBridge
from .session import Action, ActionType, SearchStore


class SearchActions:
    """
    Facade over a search session.

    Args:
        store: Session state container
        engine: Engine to run queries against
        bridge: Optional navigation bridge; its close signal closes the session
    """

    def __init__(self, store: SearchStore, engine: SearchEngine, bridge: NavigationBridge | None = None):
        self.store = store
        self.engine = engine
        if bridge is not None:
            bridge.on_close(self.close_search)

    def perform_search(self, query: str | None = None) -> None:
        """
        Run a search and commit its results.

        Args:
            query: Query text; defaults to the session's current query
        """
        if query is None:
            query = self.store.state.query

        if not query.strip():
            self.store.dispatch(Action(ActionType.SET_RESULTS, []))
            return

        self.store.dispatch(Action(ActionType.SET_LOADING, True))

        state = self.store.state
        try:
            results = self.engine.search(query, state.language, state.filters.category)
        except Exception:
            logger.exception(f"Search failed for query '{query}'")
            results = []

        self.store.dispatch(Action(ActionType.SET_RESULTS, results))

    def set_query(self, query: str) -> None:
        self.store.dispatch(Action(ActionType.SET_QUERY, query))

    def set_language(self, language: str) -> None:
        """Switch language and re-run the active query, if any."""
        self.store.dispatch(Action(ActionType.SET_LANGUAGE, language))
        if self.store.state.query:
            self.perform_search(self.store.state.query)

    def set_category(self, category: str) -> None:
        """Switch category filter and re-run the active query, if any."""
        self.store.dispatch(Action(ActionType.SET_CATEGORY, category))
        if self.store.state.query:
            self.perform_search(self.store.state.query)

    def open_search(self) -> None:
        self.store.dispatch(Action(ActionType.SET_OPEN, True))

    def close_search(self) -> None:
        self.store.dispatch(Action(ActionType.SET_OPEN, False))

    def clear_search(self) -> None:
        """Reset category filter, query and results."""
        self.store.dispatch(Action(ActionType.CLEAR_FILTERS))
