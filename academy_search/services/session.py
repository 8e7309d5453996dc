"""
Search Session - State container for one open search UI.

State is an immutable SearchState replaced on every dispatched Action:

  SET_QUERY       query text
  SET_RESULTS     results, and clears the loading flag in the same step
  SET_LOADING     loading flag
  SET_OPEN        overlay visibility
  SET_LANGUAGE    active language
  SET_CATEGORY    category filter
  CLEAR_FILTERS   category back to "all", query and results emptied

Unknown actions leave the state unchanged.
"""

import threading
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable

from loguru import logger


class ActionType(str, Enum):
    SET_QUERY = "SET_QUERY"
    SET_RESULTS = "SET_RESULTS"
    SET_LOADING = "SET_LOADING"
    SET_OPEN = "SET_OPEN"
    SET_LANGUAGE = "SET_LANGUAGE"
    SET_CATEGORY = "SET_CATEGORY"
    CLEAR_FILTERS = "CLEAR_FILTERS"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


@dataclass(frozen=True)
class SearchFilters:
    category: str = "all"


@dataclass(frozen=True)
class SearchState:
    query: str = ""
    results: tuple = ()
    is_loading: bool = False
    is_open: bool = False
    language: str = "ru"
    filters: SearchFilters = field(default_factory=SearchFilters)


def search_reducer(state: SearchState, action: Action) -> SearchState:
    """Return the state that follows `action`. Never mutates `state`."""
    kind = action.type

    if kind == ActionType.SET_QUERY:
        return replace(state, query=action.payload)
    if kind == ActionType.SET_RESULTS:
        return replace(state, results=tuple(action.payload), is_loading=False)
    if kind == ActionType.SET_LOADING:
        return replace(state, is_loading=bool(action.payload))
    if kind == ActionType.SET_OPEN:
        return replace(state, is_open=bool(action.payload))
    if kind == ActionType.SET_LANGUAGE:
        return replace(state, language=action.payload)
    if kind == ActionType.SET_CATEGORY:
        return replace(state, filters=replace(state.filters, category=action.payload))
    if kind == ActionType.CLEAR_FILTERS:
        return replace(state, filters=SearchFilters(), query="", results=())

    return state


class SearchStore:
    """
    Holds the SearchState of one search session.

    Listeners registered with subscribe() are called with the new state
    after every dispatch (the UI re-renders from this).

    Args:
        language: Initial language, normally the site's active language
    """

    def __init__(self, language: str = "ru"):
        self._state = SearchState(language=language)
        self._listeners: list[Callable[[SearchState], None]] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> SearchState:
        return self._state

    def dispatch(self, action: Action) -> SearchState:
        with self._lock:
            self._state = search_reducer(self._state, action)
            state = self._state
        logger.debug(f"Dispatched {action.type.value}")

        for listener in list(self._listeners):
            listener(state)
        return state

    def subscribe(self, listener: Callable[[SearchState], None]) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
