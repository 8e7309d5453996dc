# Academy Search Services Package
"""
Session services for the academy search.

Services hold per-session state, orchestrate searches and hand navigation
requests to the host application.
"""

from .actions import SearchActions
from .navigation import NavigationBridge
from .session import Action, ActionType, SearchState, SearchStore, search_reducer

__all__ = [
    "Action",
    "ActionType",
    "NavigationBridge",
    "SearchActions",
    "SearchState",
    "SearchStore",
    "search_reducer",
]
