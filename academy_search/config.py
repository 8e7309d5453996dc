"""
Academy Search - Application wiring

Builds a ready-to-use search panel for the host site: settings, shared
index, session store, action facade and navigation bridge.

Usage:
  panel = create_search_panel(navigate=router.push, language="en")
  panel.on_focus()
  panel.on_search_changed("бакалавр")
"""

from typing import Any, Callable, Dict

from loguru import logger

from academy_search.panels.search import SearchPanel
from academy_search.search.engine import SearchEngine
from academy_search.search.index import SearchIndex, get_search_index
from academy_search.services.actions import SearchActions
from academy_search.services.navigation import NavigationBridge
from academy_search.services.session import SearchStore
from academy_search.utils.debounce import Scheduler
from academy_search.utils.helpers import load_settings


def create_search_panel(
    navigate: Callable[[str], None],
    language: str | None = None,
    settings: Dict[str, Any] | None = None,
    content: Dict[str, Any] | None = None,
    scheduler: Scheduler | None = None,
) -> SearchPanel:
    """
    Wire a search session for the host application.

    Args:
        navigate: Host router callback taking a route path
        language: Active site language; defaults to settings
        settings: Pre-loaded settings; loaded from data/settings.toml if None
        content: Content dictionary for a private index. When None the
                 process-wide index is used.
        scheduler: Event-loop scheduler for the input debounce; a
                   threading.Timer is used if None

    Returns:
        SearchPanel bound to a fresh session
    """
    if settings is None:
        settings = load_settings()

    search_settings = settings["search"]
    if content is not None:
        index = SearchIndex(content, languages=tuple(search_settings["languages"]))
    else:
        index = get_search_index()

    store = SearchStore(language=language or search_settings["default_language"])
    engine = SearchEngine(index, max_results=search_settings["max_results"])
    bridge = NavigationBridge(navigate)
    actions = SearchActions(store, engine, bridge)

    logger.debug(f"Search panel created for language '{store.state.language}'")
    return SearchPanel(
        actions,
        bridge,
        debounce_ms=settings["panel"]["debounce_ms"],
        scheduler=scheduler,
    )
