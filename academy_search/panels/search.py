"""
Search Panel - Headless controller for the search bar and results overlay.

Features:
- Debounced search as the user types (300ms by default)
- Enter searches immediately, or opens the selected result
- Keyboard navigation (Up/Down arrows, Enter, Escape to close)
- Focus opens the overlay; reopening with a stale query searches again
- Clear button resets the input, query and results
- Localized texts, category labels and match highlighting for rendering

The rendering layer owns widgets; it forwards input events here and redraws
from `store` changes.
"""

from academy_search.search.categories import category_label, get_search_categories
from academy_search.services.actions import SearchActions
from academy_search.services.navigation import NavigationBridge
from academy_search.utils.debounce import Debouncer, Scheduler

PLACEHOLDER_TEXTS = {
    "ru": "Поиск по академии...",
    "en": "Search the academy...",
    "kg": "Академиядан издөө...",
}

TRANSLATION_TEXTS = {
    "ru": {
        "results": "Результаты поиска",
        "no_results": "Ничего не найдено",
        "enter_query": "Введите запрос для поиска",
        "searching": "Идет поиск...",
        "go_to_page": "Перейти на страницу",
        "category": "Категория",
        "all": "Все",
        "type_to_search": "Начните вводить запрос...",
        "found": "Найдено результатов",
    },
    "en": {
        "results": "Search results",
        "no_results": "No results found",
        "enter_query": "Enter search query",
        "searching": "Searching...",
        "go_to_page": "Go to page",
        "category": "Category",
        "all": "All",
        "type_to_search": "Start typing to search...",
        "found": "Results found",
    },
    "kg": {
        "results": "Издөө натыйжалары",
        "no_results": "Эч нерсе табылган жок",
        "enter_query": "Издөө үчүн суроо киргизиңиз",
        "searching": "Издөө жүрүүдө...",
        "go_to_page": "Бетке өтүү",
        "category": "Категория",
        "all": "Баары",
        "type_to_search": "Издөө үчүн жазбай баштаңыз...",
        "found": "Табылган натыйжалар",
    },
}


def highlight_match(text: str, query: str) -> tuple[str, str, str]:
    """
    Split text around the first case-insensitive occurrence of query.

    Returns:
        (before, match, after); match is "" when query is empty or absent
    """
    if not query:
        return text, "", ""

    index = text.lower().find(query.lower())
    if index == -1:
        return text, "", ""

    end = index + len(query)
    return text[:index], text[index:end], text[end:]


class SearchPanel:
    """
    Input and selection logic for one search overlay.

    Args:
        actions: Facade of the session this panel drives
        bridge: Navigation bridge used when a result is activated
        debounce_ms: Quiet period before typed text is searched
        scheduler: Host event-loop scheduler for the debounce delay
    """

    def __init__(
        self,
        actions: SearchActions,
        bridge: NavigationBridge,
        debounce_ms: int = 300,
        scheduler: Scheduler | None = None,
    ):
        self.actions = actions
        self.store = actions.store
        self.bridge = bridge

        self.local_query = ""
        self._debouncer = Debouncer(debounce_ms, self._commit_query, scheduler)

        # Keyboard navigation
        self.selected_index = -1  # -1 means no selection
        self._last_results = self.store.state.results
        self.store.subscribe(self._on_state_changed)

    # --- Input events -----------------------------------------------------

    def on_focus(self):
        """Open the overlay; search again if a query has no results yet."""
        self.actions.open_search()
        state = self.store.state
        if state.query and not state.results:
            self.actions.perform_search(state.query)

    def on_search_changed(self, text: str):
        """Handle search entry text changes."""
        self.local_query = text
        self._debouncer.call(text)

    def _commit_query(self, text: str):
        # Input changed or was cleared since this text was scheduled
        if text != self.local_query:
            return
        if text != self.store.state.query:
            self.actions.set_query(text)
            self.actions.perform_search(text)

    def on_clear(self):
        """Clear button: reset input, query and results."""
        self._debouncer.cancel()
        self.local_query = ""
        self.actions.set_query("")
        self.actions.perform_search("")

    def on_language_changed(self, language: str):
        self.actions.set_language(language)

    def on_category_changed(self, category: str):
        self.actions.set_category(category)

    def on_key_press(self, key: str) -> bool:
        """
        Handle keyboard events.

        Args:
            key: Key name ("Escape", "Return", "Up", "Down")

        Returns:
            True if the key was handled
        """
        if key == "Escape":
            self._debouncer.cancel()
            self.actions.close_search()
            return True

        results = self.store.state.results

        if key == "Return":
            if 0 <= self.selected_index < len(results):
                return self.activate(results[self.selected_index])
            self._debouncer.cancel()
            self.actions.set_query(self.local_query)
            self.actions.perform_search(self.local_query)
            return True

        # No results - no navigation
        if not results:
            return False

        if key == "Down":
            if self.selected_index < len(results) - 1:
                self.selected_index += 1
            return True

        if key == "Up":
            if self.selected_index >= 0:
                self.selected_index -= 1  # 0 → -1 returns focus to the entry
            return True

        return False

    def activate(self, result) -> bool:
        """Navigate to a result; the bridge closes the overlay."""
        return self.bridge.navigate_to_result(result)

    def _on_state_changed(self, state):
        if state.results is not self._last_results:
            self._last_results = state.results
            self.selected_index = -1

    # --- Presentation -----------------------------------------------------

    @property
    def status(self) -> str:
        """One of: closed, loading, results, no_results, idle."""
        state = self.store.state
        if not state.is_open:
            return "closed"
        if state.is_loading:
            return "loading"
        if state.results:
            return "results"
        if state.query:
            return "no_results"
        return "idle"

    @property
    def texts(self) -> dict[str, str]:
        return TRANSLATION_TEXTS.get(self.store.state.language, TRANSLATION_TEXTS["ru"])

    @property
    def placeholder(self) -> str:
        return PLACEHOLDER_TEXTS.get(self.store.state.language, PLACEHOLDER_TEXTS["ru"])

    def found_label(self) -> str:
        return f"{self.texts['found']}: {len(self.store.state.results)}"

    def category_options(self) -> list[tuple[str, str]]:
        """(value, label) pairs for the category selector."""
        language = self.store.state.language
        return [
            (c["value"], c["label"].get(language) or c["label"]["ru"])
            for c in get_search_categories()
        ]

    def describe_result(self, result) -> dict:
        """Display fields for one result row."""
        before, match, after = highlight_match(result.value, result.query)
        return {
            "before": before,
            "match": match,
            "after": after,
            "key": result.key,
            "category": category_label(result.category, self.store.state.language),
            "target": f"{self.texts['go_to_page']}: {result.title or result.component}",
            "language": result.language.upper(),
            "score": f"{round(result.score)}%",
        }
