"""
Search Index - Flattened, route-annotated view of the locale dictionaries.

Each leaf string of each language's translation tree becomes one IndexEntry:

  {"nav": {"bachelor": "Бакалавриат"}}  →  key="nav.bachelor", language="ru"

Lists are walked like mappings using the element index as the path segment.
Numbers, booleans, nulls and empty strings are skipped.

The index is built once and cached for the lifetime of the process. There is
no invalidation; a changed dictionary requires a restart.
"""

import threading
from dataclasses import dataclass
from typing import Any

from loguru import logger

from .routes import RouteResolver, get_route_info

SUPPORTED_LANGUAGES = ("ru", "en", "kg")


@dataclass(frozen=True)
class IndexEntry:
    """A single localized string plus its navigation metadata."""
    id: str
    key: str
    value: str
    language: str
    route: str
    category: str
    component: str
    priority: int
    title: str


class SearchIndex:
    """
    Lazily built index over a content dictionary.

    Args:
        content: Mapping of language code → nested translation tree
        languages: Language codes allowed into the index
        resolver: RouteResolver for metadata (default site tables if None)
    """

    def __init__(
        self,
        content: dict[str, Any],
        languages: tuple[str, ...] = SUPPORTED_LANGUAGES,
        resolver: RouteResolver | None = None,
    ):
        self.content = content
        self.languages = tuple(languages)
        self._resolve = resolver.resolve if resolver else get_route_info
        self._entries: tuple[IndexEntry, ...] | None = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._entries is not None

    def build(self) -> tuple[IndexEntry, ...]:
        """
        Build the index, or return the cached one.

        Returns:
            Tuple of IndexEntry in walk order (language order of the
            content dictionary, then key order within each tree)
        """
        if self._entries is not None:
            return self._entries

        with self._lock:
            if self._entries is None:
                self._entries = self._build()
        return self._entries

    def _build(self) -> tuple[IndexEntry, ...]:
        logger.debug("Building search index")
        collected: list[IndexEntry] = []

        for language, tree in self.content.items():
            if language not in self.languages:
                logger.warning(f"Skipping unsupported language '{language}'")
                continue
            self._flatten(tree, "", language, collected)

        # Keep first occurrence of each id
        seen = set()
        entries = []
        for entry in collected:
            if entry.id not in seen:
                seen.add(entry.id)
                entries.append(entry)

        logger.info(f"Search index built with {len(entries)} entries")
        for language in self.content:
            if language in self.languages:
                count = sum(1 for e in entries if e.language == language)
                logger.info(f"  {language.upper()}: {count} entries")

        return tuple(entries)

    def _flatten(self, node: Any, path: str, language: str, out: list[IndexEntry]) -> None:
        if isinstance(node, dict):
            items = node.items()
        elif isinstance(node, list):
            items = enumerate(node)
        else:
            return

        for name, value in items:
            current = f"{path}.{name}" if path else str(name)

            if isinstance(value, (dict, list)):
                self._flatten(value, current, language, out)
            elif isinstance(value, str) and value:
                info = self._resolve(current)
                out.append(IndexEntry(
                    id=f"{current}_{language}",
                    key=current,
                    value=value,
                    language=language,
                    route=info.route,
                    category=info.category,
                    component=info.component,
                    priority=info.priority,
                    title=info.title,
                ))

    def get_translation(self, key: str, language: str) -> str:
        """
        Look up a dot-path in the dictionary for a language.

        Unknown languages fall back to the "ru" tree. Missing paths and
        non-string values return the key itself.
        """
        node = self.content.get(language)
        if node is None:
            node = self.content.get("ru", {})

        for part in key.split("."):
            if isinstance(node, dict):
                node = node.get(part)
            elif isinstance(node, list) and part.isdigit() and int(part) < len(node):
                node = node[int(part)]
            else:
                return key

        return node if isinstance(node, str) and node else key


# Singleton accessor
_search_index_instance = None
_search_index_lock = threading.Lock()


def get_search_index(content: dict[str, Any] | None = None) -> SearchIndex:
    """
    Get the process-wide SearchIndex instance.

    The first call fixes the content dictionary. When content is None on
    that first call, the locales configured in settings are loaded.

    Returns:
        SearchIndex: The global instance
    """
    global _search_index_instance
    if _search_index_instance is None:
        with _search_index_lock:
            if _search_index_instance is None:
                if content is None:
                    from academy_search.utils.helpers import load_locales, load_settings
                    settings = load_settings()
                    content = load_locales(
                        settings["locales"]["path"],
                        settings["search"]["languages"],
                    )
                    languages = tuple(settings["search"]["languages"])
                else:
                    languages = SUPPORTED_LANGUAGES
                _search_index_instance = SearchIndex(content, languages=languages)
                return _search_index_instance

    if content is not None and content is not _search_index_instance.content:
        logger.warning("Search index already exists; ignoring the content passed in")
    return _search_index_instance


def build_search_index() -> tuple[IndexEntry, ...]:
    """Build (or fetch) the entries of the process-wide index."""
    return get_search_index().build()
