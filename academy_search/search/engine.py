"""
Search Engine - Substring search over the cached index with ranked results.

Score for an entry that contains the query (always same language):
  50                         language match
  + priority * 2             content priority from the route tables
  + 50 exact / 30 prefix / 20 separate word / 10 substring
  + min(len(query) * 2, 20)  longer queries weigh more
  + 15                       navigation keys ("nav.")
capped at 100.

Results are sorted by score (stable, so ties keep index order) and truncated.
"""

from dataclasses import asdict, dataclass

from loguru import logger

from .index import IndexEntry, SearchIndex, get_search_index

MAX_RESULTS = 25


@dataclass(frozen=True)
class ScoredResult(IndexEntry):
    """An IndexEntry matched by a query."""
    score: int = 0
    type: str = "translation"
    query: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_score(entry: IndexEntry, query: str) -> int:
    """
    Score an entry against a lowercased, stripped query.

    Args:
        entry: Entry whose value already contains the query
        query: Normalized query text

    Returns:
        Integer score, at most 100
    """
    text = entry.value.lower()
    score = 50
    score += entry.priority * 2

    if text == query:
        score += 50
    elif text.startswith(query):
        score += 30
    elif f" {query} " in text:
        score += 20
    else:
        score += 10

    score += min(len(query) * 2, 20)

    if entry.key.startswith("nav."):
        score += 15

    return min(score, 100)


class SearchEngine:
    """Search one language of a SearchIndex."""

    def __init__(self, index: SearchIndex | None = None, max_results: int = MAX_RESULTS):
        self._index = index
        self.max_results = min(max_results, MAX_RESULTS)

    @property
    def index(self) -> SearchIndex:
        if self._index is None:
            self._index = get_search_index()
        return self._index

    def search(self, query: str, language: str, category: str = "all") -> list[ScoredResult]:
        """
        Find entries in `language` whose value contains `query`.

        Args:
            query: Raw query text (case-insensitive, surrounding spaces ignored)
            language: Language code; other languages are never returned
            category: Category filter, "all" disables filtering

        Returns:
            At most max_results (never above MAX_RESULTS) ScoredResult, highest score first
        """
        normalized = query.lower().strip()
        if not normalized:
            return []

        results = []
        for entry in self.index.build():
            if entry.language != language:
                continue
            if normalized not in entry.value.lower():
                continue
            if category != "all" and entry.category != category:
                continue

            results.append(ScoredResult(
                **asdict(entry),
                score=calculate_score(entry, normalized),
                query=query,
            ))

        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug(
            f"Search '{query}' [{language}/{category}]: {len(results)} matches"
        )
        return results[:self.max_results]


def search_in_locales(query: str, language: str, category: str = "all") -> list[ScoredResult]:
    """Search the process-wide index."""
    return SearchEngine().search(query, language, category)
