"""
Search package - Locale indexing, route resolution and ranked search.

Translation dictionaries are flattened into an index once, annotated with
site routes, and searched per language with a scoring heuristic.
"""

from .categories import get_search_categories
from .engine import ScoredResult, SearchEngine, search_in_locales
from .index import IndexEntry, SearchIndex, build_search_index, get_search_index
from .routes import RouteInfo, RouteResolver, get_route_info

__all__ = [
    "IndexEntry",
    "RouteInfo",
    "RouteResolver",
    "ScoredResult",
    "SearchEngine",
    "SearchIndex",
    "build_search_index",
    "get_route_info",
    "get_search_categories",
    "get_search_index",
    "search_in_locales",
]
