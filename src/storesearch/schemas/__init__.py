"""
Data contracts and type definitions.
"""

__all__ = [
    "SearchConfig",
    "SessionConfig",
    "Category",
    "SearchResult",
    "SearchState",
    "NotSearched",
    "Loading",
    "NoResults",
    "Results",
    "name_sort_key",
    "sort_results",
]

from .config import SearchConfig, SessionConfig
from .search import Category, SearchResult, name_sort_key, sort_results
from .state import Loading, NoResults, NotSearched, Results, SearchState
