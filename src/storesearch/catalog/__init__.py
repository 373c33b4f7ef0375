"""
Access to the iTunes catalog search endpoint.
"""

__all__ = [
    "CatalogFetcher",
    "ParseError",
    "ResultShape",
    "classify",
    "parse_item",
    "parse_search_result",
]

from .errors import ParseError
from .fetcher import CatalogFetcher
from .parser import ResultShape, classify, parse_item, parse_search_result
