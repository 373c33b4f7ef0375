"""
Decoding of catalog search responses into :class:`SearchResult` records.

Every item in the ``results`` array is first classified into a
:class:`ResultShape`, then handed to the decoder registered for that shape.
Items whose shape is unknown, or which lack a field their shape requires,
are dropped without failing the whole response.
"""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from storesearch.schemas import SearchResult

from .errors import ItemParseError, ParseError

logger = logging.getLogger(__name__)


class ResultShape(enum.Enum):
    TRACK = "track"
    AUDIOBOOK = "audiobook"
    SOFTWARE = "software"
    EBOOK = "ebook"


_WRAPPER_TYPES: dict[str, ResultShape] = {
    "track": ResultShape.TRACK,
    "audiobook": ResultShape.AUDIOBOOK,
    "software": ResultShape.SOFTWARE,
}


def parse_search_result(raw: str | bytes) -> list[SearchResult]:
    """Decodes a raw response body into search results.

    The results are returned in response order; sorting is left to the
    caller.

    Args:
        raw: Response body of a catalog search request.

    Returns:
        The decoded results. Empty when the top-level ``results`` array is
        missing or is not an array.

    Raises:
        ParseError: If the body is not JSON or its root is not an object.
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError) as e:
        raise ParseError(f"Invalid JSON in search response: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Search response root must be an object, got {type(data).__name__}"
        )

    items = data.get("results")
    if not isinstance(items, list):
        logger.debug("Search response has no 'results' array")
        return []

    results: list[SearchResult] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        result = parse_item(item)
        if result is not None:
            results.append(result)

    dropped = len(items) - len(results)
    if dropped:
        logger.debug("Dropped %d of %d catalog items", dropped, len(items))
    return results


def classify(item: Mapping[str, Any]) -> ResultShape | None:
    """Selects the shape of a raw catalog item.

    ``wrapperType`` decides when present; e-books carry no wrapper type and
    are recognised by ``kind`` instead.
    """
    wrapper_type = item.get("wrapperType")
    if isinstance(wrapper_type, str):
        return _WRAPPER_TYPES.get(wrapper_type)
    if item.get("kind") == "ebook":
        return ResultShape.EBOOK
    return None


def parse_item(item: Mapping[str, Any]) -> SearchResult | None:
    """Classifies and decodes a single raw item.

    Returns:
        The decoded result, or None if the item is unrecognised or malformed.
    """
    shape = classify(item)
    if shape is None:
        return None
    try:
        return _DECODERS[shape](item)
    except ItemParseError as e:
        logger.debug("Skipping %s item: %s", shape.value, e)
        return None


def parse_track(item: Mapping[str, Any]) -> SearchResult:
    return SearchResult(
        name=_require_str(item, "trackName"),
        artist_name=_require_str(item, "artistName"),
        artwork_small_url=_require_str(item, "artworkUrl60"),
        artwork_large_url=_require_str(item, "artworkUrl100"),
        store_url=_require_str(item, "trackViewUrl"),
        kind=_require_str(item, "kind"),
        currency=_require_str(item, "currency"),
        price=_opt_price(item, "trackPrice"),
        genre=_opt_str(item, "primaryGenreName"),
    )


def parse_audiobook(item: Mapping[str, Any]) -> SearchResult:
    return SearchResult(
        name=_require_str(item, "collectionName"),
        artist_name=_require_str(item, "artistName"),
        artwork_small_url=_require_str(item, "artworkUrl60"),
        artwork_large_url=_require_str(item, "artworkUrl100"),
        store_url=_require_str(item, "collectionViewUrl"),
        kind="audiobook",
        currency=_require_str(item, "currency"),
        price=_opt_price(item, "collectionPrice"),
        genre=_opt_str(item, "primaryGenreName"),
    )


def parse_software(item: Mapping[str, Any]) -> SearchResult:
    return SearchResult(
        name=_require_str(item, "trackName"),
        artist_name=_require_str(item, "artistName"),
        artwork_small_url=_require_str(item, "artworkUrl60"),
        artwork_large_url=_require_str(item, "artworkUrl100"),
        store_url=_require_str(item, "trackViewUrl"),
        kind=_require_str(item, "kind"),
        currency=_require_str(item, "currency"),
        price=_opt_price(item, "price"),
        genre=_opt_str(item, "primaryGenreName"),
    )


def parse_ebook(item: Mapping[str, Any]) -> SearchResult:
    genre = _opt_str(item, "primaryGenreName")
    genres = item.get("genres")
    if isinstance(genres, list):
        genre = ", ".join(g for g in genres if isinstance(g, str))

    return SearchResult(
        name=_require_str(item, "trackName"),
        artist_name=_require_str(item, "artistName"),
        artwork_small_url=_require_str(item, "artworkUrl60"),
        artwork_large_url=_require_str(item, "artworkUrl100"),
        store_url=_require_str(item, "trackViewUrl"),
        kind=_require_str(item, "kind"),
        currency=_require_str(item, "currency"),
        price=_opt_price(item, "price"),
        genre=genre,
    )


_DECODERS: dict[ResultShape, Callable[[Mapping[str, Any]], SearchResult]] = {
    ResultShape.TRACK: parse_track,
    ResultShape.AUDIOBOOK: parse_audiobook,
    ResultShape.SOFTWARE: parse_software,
    ResultShape.EBOOK: parse_ebook,
}


def _require_str(item: Mapping[str, Any], key: str) -> str:
    value = item.get(key)
    if not isinstance(value, str):
        raise ItemParseError(f"missing or non-string field {key!r}")
    return value


def _opt_str(item: Mapping[str, Any], key: str) -> str:
    value = item.get(key)
    return value if isinstance(value, str) else ""


def _opt_price(item: Mapping[str, Any], key: str) -> float:
    value = item.get(key)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)
