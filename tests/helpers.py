"""Builders for fake catalog payloads."""

from __future__ import annotations

import json
from typing import Any


def make_track(name: str, **overrides: Any) -> dict[str, Any]:
    """Build a track-shaped catalog item."""
    item: dict[str, Any] = {
        "wrapperType": "track",
        "kind": "song",
        "trackName": name,
        "artistName": "X",
        "artworkUrl60": "a",
        "artworkUrl100": "b",
        "trackViewUrl": "c",
        "currency": "USD",
        "trackPrice": 1.29,
        "primaryGenreName": "Pop",
    }
    item.update(overrides)
    return item


def make_audiobook(name: str, **overrides: Any) -> dict[str, Any]:
    """Build an audiobook-shaped catalog item."""
    item: dict[str, Any] = {
        "wrapperType": "audiobook",
        "collectionName": name,
        "artistName": "Narrator",
        "artworkUrl60": "s",
        "artworkUrl100": "l",
        "collectionViewUrl": "u",
        "currency": "EUR",
        "collectionPrice": 9.99,
        "primaryGenreName": "Fiction",
    }
    item.update(overrides)
    return item


def body(*items: Any) -> str:
    """Serialize items as a catalog search response body."""
    return json.dumps({"resultCount": len(items), "results": list(items)})
