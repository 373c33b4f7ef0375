from __future__ import annotations

import enum
import re
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

_DIGITS_RE = re.compile(r"(\d+)")

KIND_LABELS: dict[str, str] = {
    "album": "Album",
    "audiobook": "Audio Book",
    "book": "Book",
    "ebook": "E-Book",
    "feature-movie": "Movie",
    "music-video": "Music Video",
    "podcast": "Podcast",
    "software": "App",
    "song": "Song",
    "tv-episode": "TV Episode",
}


class Category(enum.Enum):
    """Catalog sub-type used to narrow a search.

    The value of each member is the ``entity`` query parameter sent to the
    catalog endpoint.
    """

    ALL = ""
    MUSIC = "musicTrack"
    SOFTWARE = "software"
    EBOOKS = "ebook"

    @property
    def entity(self) -> str:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> Category:
        """Maps a segmented-control position to a category.

        Unknown positions fall back to :attr:`ALL`.
        """
        order = (cls.ALL, cls.MUSIC, cls.SOFTWARE, cls.EBOOKS)
        if 0 <= index < len(order):
            return order[index]
        return cls.ALL

    @classmethod
    def from_name(cls, name: str) -> Category:
        """Looks up a category by its case-insensitive member name.

        Raises:
            ValueError: If ``name`` is not a known category.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(m.name.lower() for m in cls)
            raise ValueError(
                f"Unknown category {name!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Normalized representation of one catalog item.

    Attributes:
        name: Display title.
        artist_name: Artist, author or developer name. May be empty.
        artwork_small_url: URL of the thumbnail image.
        artwork_large_url: URL of the detail image.
        store_url: URL of the item's store page.
        kind: Raw category tag (e.g., "song", "software", "ebook").
        currency: ISO currency code of ``price``.
        price: Item price; ``0.0`` means free.
        genre: Genre name, or several joined with ", ".
    """

    name: str = ""
    artist_name: str = ""
    artwork_small_url: str = ""
    artwork_large_url: str = ""
    store_url: str = ""
    kind: str = ""
    currency: str = ""
    price: float = 0.0
    genre: str = ""

    @property
    def artist_display(self) -> str:
        return self.artist_name or "Unknown"

    @property
    def price_display(self) -> str:
        if self.price == 0:
            return "Free"
        return f"{self.price:.2f} {self.currency}".rstrip()

    @property
    def kind_display(self) -> str:
        return KIND_LABELS.get(self.kind, self.kind)


def name_sort_key(name: str) -> list[str | int]:
    """Builds a case-insensitive natural ordering key for a display name.

    Digit runs compare numerically, so "Track 2" sorts before "Track 10".
    """
    folded = unicodedata.normalize("NFKC", name).casefold()
    return [
        int(part) if i % 2 else part
        for i, part in enumerate(_DIGITS_RE.split(folded))
    ]


def sort_results(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Returns ``results`` ordered by display name."""
    return sorted(results, key=lambda r: name_sort_key(r.name))
