"""
Immutable snapshots of a search pipeline's state.

A pipeline is always in exactly one of the variants below. ``Results`` is
never empty: a finished search without matches is reported as ``NoResults``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .search import SearchResult


@dataclass(frozen=True, slots=True)
class NotSearched:
    """No search has completed (or the last one failed)."""


@dataclass(frozen=True, slots=True)
class Loading:
    """A request is in flight."""


@dataclass(frozen=True, slots=True)
class NoResults:
    """The last search finished without any usable result."""


@dataclass(frozen=True, slots=True)
class Results:
    """The last search finished with at least one result, sorted by name."""

    results: tuple[SearchResult, ...]

    def __post_init__(self) -> None:
        if not self.results:
            raise ValueError("Results requires at least one item; use NoResults")

    def __len__(self) -> int:
        return len(self.results)


SearchState: TypeAlias = NotSearched | Loading | NoResults | Results
