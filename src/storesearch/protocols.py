"""
Protocol definitions for the collaborators of the search pipeline.

:class:`FetcherProtocol` abstracts the network side so the pipeline can be
driven by the real catalog fetcher or by an in-memory stand-in.
:class:`SearchUI` describes a frontend observing the pipeline.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias

from storesearch.schemas import Category, SearchResult, SearchState

StateListener: TypeAlias = Callable[[SearchState], None]
Completion: TypeAlias = Callable[[bool], None]


class FetcherProtocol(Protocol):
    """Protocol for an asynchronous catalog fetcher."""

    async def init(self) -> None:
        """Performs asynchronous initialization.

        This method must be called before any fetch operation.
        """
        ...

    async def close(self) -> None:
        """Closes network resources gracefully."""
        ...

    async def fetch_search_result(
        self,
        text: str,
        category: Category = Category.ALL,
        **kwargs: Any,
    ) -> str:
        """Fetches the raw response body of a search.

        Args:
            text: Free-text query.
            category: Category filter.

        Returns:
            The response body.

        Raises:
            ConnectionError: If the request fails or is rejected.
        """
        ...


class SearchUI(Protocol):
    """Protocol for a frontend observing a search pipeline."""

    def on_state(self, state: SearchState) -> None:
        """Called on every state transition."""
        ...

    def on_results(self, results: list[SearchResult]) -> None:
        """Renders the results of a successful search (possibly empty)."""
        ...

    def on_error(self, message: str) -> None:
        """Reports a failed search."""
        ...
