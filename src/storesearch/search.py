"""
The search pipeline.

:class:`Search` turns a query into an immutable :data:`SearchState`
snapshot. At most one request is in flight per instance: starting a search
cancels the previous one, and a cancelled request never touches the state
or calls its completion callback.
"""

from __future__ import annotations

import asyncio
import logging
import types
from collections.abc import Callable
from typing import Any, Self

from storesearch.catalog import CatalogFetcher, parse_search_result
from storesearch.infra.sessions import BaseSession
from storesearch.protocols import Completion, FetcherProtocol, StateListener
from storesearch.schemas import (
    Category,
    Loading,
    NoResults,
    NotSearched,
    Results,
    SearchConfig,
    SearchResult,
    SearchState,
    sort_results,
)

logger = logging.getLogger(__name__)


class Search:
    """Owns the state of one search box.

    The state is only readable from outside; it changes when
    :meth:`perform_search` starts a request, when that request completes,
    and when :meth:`cancel` aborts it. All changes happen on the event loop
    thread, which is also where listeners and completion callbacks run.

    Example::

        async with Search() as search:
            ok = await search.search("radiohead", Category.MUSIC)
            if ok and isinstance(search.state, Results):
                for item in search.state.results:
                    print(item.name)
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        *,
        fetcher: FetcherProtocol | None = None,
        session: BaseSession | None = None,
        **kwargs: Any,
    ) -> None:
        """Initializes a pipeline in the :class:`NotSearched` state.

        Args:
            config: Search configuration used to build the default fetcher.
            fetcher: Optional fetcher; defaults to a :class:`CatalogFetcher`.
            session: Optional HTTP session for the default fetcher.
            **kwargs: Forwarded to :class:`CatalogFetcher`.
        """
        self._fetcher: FetcherProtocol = fetcher or CatalogFetcher(
            config, session=session, **kwargs
        )
        self._state: SearchState = NotSearched()
        self._task: asyncio.Task[bool] | None = None
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def has_searched(self) -> bool:
        return not isinstance(self._state, NotSearched)

    @property
    def results(self) -> tuple[SearchResult, ...]:
        """Results of the last successful search, or an empty tuple."""
        if isinstance(self._state, Results):
            return self._state.results
        return ()

    def add_listener(self, listener: StateListener) -> Callable[[], None]:
        """Registers a callable invoked with every new state.

        Returns:
            A function that unregisters ``listener``.
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def perform_search(
        self,
        text: str,
        category: Category | int = Category.ALL,
        completion: Completion | None = None,
    ) -> asyncio.Task[bool] | None:
        """Starts a search, superseding any request still in flight.

        Must be called from within a running event loop. The state becomes
        :class:`Loading` before this method returns.

        Args:
            text: Free-text query. An empty string makes the call a no-op.
            category: Category filter, or its segmented-control index.
            completion: Called with ``True`` when the search finished
                (with or without results) and ``False`` when it failed. Never
                called for a cancelled search.

        Returns:
            The task running the request, whose result mirrors the value
            passed to ``completion``; None if ``text`` is empty.

        Raises:
            RuntimeError: If no event loop is running.
        """
        if not text:
            return None

        loop = asyncio.get_running_loop()
        if isinstance(category, int):
            category = Category.from_index(category)

        self._cancel_task()
        self._set_state(Loading())

        logger.debug("Searching %r (category=%s)", text, category.name.lower())
        task = loop.create_task(self._run(text, category, completion))
        self._task = task
        return task

    async def search(
        self,
        text: str,
        category: Category | int = Category.ALL,
    ) -> bool:
        """Runs a search and waits for it to finish.

        Returns:
            True on success, False on failure or when ``text`` is empty.

        Raises:
            asyncio.CancelledError: If the search is superseded or cancelled.
        """
        task = self.perform_search(text, category)
        if task is None:
            return False
        return await task

    def cancel(self) -> None:
        """Cancels the in-flight request, if any.

        A pipeline left in :class:`Loading` goes back to
        :class:`NotSearched`.
        """
        if self._cancel_task() and isinstance(self._state, Loading):
            self._set_state(NotSearched())

    async def init(self) -> None:
        await self._fetcher.init()

    async def close(self) -> None:
        """Cancels the in-flight request and closes the fetcher."""
        task = self._task
        self.cancel()
        if task is not None:
            await asyncio.wait([task])
        await self._fetcher.close()

    async def _run(
        self,
        text: str,
        category: Category,
        completion: Completion | None,
    ) -> bool:
        try:
            raw = await self._fetcher.fetch_search_result(text, category)
            results = sort_results(parse_search_result(raw))
        except asyncio.CancelledError:
            logger.debug("Search %r cancelled", text)
            raise
        except Exception as e:
            if not self._finish(NotSearched()):
                logger.debug("Search %r superseded, dropping failure", text)
                return False
            logger.warning("Search %r failed: %s", text, e)
            self._complete(completion, False)
            return False

        if results:
            state: SearchState = Results(tuple(results))
        else:
            state = NoResults()
        if not self._finish(state):
            logger.debug("Search %r superseded, dropping response", text)
            return False

        logger.info("Search %r returned %d results", text, len(results))
        self._complete(completion, True)
        return True

    def _finish(self, state: SearchState) -> bool:
        """Publishes ``state`` if the running task is still the current one."""
        if self._task is not asyncio.current_task():
            return False
        self._task = None
        self._set_state(state)
        return True

    @staticmethod
    def _complete(completion: Completion | None, ok: bool) -> None:
        if completion is None:
            return
        try:
            completion(ok)
        except Exception:
            logger.exception("Completion callback %r failed", completion)

    def _cancel_task(self) -> bool:
        task, self._task = self._task, None
        if task is None or task.done():
            return False
        task.cancel()
        return True

    def _set_state(self, state: SearchState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    async def __aenter__(self) -> Self:
        await self.init()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        await self.close()
