"""
HTTP access to the catalog search endpoint.

:class:`CatalogFetcher` owns the HTTP session and turns a query into the raw
response body. Decoding lives in :mod:`storesearch.catalog.parser`.
"""

from __future__ import annotations

import logging
import types
from typing import Any, Self
from urllib.parse import quote

from storesearch.infra.sessions import BaseSession, create_session
from storesearch.schemas import Category, SearchConfig

logger = logging.getLogger(__name__)


class CatalogFetcher:
    """Fetcher for the iTunes catalog search endpoint.

    Each call issues exactly one GET request; there is no retry or rate
    limiting.
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        *,
        session: BaseSession | None = None,
        **kwargs: Any,
    ) -> None:
        """Initializes a new fetcher instance.

        Args:
            config: Optional search configuration. If omitted, a default
                :class:`SearchConfig` instance is created.
            session: Optional preconfigured HTTP session. If omitted, a new
                session is created via :func:`create_session`.
            **kwargs: Additional keyword arguments forwarded to
                :func:`create_session` when ``session`` is not provided.
        """
        config = config or SearchConfig()

        self._endpoint = config.endpoint
        self._limit = config.limit

        self.session = session or create_session(
            backend=config.backend,
            cfg=config.session_cfg,
            **kwargs,
        )

    async def init(self, **kwargs: Any) -> None:
        """Initializes the underlying session."""
        await self.session.init()

    async def close(self) -> None:
        """Closes the underlying session and releases associated resources."""
        await self.session.close()

    def build_search_url(self, text: str, category: Category) -> str:
        """Builds the search URL for a query.

        Args:
            text: Free-text query; percent-encoded in full.
            category: Category whose entity narrows the search.

        Returns:
            The absolute request URL.
        """
        params = {
            "term": self._quote(text),
            "limit": str(self._limit),
            "entity": category.entity,
        }
        return self._build_url(self._endpoint, params)

    async def fetch_search_result(
        self,
        text: str,
        category: Category = Category.ALL,
        **kwargs: Any,
    ) -> str:
        """Fetches the raw search response for a query.

        Args:
            text: Free-text query.
            category: Category filter.
            **kwargs: Additional parameters forwarded to ``BaseSession.get``.

        Returns:
            The decoded response body.

        Raises:
            RuntimeError: If the session is not initialized.
            ConnectionError: If the response status is not 200.
        """
        url = self.build_search_url(text, category)
        logger.debug("GET %s", url)

        kwargs.setdefault("allow_redirects", True)
        resp = await self.session.get(url, **kwargs)
        if resp.status != 200:
            raise ConnectionError(f"Request to {url} failed with status {resp.status}")
        return resp.text

    @staticmethod
    def _quote(q: str) -> str:
        """Percent-encode a query value, including reserved characters."""
        return quote(q, safe="")

    @staticmethod
    def _build_url(base: str, params: dict[str, str]) -> str:
        """Builds a URL with already-encoded query parameters."""
        query_string = "&".join(f"{k}={v}" for k, v in params.items())
        return f"{base}?{query_string}"

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
