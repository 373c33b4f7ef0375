from typing import Any, Unpack

import aiohttp

from .base import BaseSession, GetRequestKwargs
from .response import BaseResponse


class AiohttpSession(BaseSession):
    """Session backend implemented with aiohttp for asynchronous HTTP requests."""

    _session: aiohttp.ClientSession | None

    async def init(
        self,
        **kwargs: Any,
    ) -> None:
        if self._session and not self._session.closed:
            return

        proxy_auth: aiohttp.BasicAuth | None = None
        if self._proxy_user and self._proxy_pass:
            proxy_auth = aiohttp.BasicAuth(self._proxy_user, self._proxy_pass)

        timeout = aiohttp.ClientTimeout(total=self._timeout)
        connector = aiohttp.TCPConnector(
            ssl=self._verify_ssl,
            limit_per_host=self._max_connections,
        )

        self._session = aiohttp.ClientSession(
            connector=connector,
            timeout=timeout,
            headers=self._headers,
            trust_env=self._trust_env,
            proxy=self._proxy,
            proxy_auth=proxy_auth,
        )

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def get(
        self,
        url: str,
        *,
        allow_redirects: bool | None = None,
        verify: bool | None = None,
        encoding: str = "utf-8",
        **kwargs: Unpack[GetRequestKwargs],
    ) -> BaseResponse:
        if verify is not None:
            kwargs.setdefault("ssl", verify)  # type: ignore[typeddict-item]
        if allow_redirects is not None:
            kwargs.setdefault("allow_redirects", allow_redirects)  # type: ignore[typeddict-item]

        async with self.session.get(url, **kwargs) as r:
            content = await r.read()
            return BaseResponse(
                content=content,
                headers=r.headers,
                status=r.status,
                encoding=r.charset or encoding,
            )

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise RuntimeError("Session is not initialized or has been shut down.")
        return self._session
