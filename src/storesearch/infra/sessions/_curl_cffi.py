# mypy: disable-error-code=unused-ignore

from typing import Any, Unpack

from curl_cffi.requests import AsyncSession

from .base import BaseSession, GetRequestKwargs
from .response import BaseResponse


class CurlCffiSession(BaseSession):
    """Session backend using curl_cffi for browser-like HTTP requests."""

    _session: AsyncSession[Any] | None

    async def init(
        self,
        **kwargs: Any,
    ) -> None:
        if self._session:
            return

        proxy_auth = None
        if self._proxy_user and self._proxy_pass:
            proxy_auth = (self._proxy_user, self._proxy_pass)

        self._session = AsyncSession(
            headers=self._headers,
            timeout=self._timeout,
            impersonate=self._impersonate,  # type: ignore[arg-type]
            verify=self._verify_ssl,
            proxy=self._proxy,
            proxy_auth=proxy_auth,
            trust_env=self._trust_env,
        )

    async def close(self) -> None:
        """
        Shutdown and clean up any resources.
        """
        if self._session is not None:
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
            kwargs.setdefault("verify", verify)  # type: ignore[typeddict-item]
        if allow_redirects is not None:
            kwargs.setdefault("allow_redirects", allow_redirects)  # type: ignore[typeddict-item]

        r = await self.session.get(url, **kwargs)
        return BaseResponse(
            content=r.content,
            headers=r.headers,
            status=r.status_code,
            encoding=r.encoding or encoding,
        )

    @property
    def session(self) -> AsyncSession[Any]:
        if self._session is None:
            raise RuntimeError("Session is not initialized or has been shut down.")
        return self._session
