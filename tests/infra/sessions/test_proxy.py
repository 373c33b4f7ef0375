import pytest

from storesearch.schemas import SessionConfig

from .utils import SUPPORTED_BACKENDS, safe_create


@pytest.mark.parametrize("backend", sorted(SUPPORTED_BACKENDS))
@pytest.mark.asyncio
async def test_proxy_basic_routing(backend, test_server, proxy_noauth_server):
    cfg = SessionConfig(
        proxy=str(proxy_noauth_server.make_url("/")),
        trust_env=False,
    )
    ok_url = str(test_server.make_url("/ok"))

    async with safe_create(backend, cfg) as s:
        r = await s.get(ok_url)

    assert r.content == b"proxied"
    assert proxy_noauth_server.seen["count"] >= 1
