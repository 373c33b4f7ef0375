from __future__ import annotations

import aiohttp
import aiohttp.web
import pytest_asyncio


@pytest_asyncio.fixture
async def test_server(aiohttp_server):
    async def handler_ok(request):
        return aiohttp.web.Response(text="hello", status=200)

    async def handler_json(request):
        return aiohttp.web.json_response({"results": [], "query": dict(request.query)})

    async def handler_latin1(request):
        return aiohttp.web.Response(
            body="café".encode("latin-1"),
            content_type="text/plain",
            charset="latin-1",
        )

    async def handler_error(request):
        return aiohttp.web.Response(text="boom", status=500)

    async def handler_redirect(request):
        raise aiohttp.web.HTTPFound("/ok")

    async def handler_echo_headers(request):
        return aiohttp.web.json_response({"headers": dict(request.headers)})

    app = aiohttp.web.Application()
    app.router.add_get("/ok", handler_ok)
    app.router.add_get("/json", handler_json)
    app.router.add_get("/latin1", handler_latin1)
    app.router.add_get("/error", handler_error)
    app.router.add_get("/redirect", handler_redirect)
    app.router.add_get("/echo-headers", handler_echo_headers)

    server = await aiohttp_server(app)
    return server


@pytest_asyncio.fixture
async def proxy_noauth_server(aiohttp_server):
    """Proxy that always returns 200 'proxied'."""
    seen = {"count": 0, "methods": [], "paths": []}

    async def handler(request):
        seen["count"] += 1
        seen["methods"].append(request.method)
        seen["paths"].append(request.raw_path)
        return aiohttp.web.Response(text="proxied", status=200)

    app = aiohttp.web.Application()
    app.router.add_route("*", "/{tail:.*}", handler)
    server = await aiohttp_server(app)
    server.seen = seen
    return server
