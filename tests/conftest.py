from pathlib import Path

import aiohttp.web
import pytest
import pytest_asyncio

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_response() -> str:
    """A recorded-style response mixing every result shape plus junk items."""
    return (DATA_DIR / "search_response.json").read_text(encoding="utf-8")


class FakeCatalog:
    """Mutable behaviour of the fake catalog endpoint."""

    def __init__(self) -> None:
        self.status = 200
        self.body = '{"results": []}'
        self.requests: list[dict[str, str]] = []
        self.raw_queries: list[str] = []


@pytest_asyncio.fixture
async def catalog_server(aiohttp_server):
    """A local stand-in for the catalog search endpoint at ``/search``.

    ``/old`` redirects to ``/search`` with the same query.
    """
    catalog = FakeCatalog()

    async def handler(request):
        catalog.requests.append(dict(request.query))
        catalog.raw_queries.append(request.raw_path.partition("?")[2])
        return aiohttp.web.Response(
            text=catalog.body,
            status=catalog.status,
            content_type="text/javascript",
        )

    async def handler_moved(request):
        query = request.raw_path.partition("?")[2]
        raise aiohttp.web.HTTPFound(f"/search?{query}")

    app = aiohttp.web.Application()
    app.router.add_get("/search", handler)
    app.router.add_get("/old", handler_moved)
    server = await aiohttp_server(app)
    server.catalog = catalog
    return server
