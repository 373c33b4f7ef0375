import pytest

from storesearch.schemas import SessionConfig

from .utils import SUPPORTED_BACKENDS, safe_create


@pytest.mark.parametrize("backend", sorted(SUPPORTED_BACKENDS))
@pytest.mark.asyncio
async def test_init_close_is_idempotent(backend):
    cfg = SessionConfig()
    s = safe_create(backend, cfg)

    await s.init()
    await s.init()
    assert s.is_initialized
    await s.close()
    await s.close()
    assert not s.is_initialized


@pytest.mark.parametrize("backend", sorted(SUPPORTED_BACKENDS))
@pytest.mark.asyncio
async def test_get_raises_before_init(backend):
    cfg = SessionConfig()
    s = safe_create(backend, cfg)

    with pytest.raises(RuntimeError):
        await s.get("http://example.com/")


@pytest.mark.parametrize("backend", sorted(SUPPORTED_BACKENDS))
@pytest.mark.asyncio
async def test_context_manager_closes_session(backend):
    cfg = SessionConfig()
    s = safe_create(backend, cfg)

    async with s:
        assert s.is_initialized
    assert not s.is_initialized
