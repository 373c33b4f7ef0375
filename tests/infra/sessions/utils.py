from __future__ import annotations

from typing import Any

import pytest

from storesearch.infra.sessions import create_session
from storesearch.infra.sessions.base import BaseSession
from storesearch.schemas import SessionConfig

SUPPORTED_BACKENDS: set[str] = {"aiohttp", "httpx", "curl_cffi"}


def safe_create(backend: str, cfg: SessionConfig, **kw: Any) -> BaseSession:
    """
    Create backend instance, skipping test if backend dependency is missing.
    """
    try:
        return create_session(backend, cfg, **kw)
    except ImportError as e:
        pytest.skip(f"backend {backend!r} not installed: {e}")
