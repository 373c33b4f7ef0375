from __future__ import annotations

from pathlib import Path
from typing import Any

from storesearch.schemas import SearchConfig, SessionConfig
from storesearch.schemas.config import DEFAULT_ENDPOINT, DEFAULT_LIMIT

SUPPORTED_BACKENDS = ("aiohttp", "httpx", "curl_cffi")


class ConfigAdapter:
    """High-level accessor for loaded configuration.

    The mapping is expected to contain a ``general`` table (backend and
    session settings), a ``search`` table (endpoint and limit) and a
    ``debug`` table (logging). Missing tables and keys fall back to the
    built-in defaults.

    Args:
        config (dict[str, Any]): Fully loaded configuration mapping.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_search_config(self) -> SearchConfig:
        """Build a SearchConfig from the ``search`` and ``general`` tables.

        Returns:
            SearchConfig: Resolved search configuration.

        Raises:
            ValueError: If ``limit`` is not a positive integer.
        """
        search_cfg = self._search_cfg()

        limit = search_cfg.get("limit", DEFAULT_LIMIT)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"search.limit must be a positive integer, got {limit!r}")

        return SearchConfig(
            endpoint=search_cfg.get("endpoint") or DEFAULT_ENDPOINT,
            limit=limit,
            backend=self.get_backend(),
            session_cfg=self.get_session_config(),
        )

    def get_session_config(self) -> SessionConfig:
        """Build a SessionConfig from the ``general`` table.

        Returns:
            SessionConfig: Resolved session configuration.
        """
        general_cfg = self._gen_cfg()

        return SessionConfig(
            timeout=general_cfg.get("timeout", 10.0),
            max_connections=general_cfg.get("max_connections", 10),
            user_agent=general_cfg.get("user_agent"),
            headers=general_cfg.get("headers"),
            impersonate=general_cfg.get("impersonate", "chrome"),
            verify_ssl=general_cfg.get("verify_ssl", True),
            http2=general_cfg.get("http2", True),
            trust_env=general_cfg.get("trust_env", False),
            proxy=general_cfg.get("proxy"),
            proxy_user=general_cfg.get("proxy_user"),
            proxy_pass=general_cfg.get("proxy_pass"),
        )

    def get_backend(self) -> str:
        """Return the backend string from general configuration.

        Returns:
            str: Backend name or ``"aiohttp"`` if unspecified.

        Raises:
            ValueError: If the configured backend is not supported.
        """
        backend = self._gen_cfg().get("backend")
        if not isinstance(backend, str) or not backend:
            return "aiohttp"
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(f"Unsupported backend: {backend!r}")
        return backend

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        debug_cfg = self._debug_cfg()
        return debug_cfg.get("log_level") or "INFO"

    def get_log_dir(self) -> Path | None:
        """Return directory for log files.

        Returns:
            Path | None: Absolute log directory path, or None when file
            logging is disabled.
        """
        log_dir = self._debug_cfg().get("log_dir")
        if not log_dir:
            return None
        return Path(log_dir).expanduser().resolve()

    def _gen_cfg(self) -> dict[str, Any]:
        return self._table("general")

    def _search_cfg(self) -> dict[str, Any]:
        return self._table("search")

    def _debug_cfg(self) -> dict[str, Any]:
        return self._table("debug")

    def _table(self, name: str) -> dict[str, Any]:
        """Return a top-level table, or an empty dict if absent or malformed."""
        value = self._config.get(name)
        return value if isinstance(value, dict) else {}
