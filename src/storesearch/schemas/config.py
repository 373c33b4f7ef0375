"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field

DEFAULT_ENDPOINT = "https://itunes.apple.com/search"
DEFAULT_LIMIT = 200


@dataclass
class SessionConfig:
    """Configuration for HTTP session behavior.

    Attributes:
        timeout: Request timeout in seconds.
        max_connections: Maximum number of concurrent connections.
        user_agent: Custom User-Agent string.
        headers: Headers to attach to requests, replacing the defaults.
        impersonate: Browser impersonation mode. (`curl_cffi`)
        verify_ssl: Whether to verify SSL certificates.
        http2: Whether HTTP/2 should be used. (`httpx`)
        trust_env: Whether environment variables are used for proxies.
        proxy: Proxy server URL.
        proxy_user: Proxy authentication username.
        proxy_pass: Proxy authentication password.
    """

    timeout: float = 10.0
    max_connections: int = 10
    user_agent: str | None = None
    headers: dict[str, str] | None = None
    impersonate: str | None = "chrome"
    verify_ssl: bool = True
    http2: bool = True
    trust_env: bool = False
    proxy: str | None = None
    proxy_user: str | None = None
    proxy_pass: str | None = None


@dataclass
class SearchConfig:
    """Configuration for catalog searches.

    Attributes:
        endpoint: Search endpoint URL.
        limit: Maximum number of results requested from the catalog.
        backend: HTTP backend name (aiohttp, httpx, curl_cffi).
        session_cfg: HTTP session configuration.
    """

    endpoint: str = DEFAULT_ENDPOINT
    limit: int = DEFAULT_LIMIT
    backend: str = "aiohttp"
    session_cfg: SessionConfig = field(default_factory=SessionConfig)
