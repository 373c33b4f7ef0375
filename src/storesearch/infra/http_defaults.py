"""
Provides default HTTP headers and user-agent settings used throughout the
networking layer of StoreSearch.
"""

# -----------------------------------------------------------------------------
# Default preferences & headers
# -----------------------------------------------------------------------------

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/136.0.0.0 Safari/537.36"
)

ACCEPT_JSON = "application/json, text/javascript, */*;q=0.8"

DEFAULT_USER_HEADERS = {
    "Accept": ACCEPT_JSON,
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": DEFAULT_USER_AGENT,
    "Connection": "keep-alive",
}
