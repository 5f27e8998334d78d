"""Shared HTTP client configuration."""

import httpx

from docwal._version import __version__

DEFAULT_BASE_URL = "https://docwal.com/api"
DEFAULT_TIMEOUT = 30.0

JSON_CONTENT_TYPE = "application/json"


def create_http_client(
    *,
    api_key: str,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str = DEFAULT_BASE_URL,
) -> httpx.Client:
    """Create configured HTTP client.

    Content-Type is left to each request so multipart bodies get their
    boundary header from httpx.

    Args:
        api_key: Institution API key sent as X-API-Key.
        timeout: Request timeout in seconds.
        base_url: Base URL for all requests.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url,
        follow_redirects=True,
        headers={
            "X-API-Key": api_key,
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": f"docwal-python/{__version__}",
        },
    )
