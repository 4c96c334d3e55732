"""Shared HTTP client configuration."""

import os
from collections.abc import Mapping

import httpx

from served_sdk._version import __version__

DEFAULT_API_URL = "https://apis.unifiedhq.ai"
ALTERNATIVE_API_URL = "https://apis.served.dk"
API_URL_ENV_VAR = "SERVED_API_URL"

DEFAULT_TIMEOUT = 30.0

AUTHORIZATION_HEADER = "Authorization"
TENANT_HEADER = "Served-Tenant"


def get_configured_api_url() -> str:
    """Return the API base URL from SERVED_API_URL, or the default."""
    env_url = os.environ.get(API_URL_ENV_VAR)
    return env_url if env_url else DEFAULT_API_URL


def create_http_client(
    *,
    base_url: str,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Mapping[str, str] | None = None,
    event_hooks: Mapping[str, list] | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        base_url: Base URL for all requests.
        timeout: Request timeout in seconds.
        headers: Extra default headers sent with every request.
        event_hooks: Optional httpx request/response hooks (used by tracing).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    default_headers = {"User-Agent": f"served-sdk/{__version__}"}
    if headers:
        default_headers.update(headers)
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url,
        headers=default_headers,
        event_hooks=dict(event_hooks) if event_hooks else None,
    )
