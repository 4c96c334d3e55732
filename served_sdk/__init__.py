"""Served SDK for Python.

Typed async client for the Served platform APIs.

Public API:
    ServedClient - User-facing client
    ServedClientBuilder - Fluent client configuration
    Served*Error - Exception hierarchy

Example:
    from served_sdk import ServedClient

    async with ServedClient.from_env() as client:
        page = await client.projects.get_page()
"""

from served_sdk._version import __version__
from served_sdk.builder import ServedClientBuilder
from served_sdk.client import ServedClient
from served_sdk.exceptions import (
    ServedAPIError,
    ServedConfigError,
    ServedContentTypeError,
    ServedDeserializationError,
    ServedError,
    ServedTenantNotFoundError,
    ServedTenantResolutionError,
)

__all__ = [
    "__version__",
    "ServedClient",
    "ServedClientBuilder",
    "ServedError",
    "ServedAPIError",
    "ServedConfigError",
    "ServedContentTypeError",
    "ServedDeserializationError",
    "ServedTenantNotFoundError",
    "ServedTenantResolutionError",
]
