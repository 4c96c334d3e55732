"""Async HTTP verbs shared by every API module."""

import sys
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic_core import to_jsonable_python

from served_sdk._internal.redaction import redact_payload
from served_sdk._internal.response import interpret_response

BeforeRequestHook = Callable[[], Awaitable[None]]


def serialize_body(body: Any) -> Any:
    """Convert a request body to camelCase JSON-compatible data, nulls omitted."""
    if body is None:
        return None
    return to_jsonable_python(body, by_alias=True, exclude_none=True)


class HttpTransport:
    """Sends requests over a shared ``httpx.AsyncClient`` and interprets responses.

    Every verb takes a ``target`` type; the response body is decoded into it
    by :func:`interpret_response`. ``target=None`` only checks the status.
    Transport failures (``httpx.TransportError``) propagate unchanged.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        debug: bool = False,
        before_request: BeforeRequestHook | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            http_client: Configured client carrying base URL and default headers.
            debug: Enable debug logging to stderr.
            before_request: Awaited before each request is sent.
        """
        self._http_client = http_client
        self._debug = debug
        self._before_request = before_request

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    def log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[served-sdk] {message}", file=sys.stderr)

    async def send_raw(self, method: str, path: str, body: Any = None) -> httpx.Response:
        """Send a request and return the raw response without interpreting it."""
        if self._before_request is not None:
            await self._before_request()
        payload = serialize_body(body)
        if payload is None:
            self.log_debug(f"{method} {path}")
        else:
            self.log_debug(f"{method} {path} {redact_payload(payload)}")
        response = await self._http_client.request(method, path, json=payload)
        self.log_debug(f"{method} {path} -> {response.status_code}")
        return response

    async def _send(self, method: str, path: str, body: Any = None, target: Any = None) -> Any:
        response = await self.send_raw(method, path, body)
        return interpret_response(response, target)

    # =========================================================================
    # Verbs
    # =========================================================================

    async def get(self, path: str, target: Any = None) -> Any:
        return await self._send("GET", path, target=target)

    async def post(self, path: str, body: Any = None, target: Any = None) -> Any:
        return await self._send("POST", path, body, target)

    async def put(self, path: str, body: Any = None, target: Any = None) -> Any:
        return await self._send("PUT", path, body, target)

    async def patch(self, path: str, body: Any = None, target: Any = None) -> Any:
        return await self._send("PATCH", path, body, target)

    async def delete(self, path: str) -> None:
        """DELETE ``path``; only the status code is checked."""
        await self._send("DELETE", path)

    async def delete_with_body(self, path: str, body: Any, target: Any = None) -> Any:
        """DELETE with a JSON body (bulk deletes)."""
        return await self._send("DELETE", path, body, target)
