"""Request tracing through httpx event hooks.

Spans are kept in memory (bounded by ``TracingOptions.buffer_size``) with
credential headers redacted. Exporting them is left to the caller.
"""

import time
from collections import deque
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel, Field

from served_sdk._internal.redaction import redact_headers

# Request extension holding the perf_counter() value taken when the request was sent.
_STARTED_EXTENSION = "served_sdk.trace_started"

# =============================================================================
# Options
# =============================================================================


class TracingOptions(BaseModel):
    """Tracing configuration.

    Fields:
        service_name: Name attached to every span.
        environment: Deployment environment label.
        enabled: Record spans at all.
        buffer_size: Maximum number of spans kept; oldest are dropped first.
        slow_request_threshold_ms: Requests slower than this are flagged.
        ignore_status_codes: Status codes never classified as errors.
    """

    service_name: str = "served-sdk-client"
    environment: str = "development"
    enabled: bool = True
    buffer_size: int = Field(default=100, ge=1)
    slow_request_threshold_ms: int = 5000
    ignore_status_codes: list[int] = Field(default_factory=list)


# =============================================================================
# Error Classification
# =============================================================================


class ErrorCategory(str, Enum):
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


_STATUS_CATEGORIES = {
    400: ErrorCategory.VALIDATION,
    401: ErrorCategory.AUTHENTICATION,
    403: ErrorCategory.AUTHORIZATION,
    404: ErrorCategory.NOT_FOUND,
    422: ErrorCategory.VALIDATION,
    429: ErrorCategory.RATE_LIMITED,
    500: ErrorCategory.SERVER_ERROR,
    502: ErrorCategory.SERVICE_UNAVAILABLE,
    503: ErrorCategory.SERVICE_UNAVAILABLE,
    504: ErrorCategory.TIMEOUT,
}


def categorize_status(status_code: int) -> ErrorCategory | None:
    """Classify an HTTP status; ``None`` for non-error statuses."""
    if status_code < 400:
        return None
    if status_code in _STATUS_CATEGORIES:
        return _STATUS_CATEGORIES[status_code]
    if status_code < 500:
        return ErrorCategory.VALIDATION
    return ErrorCategory.SERVER_ERROR


# =============================================================================
# Spans
# =============================================================================


class TraceSpan(BaseModel):
    """One traced HTTP exchange."""

    service_name: str
    method: str
    url: str
    status_code: int
    duration_ms: float
    request_headers: dict[str, str] = Field(default_factory=dict)
    error_category: ErrorCategory | None = None
    slow: bool = False
    context: dict[str, str] = Field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.error_category is not None


class RequestTracer:
    """Records a :class:`TraceSpan` per request sent through a hooked httpx client.

    Install with ``create_http_client(event_hooks=tracer.event_hooks())``.
    """

    def __init__(self, options: TracingOptions | None = None) -> None:
        self._options = options or TracingOptions()
        self._spans: deque[TraceSpan] = deque(maxlen=self._options.buffer_size)
        self._context: dict[str, str] = {}
        self._closed = False

    @property
    def options(self) -> TracingOptions:
        return self._options

    @property
    def is_enabled(self) -> bool:
        return self._options.enabled and not self._closed

    @property
    def spans(self) -> list[TraceSpan]:
        return list(self._spans)

    def set_context(self, key: str, value: str) -> None:
        """Attach ``key=value`` to every span recorded from now on."""
        self._context[key] = value

    def get_context(self, key: str) -> str | None:
        return self._context.get(key)

    def event_hooks(self) -> dict[str, list[Any]]:
        return {"request": [self._on_request], "response": [self._on_response]}

    async def _on_request(self, request: httpx.Request) -> None:
        if self.is_enabled:
            request.extensions[_STARTED_EXTENSION] = time.perf_counter()

    async def _on_response(self, response: httpx.Response) -> None:
        started = response.request.extensions.pop(_STARTED_EXTENSION, None)
        if started is None or not self.is_enabled:
            return
        self.record(response, (time.perf_counter() - started) * 1000)

    def record(self, response: httpx.Response, duration_ms: float) -> TraceSpan:
        """Build a span for ``response`` and add it to the buffer."""
        request = response.request
        category = None
        if response.status_code not in self._options.ignore_status_codes:
            category = categorize_status(response.status_code)
        span = TraceSpan(
            service_name=self._options.service_name,
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            duration_ms=duration_ms,
            request_headers=redact_headers(request.headers),
            error_category=category,
            slow=duration_ms > self._options.slow_request_threshold_ms,
            context=dict(self._context),
        )
        self._spans.append(span)
        return span

    def close(self) -> None:
        self._closed = True
