"""Tests for request tracing."""

import httpx
import pytest
import respx
from pydantic import ValidationError

from served_sdk._internal.http import create_http_client
from served_sdk._internal.redaction import REDACTED_VALUE
from served_sdk._internal.tracing import (
    ErrorCategory,
    RequestTracer,
    TracingOptions,
    categorize_status,
)

BASE_URL = "https://api.test"


def make_response(status: int, **request_kwargs) -> httpx.Response:
    request = httpx.Request("GET", f"{BASE_URL}/api/projects", **request_kwargs)
    return httpx.Response(status, request=request)


class TestTracingOptions:
    """Tests for TracingOptions."""

    def test_defaults(self):
        """Should default to an enabled tracer with a bounded buffer."""
        options = TracingOptions()
        assert options.service_name == "served-sdk-client"
        assert options.enabled is True
        assert options.buffer_size == 100
        assert options.slow_request_threshold_ms == 5000

    def test_buffer_size_must_be_positive(self):
        """A zero buffer should be rejected."""
        with pytest.raises(ValidationError):
            TracingOptions(buffer_size=0)


class TestCategorizeStatus:
    """Tests for categorize_status()."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            (200, None),
            (302, None),
            (401, ErrorCategory.AUTHENTICATION),
            (403, ErrorCategory.AUTHORIZATION),
            (404, ErrorCategory.NOT_FOUND),
            (409, ErrorCategory.VALIDATION),
            (429, ErrorCategory.RATE_LIMITED),
            (503, ErrorCategory.SERVICE_UNAVAILABLE),
            (504, ErrorCategory.TIMEOUT),
            (507, ErrorCategory.SERVER_ERROR),
        ],
    )
    def test_categories(self, status, expected):
        """Statuses should map to their error category."""
        assert categorize_status(status) == expected


class TestRequestTracer:
    """Tests for RequestTracer."""

    def test_record_redacts_headers(self):
        """Recorded spans should not contain credentials."""
        tracer = RequestTracer()
        span = tracer.record(make_response(200, headers={"Authorization": "Bearer t"}), 12.5)
        assert span.request_headers["authorization"] == REDACTED_VALUE
        assert span.method == "GET"
        assert span.is_error is False
        assert tracer.spans == [span]

    def test_record_classifies_errors(self):
        """Error statuses should be categorized unless ignored."""
        tracer = RequestTracer(TracingOptions(ignore_status_codes=[404]))
        assert tracer.record(make_response(500), 1).error_category == ErrorCategory.SERVER_ERROR
        assert tracer.record(make_response(404), 1).error_category is None

    def test_slow_requests_flagged(self):
        """Spans over the threshold should be marked slow."""
        tracer = RequestTracer(TracingOptions(slow_request_threshold_ms=100))
        assert tracer.record(make_response(200), 150).slow is True
        assert tracer.record(make_response(200), 50).slow is False

    def test_buffer_drops_oldest(self):
        """Only the newest buffer_size spans should be kept."""
        tracer = RequestTracer(TracingOptions(buffer_size=2))
        for duration in (1, 2, 3):
            tracer.record(make_response(200), duration)
        assert [s.duration_ms for s in tracer.spans] == [2, 3]

    def test_context_attached_to_spans(self):
        """Context set on the tracer should be copied into spans."""
        tracer = RequestTracer()
        tracer.set_context("served.tenant", "acme")
        assert tracer.get_context("served.tenant") == "acme"
        assert tracer.record(make_response(200), 1).context == {"served.tenant": "acme"}

    def test_close_disables(self):
        """A closed tracer should report itself disabled."""
        tracer = RequestTracer()
        tracer.close()
        assert tracer.is_enabled is False

    @pytest.mark.asyncio
    @respx.mock
    async def test_event_hooks_record_requests(self):
        """Installed hooks should record one span per request."""
        respx.get(f"{BASE_URL}/api/projects").mock(return_value=httpx.Response(404))
        tracer = RequestTracer()
        client = create_http_client(base_url=BASE_URL, event_hooks=tracer.event_hooks())
        await client.get("api/projects")
        await client.aclose()
        assert len(tracer.spans) == 1
        span = tracer.spans[0]
        assert span.status_code == 404
        assert span.error_category == ErrorCategory.NOT_FOUND
        assert span.duration_ms >= 0

    @pytest.mark.asyncio
    @respx.mock
    async def test_failed_requests_leave_no_tracer_state(self):
        """Requests that never get a response should not accumulate in the tracer."""
        route = respx.get(f"{BASE_URL}/api/projects").mock(
            side_effect=[httpx.ConnectError("down")] * 50 + [httpx.Response(200)]
        )
        tracer = RequestTracer()
        state_before = {k: v for k, v in vars(tracer).items() if k != "_spans"}
        client = create_http_client(base_url=BASE_URL, event_hooks=tracer.event_hooks())
        for _ in range(50):
            with pytest.raises(httpx.ConnectError):
                await client.get("api/projects")
        await client.get("api/projects")
        await client.aclose()

        assert {k: v for k, v in vars(tracer).items() if k != "_spans"} == state_before
        assert len(tracer.spans) == 1
        assert tracer.spans[0].status_code == 200
        assert route.call_count == 51

    @pytest.mark.asyncio
    @respx.mock
    async def test_disabled_tracer_records_nothing(self):
        """enabled=False should skip recording."""
        respx.get(f"{BASE_URL}/api/projects").mock(return_value=httpx.Response(200))
        tracer = RequestTracer(TracingOptions(enabled=False))
        client = create_http_client(base_url=BASE_URL, event_hooks=tracer.event_hooks())
        await client.get("api/projects")
        await client.aclose()
        assert tracer.spans == []
