"""Tests for response interpretation."""

import httpx
import pytest

from served_sdk._internal.response import (
    SNIPPET_MAX_LENGTH,
    default_for,
    interpret_response,
    truncate_snippet,
)
from served_sdk.exceptions import (
    ServedAPIError,
    ServedContentTypeError,
    ServedDeserializationError,
)
from served_sdk.models.common import ListResponse
from served_sdk.models.projects import ProjectDetail

JSON = {"content-type": "application/json; charset=utf-8"}


class TestTruncateSnippet:
    """Tests for truncate_snippet()."""

    def test_short_text_unchanged(self):
        """Text within the limit should be returned as is."""
        assert truncate_snippet("short") == "short"

    def test_long_text_marked(self):
        """Text over the limit should be cut and end with an ellipsis."""
        snippet = truncate_snippet("x" * 500)
        assert len(snippet) == SNIPPET_MAX_LENGTH + 3
        assert snippet.endswith("...")


class TestDefaults:
    """Tests for default_for()."""

    def test_primitive_defaults(self):
        """Primitives default to their zero value, everything else to None."""
        assert default_for(int) == 0
        assert default_for(float) == 0.0
        assert default_for(bool) is False
        assert default_for(str) is None
        assert default_for(ProjectDetail) is None


class TestStatusHandling:
    """Tests for error status classification."""

    def test_error_status_raises_api_error(self):
        """Non-2xx should raise ServedAPIError with status and body."""
        response = httpx.Response(404, content=b'{"error":"missing"}', headers=JSON)
        with pytest.raises(ServedAPIError) as exc_info:
            interpret_response(response, ProjectDetail)
        error = exc_info.value
        assert error.status_code == 404
        assert error.response_content == '{"error":"missing"}'
        assert str(error) == 'API Error: 404 Not Found - {"error":"missing"}'

    def test_error_status_checked_without_target(self):
        """Status should be checked even when no result is expected."""
        with pytest.raises(ServedAPIError) as exc_info:
            interpret_response(httpx.Response(500, content=b"boom"))
        assert exc_info.value.is_server_error

    def test_success_without_target_returns_none(self):
        """target=None should only check the status."""
        assert interpret_response(httpx.Response(200, content=b"<html>")) is None


class TestEmptyBodies:
    """Tests for 204 and empty bodies."""

    def test_no_content_returns_default(self):
        """204 should yield the target's default."""
        assert interpret_response(httpx.Response(204), int) == 0
        assert interpret_response(httpx.Response(204), ProjectDetail) is None

    def test_whitespace_body_returns_default(self):
        """Whitespace-only bodies should yield the target's default."""
        response = httpx.Response(200, content=b"  \n ", headers=JSON)
        assert interpret_response(response, bool) is False


class TestContentType:
    """Tests for the content type guard."""

    def test_html_login_page_raises(self):
        """2xx HTML (an auth redirect) should raise ServedContentTypeError."""
        response = httpx.Response(
            200,
            content=b"<html><body>Please sign in</body></html>",
            headers={"content-type": "text/html; charset=utf-8"},
        )
        with pytest.raises(ServedContentTypeError) as exc_info:
            interpret_response(response, ProjectDetail)
        error = exc_info.value
        assert error.content_type == "text/html"
        assert error.status_code == 200
        assert "Please sign in" in error.response_content
        assert str(error).startswith("API Returned Non-JSON Content (text/html)")

    def test_long_html_body_truncated(self):
        """A long login page should be reported with a truncated body only."""
        body = "<html>" + "x" * 300
        response = httpx.Response(
            200, content=body.encode(), headers={"content-type": "text/html"}
        )
        with pytest.raises(ServedContentTypeError) as exc_info:
            interpret_response(response, ProjectDetail)
        error = exc_info.value
        assert len(error.response_content) == SNIPPET_MAX_LENGTH + 3
        assert error.response_content == body[:SNIPPET_MAX_LENGTH] + "..."
        assert body not in str(error)
        assert str(error).endswith("...")

    def test_html_error_is_api_error(self):
        """Content type errors should be catchable as API errors."""
        response = httpx.Response(200, content=b"<html/>", headers={"content-type": "text/html"})
        with pytest.raises(ServedAPIError):
            interpret_response(response, str)

    def test_problem_json_accepted(self):
        """Any media type containing json should be decoded."""
        response = httpx.Response(
            200, content=b'{"id": 3}', headers={"content-type": "application/problem+json"}
        )
        assert interpret_response(response, ProjectDetail).id == 3

    def test_missing_content_type_accepted(self):
        """Responses without a content type should be decoded."""
        response = httpx.Response(200, content=b'{"id": 3}')
        assert interpret_response(response, ProjectDetail).id == 3


class TestDecoding:
    """Tests for body decoding."""

    def test_str_returns_raw_body(self):
        """str targets should receive the body unchanged."""
        response = httpx.Response(200, content=b'"2.4.0"', headers=JSON)
        assert interpret_response(response, str) == '"2.4.0"'

    def test_int_strips_quotes(self):
        """Quoted integers should be converted."""
        response = httpx.Response(200, content=b' "42" ', headers=JSON)
        assert interpret_response(response, int) == 42

    def test_bool_literal(self):
        """Booleans should accept true/false in any case."""
        response = httpx.Response(200, content=b"TRUE", headers=JSON)
        assert interpret_response(response, bool) is True

    def test_bool_rejects_other_literals(self):
        """Anything other than true/false should fail to decode."""
        response = httpx.Response(200, content=b"1", headers=JSON)
        with pytest.raises(ServedDeserializationError):
            interpret_response(response, bool)

    def test_invalid_int_raises(self):
        """Non-numeric bodies should fail to decode as int."""
        response = httpx.Response(200, content=b"abc", headers=JSON)
        with pytest.raises(ServedDeserializationError) as exc_info:
            interpret_response(response, int)
        assert exc_info.value.snippet == "abc"

    def test_model_decoding_uses_camel_case(self):
        """camelCase JSON should populate snake_case fields."""
        body = b'{"id": 1, "name": "Website", "customerId": 12, "isActive": true}'
        project = interpret_response(httpx.Response(200, content=body, headers=JSON), ProjectDetail)
        assert project.customer_id == 12
        assert project.is_active is True

    def test_generic_envelope(self):
        """Parametrized envelopes should decode their items."""
        body = b'{"data": [{"id": 1}, {"id": 2}], "meta": {"total": 2, "page": 1, "pageSize": 50}}'
        envelope = interpret_response(
            httpx.Response(200, content=body, headers=JSON), ListResponse[ProjectDetail]
        )
        assert [p.id for p in envelope.data] == [1, 2]
        assert envelope.meta.total == 2

    def test_null_body_returns_default(self):
        """A JSON null body should decode to the target's default."""
        response = httpx.Response(200, content=b" null ", headers=JSON)
        assert interpret_response(response, ProjectDetail) is None
        assert interpret_response(response, ListResponse[ProjectDetail]) is None

    def test_malformed_json_raises(self):
        """Invalid JSON should raise ServedDeserializationError with a snippet."""
        response = httpx.Response(200, content=b"{not json", headers=JSON)
        with pytest.raises(ServedDeserializationError) as exc_info:
            interpret_response(response, ProjectDetail)
        assert str(exc_info.value).startswith("JSON Parse Error:")
        assert exc_info.value.snippet == "{not json"

    def test_shape_mismatch_raises(self):
        """Valid JSON of the wrong shape should raise ServedDeserializationError."""
        response = httpx.Response(200, content=b'{"name": "no id"}', headers=JSON)
        with pytest.raises(ServedDeserializationError):
            interpret_response(response, ProjectDetail)
