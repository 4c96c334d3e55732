"""Tests for public exceptions."""

import pytest

from served_sdk.exceptions import (
    ServedAPIError,
    ServedConfigError,
    ServedContentTypeError,
    ServedDeserializationError,
    ServedError,
    ServedTenantNotFoundError,
    ServedTenantResolutionError,
)


class TestServedError:
    """Tests for base ServedError."""

    def test_is_exception(self):
        """ServedError should be an Exception."""
        assert issubclass(ServedError, Exception)

    def test_can_be_raised(self):
        """ServedError should be raisable with message."""
        with pytest.raises(ServedError) as exc_info:
            raise ServedError("test error")
        assert str(exc_info.value) == "test error"


class TestServedAPIError:
    """Tests for ServedAPIError."""

    def test_inherits_from_served_error(self):
        """ServedAPIError should inherit from ServedError."""
        assert issubclass(ServedAPIError, ServedError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = ServedAPIError("API request failed")
        assert str(error) == "API request failed"
        assert error.status_code is None
        assert error.response_content is None

    def test_with_status_code_and_content(self):
        """Should store status code and body."""
        error = ServedAPIError("Not found", status_code=404, response_content='{"error":"x"}')
        assert error.status_code == 404
        assert error.response_content == '{"error":"x"}'

    @pytest.mark.parametrize(
        "status,not_found,unauthorized,forbidden,server_error",
        [
            (404, True, False, False, False),
            (401, False, True, False, False),
            (403, False, False, True, False),
            (500, False, False, False, True),
            (503, False, False, False, True),
            (400, False, False, False, False),
        ],
    )
    def test_status_helpers(self, status, not_found, unauthorized, forbidden, server_error):
        """Status helpers should classify the status code."""
        error = ServedAPIError("error", status_code=status)
        assert error.is_not_found is not_found
        assert error.is_unauthorized is unauthorized
        assert error.is_forbidden is forbidden
        assert error.is_server_error is server_error

    def test_server_error_without_status(self):
        """Missing status code is not a server error."""
        assert ServedAPIError("error").is_server_error is False

    def test_can_be_caught_as_served_error(self):
        """Should be catchable as ServedError."""
        with pytest.raises(ServedError):
            raise ServedAPIError("API error", status_code=500)


class TestServedContentTypeError:
    """Tests for ServedContentTypeError."""

    def test_is_api_error(self):
        """Non-JSON responses should be catchable as API errors."""
        assert issubclass(ServedContentTypeError, ServedAPIError)

    def test_stores_content_type(self):
        """Should store the offending content type."""
        error = ServedContentTypeError(
            "non-json", status_code=200, response_content="<html>", content_type="text/html"
        )
        assert error.content_type == "text/html"
        assert error.status_code == 200
        assert error.response_content == "<html>"


class TestServedDeserializationError:
    """Tests for ServedDeserializationError."""

    def test_is_not_api_error(self):
        """Decoding failures are not API errors."""
        assert issubclass(ServedDeserializationError, ServedError)
        assert not issubclass(ServedDeserializationError, ServedAPIError)

    def test_stores_snippet(self):
        """Should keep the body snippet."""
        error = ServedDeserializationError("bad json", snippet="{oops")
        assert error.snippet == "{oops"


class TestTenantErrors:
    """Tests for tenant resolution errors."""

    def test_not_found_is_404_api_error(self):
        """Tenant not found should be a 404 API error naming the slug."""
        error = ServedTenantNotFoundError("acme")
        assert isinstance(error, ServedAPIError)
        assert error.is_not_found
        assert error.slug == "acme"
        assert str(error) == "Tenant 'acme' not found in user context."

    def test_resolution_error(self):
        """Resolution error should carry the slug."""
        error = ServedTenantResolutionError("boom", slug="acme")
        assert isinstance(error, ServedError)
        assert not isinstance(error, ServedAPIError)
        assert error.slug == "acme"


class TestServedConfigError:
    """Tests for ServedConfigError."""

    def test_inherits_from_served_error(self):
        """ServedConfigError should inherit from ServedError."""
        assert issubclass(ServedConfigError, ServedError)

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(ServedConfigError) as exc_info:
            raise ServedConfigError("Base URL is required")
        assert str(exc_info.value) == "Base URL is required"
