"""Public exceptions for the Served SDK."""


class ServedError(Exception):
    """Base exception for all Served SDK errors."""


class ServedAPIError(ServedError):
    """Error reported by the Served API.

    Raised for any non-2xx response. Callers branch on ``status_code`` to tell
    "not found" from "forbidden" from server failures.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_content: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_content = response_content

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @property
    def is_forbidden(self) -> bool:
        return self.status_code == 403

    @property
    def is_server_error(self) -> bool:
        return self.status_code is not None and self.status_code >= 500


class ServedContentTypeError(ServedAPIError):
    """A 2xx response whose body is not JSON.

    Usually an authentication redirect that landed on an HTML login page,
    i.e. the session was silently logged out.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_content: str | None = None,
        content_type: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, response_content=response_content)
        self.content_type = content_type


class ServedDeserializationError(ServedError):
    """Response body did not match the expected shape (client/server contract drift)."""

    def __init__(self, message: str, snippet: str | None = None) -> None:
        super().__init__(message)
        self.snippet = snippet


class ServedTenantNotFoundError(ServedAPIError):
    """The requested tenant slug is not available to the current user."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            f"Tenant '{slug}' not found in user context.",
            status_code=404,
        )
        self.slug = slug


class ServedTenantResolutionError(ServedError):
    """Tenant ID resolution failed for a reason other than a missing tenant."""

    def __init__(self, message: str, slug: str) -> None:
        super().__init__(message)
        self.slug = slug


class ServedConfigError(ServedError):
    """Configuration error (missing base URL, invalid settings)."""
