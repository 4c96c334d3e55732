"""Fluent construction of a configured ServedClient.

Example:
    client = (
        ServedClientBuilder()
        .with_token(token)
        .with_tenant("acme")
        .with_tracing(lambda options: setattr(options, "service_name", "billing-sync"))
        .build()
    )
"""

from collections.abc import Callable

import httpx

from served_sdk._internal.http import DEFAULT_TIMEOUT, get_configured_api_url
from served_sdk._internal.tracing import RequestTracer, TracingOptions
from served_sdk.client import ServedClient
from served_sdk.exceptions import ServedConfigError


class ServedClientBuilder:
    """Collects client settings and builds a :class:`ServedClient`.

    The base URL starts out as SERVED_API_URL (or the public API) read when
    the builder is created.
    """

    def __init__(self) -> None:
        self._base_url: str | None = get_configured_api_url()
        self._token: str | None = None
        self._tenant: str | None = None
        self._http_client: httpx.AsyncClient | None = None
        self._tracing_options: TracingOptions | None = None
        self._timeout: float | None = None
        self._default_headers: dict[str, str] = {}
        self._debug = False
        self._register_session = True

    def with_base_url(self, base_url: str) -> "ServedClientBuilder":
        if base_url is None:
            raise ServedConfigError("base_url must not be None")
        self._base_url = base_url
        return self

    def with_token(self, token: str) -> "ServedClientBuilder":
        self._token = token
        return self

    def with_tenant(self, tenant: str) -> "ServedClientBuilder":
        self._tenant = tenant
        return self

    def with_http_client(self, http_client: httpx.AsyncClient) -> "ServedClientBuilder":
        """Use an existing httpx client. The built ServedClient will not close it."""
        if http_client is None:
            raise ServedConfigError("http_client must not be None")
        self._http_client = http_client
        return self

    def with_tracing(
        self, configure: Callable[[TracingOptions], None] | None = None
    ) -> "ServedClientBuilder":
        """Record request spans; ``configure`` may adjust the default options in place."""
        self._tracing_options = TracingOptions()
        if configure is not None:
            configure(self._tracing_options)
        return self

    def with_timeout(self, seconds: float) -> "ServedClientBuilder":
        self._timeout = seconds
        return self

    def with_default_header(self, name: str, value: str) -> "ServedClientBuilder":
        self._default_headers[name] = value
        return self

    def with_debug(self, enabled: bool = True) -> "ServedClientBuilder":
        self._debug = enabled
        return self

    def without_session_registration(self) -> "ServedClientBuilder":
        self._register_session = False
        return self

    def build(self) -> ServedClient:
        """Build the client.

        Raises:
            ServedConfigError: The base URL is empty.
        """
        if not self._base_url:
            raise ServedConfigError("Base URL is required. Call with_base_url() first.")

        if self._http_client is not None and self._timeout is not None:
            self._http_client.timeout = httpx.Timeout(self._timeout)

        client = ServedClient(
            self._base_url,
            self._token,
            self._tenant,
            http_client=self._http_client,
            timeout=self._timeout if self._timeout is not None else DEFAULT_TIMEOUT,
            default_headers=self._default_headers,
            register_session=self._register_session,
            debug=self._debug,
        )

        if self._tracing_options is not None:
            tracer = RequestTracer(self._tracing_options)
            client.set_tracer(tracer)

        return client
