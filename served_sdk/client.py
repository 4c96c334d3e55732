"""User-facing client for the Served platform APIs.

Example:
    from served_sdk import ServedClient

    async with ServedClient(token="...", tenant="acme") as client:
        projects = await client.projects.search("website")
        tenant_id = await client.get_tenant_id("acme")
"""

import asyncio
import os
import socket
from collections.abc import Mapping

import httpx

from served_sdk._internal.http import (
    API_URL_ENV_VAR,
    AUTHORIZATION_HEADER,
    DEFAULT_TIMEOUT,
    TENANT_HEADER,
    create_http_client,
    get_configured_api_url,
)
from served_sdk._internal.tracing import RequestTracer
from served_sdk._internal.transport import HttpTransport
from served_sdk._version import __version__
from served_sdk.apis import (
    BoardApi,
    BootstrapApi,
    CalendarApi,
    CompaniesApi,
    DevOpsApi,
    FinanceApi,
    HealthApi,
    IdentityApi,
    ProjectManagementApi,
    RegistrationApi,
    ReportingApi,
    SalesApi,
    TenantApi,
)
from served_sdk.exceptions import (
    ServedAPIError,
    ServedTenantNotFoundError,
    ServedTenantResolutionError,
)
from served_sdk.models.bootstrap import UserBootstrap
from served_sdk.models.system import SessionInfo, SessionRegistration

SESSION_REGISTRATION_PATH = "api/agents/coordination/RegisterClaudeSession"
TRACE_TENANT_KEY = "served.tenant"


class ServedClient:
    """Async client for the Served platform.

    API areas are exposed as module attributes (``client.project_management``,
    ``client.finance``...). The most used resources are also available
    directly (``client.projects``, ``client.customers``...).

    On construction the client registers the current session with the
    coordination service in the background. This never blocks and never
    fails the client; pass ``register_session=False`` to skip it.

    Use ``ServedClient.from_env()`` to configure the client from environment
    variables, and ``async with`` (or ``aclose()``) to release connections.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        tenant: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        default_headers: Mapping[str, str] | None = None,
        register_session: bool = True,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API base URL. Defaults to SERVED_API_URL or the public API.
            token: Bearer token sent with every request.
            tenant: Tenant slug sent in the Served-Tenant header.
            http_client: Pre-configured client to use instead of creating one.
                It keeps its own timeout and base URL (``base_url`` is applied
                only if it has none) and is not closed by ``aclose()``.
            timeout: Request timeout in seconds for the created client.
            default_headers: Extra headers sent with every request.
            register_session: Register this session in the background.
            debug: Enable debug logging to stderr.
        """
        self._base_url = base_url or get_configured_api_url()
        self._tenant = tenant or ""
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = create_http_client(base_url=self._base_url, timeout=timeout)
        elif not str(http_client.base_url):
            http_client.base_url = self._base_url
        if default_headers:
            http_client.headers.update(default_headers)
        if token:
            http_client.headers[AUTHORIZATION_HEADER] = f"Bearer {token}"
        if self._tenant and TENANT_HEADER not in http_client.headers:
            http_client.headers[TENANT_HEADER] = self._tenant
        self._http_client = http_client

        self._tenant_id: int | None = None
        self._tracer: RequestTracer | None = None
        self._session_registered = not register_session
        self._background_tasks: set[asyncio.Task] = set()

        self._transport = HttpTransport(
            http_client, debug=debug, before_request=self._before_request
        )

        # Module facades
        self.project_management = ProjectManagementApi(self._transport)
        self.finance = FinanceApi(self._transport)
        self.devops = DevOpsApi(self._transport)
        self.sales = SalesApi(self._transport)
        self.registration = RegistrationApi(self._transport)
        self.companies = CompaniesApi(self._transport)
        self.identity = IdentityApi(self._transport)
        self.calendar = CalendarApi(self._transport)
        self.board = BoardApi(self._transport)
        self.reporting = ReportingApi(self._transport)
        self.tenant = TenantApi(self._transport)
        self.bootstrap = BootstrapApi(self._transport)
        self.health = HealthApi(self._transport)

        # Shortcuts to the same resource instances
        self.projects = self.project_management.projects
        self.tasks = self.project_management.tasks
        self.invoices = self.finance.invoices
        self.time_registrations = self.registration.time_registrations
        self.customers = self.companies.customers
        self.employees = self.identity.employees
        self.api_keys = self.identity.api_keys
        self.agreements = self.calendar.agreements
        self.boards = self.board.boards
        self.dashboards = self.reporting.dashboards
        self.datasources = self.reporting.datasources
        self.tenants = self.tenant.tenants
        self.workspaces = self.tenant.workspaces

        if register_session:
            self._schedule_session_registration()

    @classmethod
    def from_env(cls) -> "ServedClient":
        """Create a client from environment variables.

        Environment variables:
            SERVED_API_URL: API base URL (default: https://apis.unifiedhq.ai).
            SERVED_TOKEN: Bearer token.
            SERVED_TENANT: Tenant slug.
            SERVED_TIMEOUT: Request timeout in seconds.
            SERVED_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured ServedClient.
        """
        base_url = os.environ.get(API_URL_ENV_VAR) or None
        token = os.environ.get("SERVED_TOKEN") or None
        tenant = os.environ.get("SERVED_TENANT") or None
        timeout = float(os.environ.get("SERVED_TIMEOUT", str(DEFAULT_TIMEOUT)))
        debug = os.environ.get("SERVED_DEBUG", "") == "1"

        return cls(base_url=base_url, token=token, tenant=tenant, timeout=timeout, debug=debug)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def tracer(self) -> RequestTracer | None:
        return self._tracer

    @property
    def is_tracing_enabled(self) -> bool:
        return self._tracer is not None and self._tracer.is_enabled

    def set_tracer(self, tracer: RequestTracer) -> None:
        """Replace the tracer, closing the previous one.

        The tracer's hooks are installed on the HTTP client and the previous
        tracer's hooks are removed, so a caller-supplied client is left clean
        after :meth:`aclose`.
        """
        self._detach_tracer()
        for event, hooks in tracer.event_hooks().items():
            self._http_client.event_hooks[event].extend(hooks)
        self._tracer = tracer
        if self._tenant:
            tracer.set_context(TRACE_TENANT_KEY, self._tenant)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        self._transport.log_debug(message)

    def _detach_tracer(self) -> None:
        if self._tracer is None:
            return
        self._tracer.close()
        for event, hooks in self._tracer.event_hooks().items():
            installed = self._http_client.event_hooks[event]
            for hook in hooks:
                if hook in installed:
                    installed.remove(hook)

    # =========================================================================
    # Tenant Resolution
    # =========================================================================

    async def get_user_bootstrap(self) -> UserBootstrap:
        return await self.bootstrap.get_user()

    async def get_tenant_id(self, tenant_slug: str) -> int:
        """Resolve a tenant slug to its numeric ID.

        The first successful resolution is cached for the lifetime of the
        client and returned for every later call, whatever slug is passed.
        A client is meant to serve a single tenant.

        Args:
            tenant_slug: Tenant slug, matched case-insensitively.

        Returns:
            The tenant ID.

        Raises:
            ValueError: ``tenant_slug`` is empty.
            ServedTenantNotFoundError: The user has no tenant with that slug.
            ServedAPIError: The bootstrap request failed.
            ServedTenantResolutionError: Any other failure (network, parsing).
        """
        if self._tenant_id is not None:
            return self._tenant_id

        if not tenant_slug:
            raise ValueError("Tenant slug cannot be null or empty")

        try:
            bootstrap = await self.get_user_bootstrap()
            wanted = tenant_slug.casefold()
            tenant = next(
                (t for t in bootstrap.tenants if t.slug.casefold() == wanted),
                None,
            )
            if tenant is None:
                raise ServedTenantNotFoundError(tenant_slug)
        except ServedAPIError:
            raise
        except Exception as e:
            raise ServedTenantResolutionError(
                f"Failed to resolve Tenant ID for '{tenant_slug}': {e}", slug=tenant_slug
            ) from e

        self._tenant_id = tenant.id
        return tenant.id

    # =========================================================================
    # Session Registration
    # =========================================================================

    def _session_payload(
        self, source: str, task_id: int | None = None, task_name: str | None = None
    ) -> SessionRegistration:
        return SessionRegistration(
            hostname=socket.gethostname(),
            working_directory=os.getcwd(),
            source=source,
            version=__version__,
            task_id=task_id,
            task_name=task_name,
        )

    async def _before_request(self) -> None:
        if not self._session_registered:
            self._schedule_session_registration()

    def _schedule_session_registration(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._log_debug("No running event loop, session registration deferred")
            return
        self._session_registered = True
        task = loop.create_task(self._register_session_in_background())
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    async def _register_session_in_background(self) -> None:
        try:
            await self._transport.send_raw(
                "POST", SESSION_REGISTRATION_PATH, self._session_payload("sdk")
            )
        except Exception as e:
            self._log_debug(f"Session registration failed: {e}")

    async def register_session(
        self, task_id: int | None = None, task_name: str | None = None
    ) -> SessionInfo | None:
        """Register this session explicitly, optionally tied to a task.

        Returns:
            The registration result with any file conflict warnings, or None
            if registration failed.
        """
        try:
            return await self._transport.post(
                SESSION_REGISTRATION_PATH,
                self._session_payload("sdk-manual", task_id, task_name),
                SessionInfo,
            )
        except Exception as e:
            self._log_debug(f"Session registration failed: {e}")
            return None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def aclose(self) -> None:
        """Cancel background work and release the HTTP client (if owned)."""
        pending = [t for t in self._background_tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._background_tasks.clear()

        self._detach_tracer()
        self._tenant_id = None

        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "ServedClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
