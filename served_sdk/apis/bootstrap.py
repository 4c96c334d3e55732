"""Bootstrap module: user, tenant and workspace context documents."""

from urllib.parse import quote

from served_sdk._internal.module import ApiModule
from served_sdk.models.bootstrap import (
    TenantBootstrap,
    UserBootstrap,
    UserPermissions,
    WorkspaceBootstrap,
)

BOOTSTRAP_PATH = "api/core/bootstrap"
USER_BOOTSTRAP_PATH = f"{BOOTSTRAP_PATH}/user"


class BootstrapApi(ApiModule):
    module_name = "bootstrap"

    async def get_user(self) -> UserBootstrap:
        """Fetch the current user with every tenant and workspace they can access."""
        return await self._transport.get(USER_BOOTSTRAP_PATH, UserBootstrap)

    async def get_tenant(self, tenant_slug: str) -> TenantBootstrap:
        return await self._transport.get(
            f"{BOOTSTRAP_PATH}/tenant/{quote(tenant_slug, safe='')}",
            TenantBootstrap,
        )

    async def get_workspace(self, tenant_slug: str, workspace_slug: str) -> WorkspaceBootstrap:
        tenant = quote(tenant_slug, safe="")
        workspace = quote(workspace_slug, safe="")
        return await self._transport.get(
            f"{BOOTSTRAP_PATH}/tenant/{tenant}/workspace/{workspace}",
            WorkspaceBootstrap,
        )

    async def get_permissions(self) -> UserPermissions:
        return await self._transport.get(f"{BOOTSTRAP_PATH}/permissions", UserPermissions)
