"""Tenant module: tenants and workspaces."""

from urllib.parse import quote

from served_sdk._internal.module import ApiModule, ApiResource
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.tenants import (
    CreateWorkspaceRequest,
    TenantDetail,
    UpdateTenantRequest,
    UpdateWorkspaceRequest,
    WorkspaceDetail,
)


class TenantsResource(ApiResource):
    """Tenants visible to the caller. Tenants cannot be created or deleted here."""

    resource_name = "tenants"

    async def get_all(self) -> list[TenantDetail]:
        return await self._get_list(self._base_path, TenantDetail)

    async def get(self, id: int) -> TenantDetail:
        return await self._transport.get(f"{self._base_path}/{id}", TenantDetail)

    async def get_by_slug(self, slug: str) -> TenantDetail:
        return await self._transport.get(
            f"{self._base_path}/slug/{quote(slug, safe='')}", TenantDetail
        )

    async def update(self, id: int, request: UpdateTenantRequest) -> TenantDetail:
        return await self._transport.put(f"{self._base_path}/{id}", request, TenantDetail)


class WorkspacesResource(ApiResource):
    resource_name = "workspaces"

    async def get_all(self, tenant_id: int | None = None) -> list[WorkspaceDetail]:
        query = f"?tenantId={tenant_id}" if tenant_id is not None else ""
        return await self._get_list(self._base_path + query, WorkspaceDetail)

    async def get(self, id: int) -> WorkspaceDetail:
        return await self._transport.get(f"{self._base_path}/{id}", WorkspaceDetail)

    async def create(self, request: CreateWorkspaceRequest) -> WorkspaceDetail:
        return await self._transport.post(self._base_path, request, WorkspaceDetail)

    async def update(self, id: int, request: UpdateWorkspaceRequest) -> WorkspaceDetail:
        return await self._transport.put(f"{self._base_path}/{id}", request, WorkspaceDetail)

    async def delete(self, id: int) -> None:
        await self._transport.delete(f"{self._base_path}/{id}")


class TenantApi(ApiModule):
    module_name = "tenant"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.tenants = TenantsResource(transport, self)
        self.workspaces = WorkspacesResource(transport, self)
