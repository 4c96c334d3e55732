"""Reporting module: dashboards and datasources."""

from served_sdk._internal.module import ApiModule, ApiResource
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.reporting import (
    CreateDashboardRequest,
    Dashboard,
    DatasourceEntity,
    DatasourceQueryRequest,
    DatasourceQueryResult,
    EntityMetadata,
    UpdateDashboardRequest,
)


class DashboardsResource(ApiResource):
    resource_name = "dashboards"

    async def get_all(self, workspace_id: int | None = None) -> list[Dashboard]:
        query = f"?workspaceId={workspace_id}" if workspace_id is not None else ""
        return await self._get_list(self._base_path + query, Dashboard)

    async def get(self, id: int) -> Dashboard:
        return await self._transport.get(f"{self._base_path}/{id}", Dashboard)

    async def create(self, request: CreateDashboardRequest) -> Dashboard:
        return await self._transport.post(self._base_path, request, Dashboard)

    async def update(self, id: int, request: UpdateDashboardRequest) -> Dashboard:
        return await self._transport.put(f"{self._base_path}/{id}", request, Dashboard)

    async def delete(self, id: int) -> None:
        await self._transport.delete(f"{self._base_path}/{id}")


class DatasourcesResource(ApiResource):
    """Queryable entities behind dashboards and widgets."""

    resource_name = "datasources"

    async def get_entities(self) -> list[DatasourceEntity]:
        return await self._get_list(f"{self._base_path}/entities", DatasourceEntity)

    async def get_entity_metadata(self, entity_name: str) -> EntityMetadata:
        return await self._transport.get(
            f"{self._base_path}/entities/{entity_name}", EntityMetadata
        )

    async def execute_query(self, request: DatasourceQueryRequest) -> DatasourceQueryResult:
        return await self._transport.post(
            f"{self._base_path}/query", request, DatasourceQueryResult
        )


class ReportingApi(ApiModule):
    module_name = "reporting"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.dashboards = DashboardsResource(transport, self)
        self.datasources = DatasourcesResource(transport, self)
