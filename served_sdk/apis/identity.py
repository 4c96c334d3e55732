"""Identity module: employees and API keys."""

from collections.abc import Iterator

from served_sdk._internal.crud import ReadOnlyCrudClient
from served_sdk._internal.module import ApiModule, ApiResource
from served_sdk._internal.query import QueryPair
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.identity import (
    ApiKey,
    ApiKeyCreated,
    CreateApiKeyRequest,
    EmployeeDetail,
    EmployeeQueryParams,
    UpdateApiKeyRequest,
)


def _employee_filters(query: EmployeeQueryParams) -> Iterator[QueryPair]:
    yield "isActive", query.is_active
    yield "departmentId", query.department_id


class EmployeesResource(ReadOnlyCrudClient[EmployeeDetail, EmployeeQueryParams]):
    """Employees of the current tenant (legacy ``api/users``). Read-only."""

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(
            transport,
            ApiModule.legacy_path("users"),
            entity_type=EmployeeDetail,
            query_type=EmployeeQueryParams,
            extra_query_params=_employee_filters,
        )

    async def search(self, search_term: str, take: int = 20) -> list[EmployeeDetail]:
        return await self.get_all(
            EmployeeQueryParams(search=search_term, take=take, is_active=True)
        )


class ApiKeysResource(ApiResource):
    resource_name = "api-keys"

    async def get_all(self) -> list[ApiKey]:
        return await self._get_list(self._base_path, ApiKey)

    async def get(self, id: int) -> ApiKey:
        return await self._transport.get(f"{self._base_path}/{id}", ApiKey)

    async def create(self, request: CreateApiKeyRequest) -> ApiKeyCreated:
        """Create a key. ``plain_key`` in the result is the only time the secret is returned."""
        return await self._transport.post(self._base_path, request, ApiKeyCreated)

    async def update(self, id: int, request: UpdateApiKeyRequest) -> ApiKey:
        return await self._transport.put(f"{self._base_path}/{id}", request, ApiKey)

    async def delete(self, id: int) -> None:
        await self._transport.delete(f"{self._base_path}/{id}")

    async def revoke(self, id: int) -> None:
        await self._transport.post(f"{self._base_path}/{id}/revoke", {})


class IdentityApi(ApiModule):
    module_name = "identity"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.employees = EmployeesResource(transport)
        self.api_keys = ApiKeysResource(transport, self)
