"""Sales module: pipelines and deals.

Sales endpoints are RPC style: every operation is a POST to
``{resource}/{action}`` with the arguments in the body.
"""

from served_sdk._internal.module import ApiModule, ApiResource
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.sales import (
    CreateDealRequest,
    CreatePipelineRequest,
    Deal,
    Pipeline,
    PipelineListItem,
    UpdateDealRequest,
    UpdatePipelineRequest,
)


class PipelinesResource(ApiResource):
    resource_name = "pipelines"

    async def get_all(self, workspace_id: int) -> list[PipelineListItem]:
        return await self._post_list(
            f"{self._base_path}/list", {"workspaceId": workspace_id}, PipelineListItem
        )

    async def get(self, id: int) -> Pipeline:
        return await self._transport.post(f"{self._base_path}/get", {"id": id}, Pipeline)

    async def create(self, request: CreatePipelineRequest) -> Pipeline:
        return await self._transport.post(f"{self._base_path}/create", request, Pipeline)

    async def update(self, request: UpdatePipelineRequest) -> Pipeline:
        return await self._transport.post(f"{self._base_path}/update", request, Pipeline)

    async def delete(self, id: int) -> None:
        await self._transport.post(f"{self._base_path}/delete", {"id": id})


class DealsResource(ApiResource):
    resource_name = "deals"

    async def get_by_pipeline(self, pipeline_id: int) -> list[Deal]:
        return await self._post_list(
            f"{self._base_path}/list", {"pipelineId": pipeline_id}, Deal
        )

    async def get(self, id: int) -> Deal:
        return await self._transport.post(f"{self._base_path}/get", {"id": id}, Deal)

    async def create(self, request: CreateDealRequest) -> Deal:
        return await self._transport.post(f"{self._base_path}/create", request, Deal)

    async def update(self, request: UpdateDealRequest) -> Deal:
        return await self._transport.post(f"{self._base_path}/update", request, Deal)

    async def delete(self, id: int) -> None:
        await self._transport.post(f"{self._base_path}/delete", {"id": id})

    async def move_to_stage(self, deal_id: int, stage_id: int) -> Deal:
        return await self._transport.post(
            f"{self._base_path}/move", {"dealId": deal_id, "stageId": stage_id}, Deal
        )


class SalesApi(ApiModule):
    module_name = "sales"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.pipelines = PipelinesResource(transport, self)
        self.deals = DealsResource(transport, self)
