"""Board module: boards and sheets."""

from served_sdk._internal.module import ApiModule, ApiResource
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.boards import (
    Board,
    CreateBoardRequest,
    CreateSheetRequest,
    Sheet,
    UpdateBoardRequest,
    UpdateSheetRequest,
)


def _workspace_query(workspace_id: int | None) -> str:
    return f"?workspaceId={workspace_id}" if workspace_id is not None else ""


class BoardsResource(ApiResource):
    resource_name = "boards"

    async def get_all(self, workspace_id: int | None = None) -> list[Board]:
        return await self._get_list(self._base_path + _workspace_query(workspace_id), Board)

    async def get(self, id: int) -> Board:
        return await self._transport.get(f"{self._base_path}/{id}", Board)

    async def create(self, request: CreateBoardRequest) -> Board:
        return await self._transport.post(self._base_path, request, Board)

    async def update(self, id: int, request: UpdateBoardRequest) -> Board:
        return await self._transport.put(f"{self._base_path}/{id}", request, Board)

    async def delete(self, id: int) -> None:
        await self._transport.delete(f"{self._base_path}/{id}")


class SheetsResource(ApiResource):
    resource_name = "sheets"

    async def get_all(self, workspace_id: int | None = None) -> list[Sheet]:
        return await self._get_list(self._base_path + _workspace_query(workspace_id), Sheet)

    async def get(self, id: int) -> Sheet:
        return await self._transport.get(f"{self._base_path}/{id}", Sheet)

    async def create(self, request: CreateSheetRequest) -> Sheet:
        return await self._transport.post(self._base_path, request, Sheet)

    async def update(self, id: int, request: UpdateSheetRequest) -> Sheet:
        return await self._transport.put(f"{self._base_path}/{id}", request, Sheet)

    async def delete(self, id: int) -> None:
        await self._transport.delete(f"{self._base_path}/{id}")


class BoardApi(ApiModule):
    module_name = "board"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.boards = BoardsResource(transport, self)
        self.sheets = SheetsResource(transport, self)
