"""Board and sheet models."""

from datetime import datetime

from pydantic import Field

from served_sdk.models.common import ServedModel


class BoardConfiguration(ServedModel):
    id: int = 0
    projects_ids: str | None = None
    default_view_id: int | None = None
    settings_json: str | None = None


class BoardView(ServedModel):
    id: int
    name: str | None = None
    type: str | None = None
    configuration_json: str | None = None


class Board(ServedModel):
    id: int
    version: int = 0
    parent_id: int | None = None
    name: str | None = None
    description: str | None = None
    views: list[BoardView] | None = None
    configuration: BoardConfiguration | None = None
    tenant_id: int | None = None


class CreateBoardRequest(ServedModel):
    name: str | None = None
    description: str | None = None
    parent_id: int | None = None
    configuration: BoardConfiguration | None = None


class UpdateBoardRequest(ServedModel):
    id: int
    name: str | None = None
    description: str | None = None
    configuration: BoardConfiguration | None = None


class SheetColumn(ServedModel):
    id: int
    sheet_id: int = 0
    name: str = ""
    description: str | None = None
    column_type: int = 0
    width: int | None = None
    sort_order: int = 0
    is_required: bool = False
    is_hidden: bool = False


class Sheet(ServedModel):
    id: int
    title: str = ""
    description: str | None = None
    icon: str | None = None
    color: str | None = None
    row_count: int = 0
    column_count: int = 0
    created_date: datetime | None = None
    updated_date: datetime | None = None
    columns: list[SheetColumn] = Field(default_factory=list)


class CreateSheetColumnRequest(ServedModel):
    name: str
    description: str | None = None
    column_type: int = 0
    width: int | None = None
    is_required: bool = False
    default_value: str | None = None


class CreateSheetRequest(ServedModel):
    title: str
    description: str | None = None
    icon: str | None = None
    color: str | None = None
    columns: list[CreateSheetColumnRequest] | None = None


class UpdateSheetRequest(ServedModel):
    id: int
    title: str
    description: str | None = None
    icon: str | None = None
    color: str | None = None
