"""Dashboard and datasource models."""

from datetime import datetime
from enum import IntEnum
from typing import Any

from pydantic import Field

from served_sdk.models.common import ServedModel

# =============================================================================
# Dashboards
# =============================================================================


class DashboardScope(IntEnum):
    PERSONAL = 0
    WORKSPACE = 1
    PROJECT = 2
    ORGANIZATION = 3


class Widget(ServedModel):
    id: int
    dashboard_id: int = 0
    type_name: str = ""
    title: str = ""
    subtitle: str | None = None
    grid_x: int = 0
    grid_y: int = 0
    grid_width: int = 0
    grid_height: int = 0
    config: str | None = None


class Dashboard(ServedModel):
    id: int
    name: str = ""
    description: str | None = None
    scope: DashboardScope = DashboardScope.PERSONAL
    theme: str | None = None
    refresh_interval_seconds: int | None = None
    is_default: bool = False
    workspace_id: int | None = None
    project_id: int | None = None
    board_id: int | None = None
    layout_config: str | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None
    created_by_user_id: int = 0
    widgets: list[Widget] = Field(default_factory=list)


class CreateDashboardRequest(ServedModel):
    name: str
    description: str | None = None
    scope: DashboardScope = DashboardScope.PERSONAL
    theme: str | None = None
    refresh_interval_seconds: int | None = None
    workspace_id: int | None = None
    project_id: int | None = None
    board_id: int | None = None


class UpdateDashboardRequest(ServedModel):
    name: str | None = None
    description: str | None = None
    theme: str | None = None
    refresh_interval_seconds: int | None = None
    layout_config: str | None = None


# =============================================================================
# Datasources
# =============================================================================


class DatasourceEntity(ServedModel):
    name: str = ""
    display_name: str = ""
    description: str | None = None
    field_count: int = 0
    supports_filtering: bool = False
    supports_aggregation: bool = False


class EntityField(ServedModel):
    name: str = ""
    display_name: str = ""
    data_type: str = ""
    filterable: bool = False
    sortable: bool = False
    aggregatable: bool = False


class EntityRelationship(ServedModel):
    name: str = ""
    target_entity: str = ""
    type: str = ""


class EntityMetadata(ServedModel):
    name: str = ""
    display_name: str = ""
    description: str | None = None
    fields: list[EntityField] = Field(default_factory=list)
    relationships: list[EntityRelationship] = Field(default_factory=list)


class DatasourceSortItem(ServedModel):
    field: str
    direction: str = "asc"


class DatasourceAggregation(ServedModel):
    field: str
    function: str
    alias: str | None = None


class DatasourceQueryRequest(ServedModel):
    entity: str
    select: list[str] | None = None
    filter: Any = None
    sort: list[DatasourceSortItem] | None = None
    group_by: list[str] | None = None
    aggregations: list[DatasourceAggregation] | None = None
    skip: int | None = None
    take: int | None = None


class DatasourceQueryResult(ServedModel):
    data: list[dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    has_more: bool = False
    execution_time_ms: int = 0
