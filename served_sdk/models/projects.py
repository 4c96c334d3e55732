"""Project models."""

from datetime import datetime

from pydantic import Field

from served_sdk.models.common import QueryParams, ServedModel

# =============================================================================
# Response Models
# =============================================================================


class ProjectSummary(ServedModel):
    """Compact project view returned by list operations."""

    id: int
    name: str = ""
    project_no: str | None = None
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    project_status_id: int | None = None
    project_manager_id: int | None = None
    customer_id: int | None = None
    is_active: bool = False
    progress: float = 0.0


class ProjectDetail(ServedModel):
    """Full project record."""

    id: int
    version: int = 0
    tenant_id: int = 0
    name: str = ""
    full_name: str | None = None
    description: str | None = None
    project_no: str | None = None
    customer_id: int | None = None
    project_type_id: int = 0
    project_status_id: int = 0
    project_stage_id: int = 0
    project_manager_id: int | None = None
    parent_id: int | None = None
    is_active: bool = False
    is_parent: bool = False
    start_date: datetime | None = None
    end_date: datetime | None = None
    contract_amount: float | None = None
    project_budget_amount: float | None = None
    project_budget_hours: float | None = None
    reg_hours: float | None = None
    billed_amount: float | None = None
    tags: str | None = None
    summary: str | None = None
    color: str | None = None
    progress: float = 0.0
    member_ids: list[int] = Field(default_factory=list)
    created_date: datetime | None = None
    updated_date: datetime | None = None
    created_by: int = 0
    updated_by: int | None = None

    def to_summary(self) -> ProjectSummary:
        return ProjectSummary(
            id=self.id,
            name=self.name,
            project_no=self.project_no,
            start_date=self.start_date,
            end_date=self.end_date,
            project_status_id=self.project_status_id,
            customer_id=self.customer_id,
            project_manager_id=self.project_manager_id,
            is_active=self.is_active,
        )


# =============================================================================
# Request Models
# =============================================================================


class CreateProjectRequest(ServedModel):
    name: str
    description: str | None = None
    summary: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    customer_id: int | None = None
    project_manager_id: int | None = None
    project_type_id: int | None = None
    project_status_id: int | None = None
    parent_id: int | None = None
    color: str | None = None
    tags: str | None = None


class UpdateProjectRequest(ServedModel):
    """Partial update; only fields that are set are sent."""

    name: str | None = None
    description: str | None = None
    summary: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    project_status_id: int | None = None
    project_manager_id: int | None = None
    customer_id: int | None = None
    is_active: bool | None = None
    color: str | None = None
    tags: str | None = None
    progress: float | None = None


class ProjectQueryParams(QueryParams):
    customer_id: int | None = None
    project_status_id: int | None = None
    is_active: bool | None = None
    parent_id: int | None = None


# =============================================================================
# Bulk Models
# =============================================================================


class BulkCreateProjectsRequest(ServedModel):
    projects: list[CreateProjectRequest] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkUpdateProjectItem(ServedModel):
    id: int
    data: UpdateProjectRequest = Field(default_factory=UpdateProjectRequest)


class BulkUpdateProjectsRequest(ServedModel):
    projects: list[BulkUpdateProjectItem] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkDeleteProjectsRequest(ServedModel):
    ids: list[int] = Field(default_factory=list)
    continue_on_error: bool = True
