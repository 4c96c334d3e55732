"""Task models."""

from datetime import datetime
from enum import IntEnum

from pydantic import Field

from served_sdk.models.common import QueryParams, ServedModel


class TaskStatus(IntEnum):
    NEW = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    ON_HOLD = 3
    CANCELLED = 4


class TaskPriority(IntEnum):
    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


# =============================================================================
# Response Models
# =============================================================================


class TaskSummary(ServedModel):
    """Compact task view returned by list operations."""

    id: int
    name: str = ""
    task_no: str | None = None
    project_id: int = 0
    project_name: str | None = None
    task_status_id: int | None = None
    task_type_id: int | None = None
    assigned_to_id: int | None = None
    assigned_to_name: str | None = None
    due_date: datetime | None = None
    is_open: bool = False


class TaskDetail(ServedModel):
    """Full task record."""

    id: int
    version: int = 0
    tenant_id: int = 0
    name: str = ""
    task_no: str | None = None
    description: str | None = None
    status: TaskStatus = TaskStatus.NEW
    task_status_id: int | None = None
    task_type_id: int | None = None
    priority: TaskPriority | None = None
    parent_id: int | None = None
    project_id: int = 0
    project_name: str | None = None
    assigned_to_id: int | None = None
    assigned_to_name: str | None = None
    is_open: bool = False
    is_completed: bool = False
    start_date: datetime | None = None
    due_date: datetime | None = None
    completed_date: datetime | None = None
    estimated_hours: float | None = None
    actual_hours: float | None = None
    progress: float = 0.0
    tags: str | None = None
    sub_task_count: int = 0
    created_date: datetime | None = None
    updated_date: datetime | None = None

    def to_summary(self) -> TaskSummary:
        return TaskSummary(
            id=self.id,
            name=self.name,
            task_no=self.task_no,
            project_id=self.project_id,
            project_name=self.project_name,
            task_status_id=self.task_status_id,
            task_type_id=self.task_type_id,
            assigned_to_id=self.assigned_to_id,
            assigned_to_name=self.assigned_to_name,
            due_date=self.due_date,
            is_open=self.is_open,
        )


# =============================================================================
# Request Models
# =============================================================================


class CreateTaskRequest(ServedModel):
    name: str
    project_id: int
    description: str | None = None
    assigned_to: int | None = None
    status: TaskStatus = TaskStatus.NEW
    priority: TaskPriority | None = None
    parent_task_id: int | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    estimated_hours: float | None = None
    tags: str | None = None


class UpdateTaskRequest(ServedModel):
    """Partial update; only fields that are set are sent."""

    name: str | None = None
    description: str | None = None
    assigned_to: int | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    estimated_hours: float | None = None
    progress: float | None = None
    tags: str | None = None


class UpdateTaskStatusRequest(ServedModel):
    status: TaskStatus


class TaskQueryParams(QueryParams):
    project_id: int | None = None
    task_type_id: int | None = None
    task_status_id: int | None = None
    assigned_to_id: int | None = None
    is_open: bool | None = None


# =============================================================================
# Bulk Models
# =============================================================================


class BulkCreateTasksRequest(ServedModel):
    tasks: list[CreateTaskRequest] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkUpdateTaskItem(ServedModel):
    id: int
    data: UpdateTaskRequest = Field(default_factory=UpdateTaskRequest)


class BulkUpdateTasksRequest(ServedModel):
    tasks: list[BulkUpdateTaskItem] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkDeleteTasksRequest(ServedModel):
    ids: list[int] = Field(default_factory=list)
    continue_on_error: bool = True


class BulkUpdateTaskStatusRequest(ServedModel):
    ids: list[int] = Field(default_factory=list)
    status: TaskStatus
