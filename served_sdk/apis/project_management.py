"""Project management module: projects and tasks."""

from collections.abc import Iterator

from served_sdk._internal.crud import BulkCrudClient
from served_sdk._internal.module import ApiModule
from served_sdk._internal.query import QueryPair
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.common import BulkResponse, ListResponse
from served_sdk.models.projects import (
    CreateProjectRequest,
    ProjectDetail,
    ProjectQueryParams,
    ProjectSummary,
    UpdateProjectRequest,
)
from served_sdk.models.tasks import (
    BulkUpdateTaskStatusRequest,
    CreateTaskRequest,
    TaskDetail,
    TaskQueryParams,
    TaskSummary,
    UpdateTaskRequest,
    UpdateTaskStatusRequest,
)

# =============================================================================
# Projects
# =============================================================================


def _project_filters(query: ProjectQueryParams) -> Iterator[QueryPair]:
    yield "customerId", query.customer_id
    yield "projectStatusId", query.project_status_id
    yield "isActive", query.is_active
    yield "parentId", query.parent_id


def _project_summaries(details: list[ProjectDetail]) -> list[ProjectSummary]:
    return [d.to_summary() for d in details]


class ProjectsResource(
    BulkCrudClient[
        ProjectSummary,
        ProjectDetail,
        CreateProjectRequest,
        UpdateProjectRequest,
        ProjectQueryParams,
    ]
):
    """Projects, served from the legacy ``api/projects`` path."""

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(
            transport,
            ApiModule.legacy_path("projects"),
            detail_type=ProjectDetail,
            query_type=ProjectQueryParams,
            extra_query_params=_project_filters,
            map_entities=_project_summaries,
        )

    async def get_sub_projects(self, parent_id: int) -> list[ProjectSummary]:
        return await self.get_all(ProjectQueryParams(parent_id=parent_id))

    async def search(self, search_term: str, take: int = 20) -> list[ProjectSummary]:
        """Search active projects by name or number."""
        return await self.get_all(
            ProjectQueryParams(search=search_term, take=take, is_active=True)
        )

    async def get_by_customer(self, customer_id: int, take: int = 100) -> list[ProjectSummary]:
        envelope = await self._transport.get(
            f"{self._base_path}/by-customer/{customer_id}?pageSize={take}",
            ListResponse[ProjectDetail],
        )
        if envelope is None or envelope.data is None:
            return []
        return _project_summaries(envelope.data)


# =============================================================================
# Tasks
# =============================================================================


def _task_filters(query: TaskQueryParams) -> Iterator[QueryPair]:
    yield "projectId", query.project_id
    yield "taskTypeId", query.task_type_id
    yield "taskStatusId", query.task_status_id
    yield "assignedToId", query.assigned_to_id
    yield "isOpen", query.is_open


def _task_summaries(details: list[TaskDetail]) -> list[TaskSummary]:
    return [d.to_summary() for d in details]


class TasksResource(
    BulkCrudClient[TaskSummary, TaskDetail, CreateTaskRequest, UpdateTaskRequest, TaskQueryParams]
):
    """Tasks, served from the legacy ``api/tasks`` path."""

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(
            transport,
            ApiModule.legacy_path("tasks"),
            detail_type=TaskDetail,
            query_type=TaskQueryParams,
            extra_query_params=_task_filters,
            map_entities=_task_summaries,
        )

    async def get_by_project(self, project_id: int, take: int = 100) -> list[TaskSummary]:
        return await self.get_all(TaskQueryParams(project_id=project_id, take=take))

    async def get_by_assignee(
        self, user_id: int, open_only: bool = True, take: int = 100
    ) -> list[TaskSummary]:
        """List tasks assigned to ``user_id``, including closed ones when ``open_only=False``."""
        return await self.get_all(
            TaskQueryParams(assigned_to_id=user_id, is_open=True if open_only else None, take=take)
        )

    async def search(self, search_term: str, take: int = 20) -> list[TaskSummary]:
        return await self.get_all(TaskQueryParams(search=search_term, take=take, is_open=True))

    async def update_status(self, id: int, request: UpdateTaskStatusRequest) -> TaskDetail:
        return await self._transport.patch(f"{self._base_path}/{id}/status", request, TaskDetail)

    async def update_status_bulk(
        self, request: BulkUpdateTaskStatusRequest
    ) -> BulkResponse[TaskDetail]:
        return await self._transport.patch(
            f"{self._base_path}/bulk/status", request, BulkResponse[TaskDetail]
        )


class ProjectManagementApi(ApiModule):
    module_name = "project-management"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.projects = ProjectsResource(transport)
        self.tasks = TasksResource(transport)
