"""Tests for the project management module."""

import json

import httpx
import pytest
import respx

from served_sdk.exceptions import ServedAPIError
from served_sdk.models.projects import (
    CreateProjectRequest,
    ProjectQueryParams,
    ProjectSummary,
    UpdateProjectRequest,
)
from served_sdk.models.tasks import (
    BulkUpdateTaskStatusRequest,
    TaskStatus,
    UpdateTaskStatusRequest,
)

PROJECTS_URL = "https://api.test/api/projects"
TASKS_URL = "https://api.test/api/tasks"


def project_list(*projects):
    return {"data": list(projects), "meta": {"total": len(projects), "page": 1, "pageSize": 50}}


class TestProjects:
    """Tests for client.projects."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_maps_to_summaries(self, client):
        """Listed projects should be summaries built from the details."""
        respx.get(PROJECTS_URL).mock(
            return_value=httpx.Response(
                200,
                json=project_list(
                    {"id": 1, "name": "Website", "projectNo": "P-1", "isActive": True, "version": 4}
                ),
            )
        )
        projects = await client.projects.get_all()
        assert projects == [
            ProjectSummary(
                id=1, name="Website", project_no="P-1", is_active=True, project_status_id=0
            )
        ]

    @pytest.mark.asyncio
    @respx.mock
    async def test_filters_in_query(self, client):
        """Project filters should be sent in a fixed order."""
        route = respx.get(PROJECTS_URL).mock(return_value=httpx.Response(200, json=project_list()))
        await client.projects.get_all(
            ProjectQueryParams(take=10, skip=10, customer_id=3, is_active=False, parent_id=9)
        )
        assert str(route.calls.last.request.url) == (
            f"{PROJECTS_URL}?page=2&pageSize=10&customerId=3&isActive=False&parentId=9"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_search(self, client):
        """search should look for active projects only."""
        route = respx.get(PROJECTS_URL).mock(return_value=httpx.Response(200, json=project_list()))
        await client.projects.search("web shop")
        assert str(route.calls.last.request.url) == (
            f"{PROJECTS_URL}?page=1&pageSize=20&search=web+shop&isActive=True"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_sub_projects(self, client):
        """get_sub_projects should filter by parent."""
        route = respx.get(PROJECTS_URL).mock(return_value=httpx.Response(200, json=project_list()))
        await client.projects.get_sub_projects(5)
        assert str(route.calls.last.request.url).endswith("&parentId=5")

    @pytest.mark.asyncio
    @respx.mock
    async def test_by_customer(self, client):
        """get_by_customer should use the dedicated endpoint."""
        route = respx.get(f"{PROJECTS_URL}/by-customer/12").mock(
            return_value=httpx.Response(200, json=project_list({"id": 2, "customerId": 12}))
        )
        projects = await client.projects.get_by_customer(12, take=25)
        assert projects[0].customer_id == 12
        assert str(route.calls.last.request.url).endswith("?pageSize=25")

    @pytest.mark.asyncio
    @respx.mock
    async def test_crud_lifecycle_ends_in_not_found(self, client):
        """A deleted project should no longer be retrievable."""
        created = {"id": 77, "name": "Relaunch", "customerId": 4}
        respx.post(PROJECTS_URL).mock(return_value=httpx.Response(201, json=created))
        respx.get(f"{PROJECTS_URL}/77").mock(
            side_effect=[
                httpx.Response(200, json=created),
                httpx.Response(404, json={"error": "Project not found"}),
            ]
        )
        update = respx.put(f"{PROJECTS_URL}/77").mock(
            return_value=httpx.Response(200, json={**created, "name": "Relaunch 2"})
        )
        respx.delete(f"{PROJECTS_URL}/77").mock(return_value=httpx.Response(204))

        project = await client.projects.create(
            CreateProjectRequest(name="Relaunch", customer_id=4)
        )
        assert (await client.projects.get(project.id)).name == "Relaunch"
        updated = await client.projects.update(project.id, UpdateProjectRequest(name="Relaunch 2"))
        assert updated.name == "Relaunch 2"
        assert json.loads(update.calls.last.request.content) == {"name": "Relaunch 2"}
        await client.projects.delete(project.id)

        with pytest.raises(ServedAPIError) as exc_info:
            await client.projects.get(project.id)
        assert exc_info.value.is_not_found
        assert "Project not found" in exc_info.value.response_content


class TestTasks:
    """Tests for client.tasks."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_by_project(self, client):
        """get_by_project should filter by project."""
        route = respx.get(TASKS_URL).mock(
            return_value=httpx.Response(
                200, json=project_list({"id": 1, "projectId": 3, "name": "Design"})
            )
        )
        tasks = await client.tasks.get_by_project(3)
        assert tasks[0].name == "Design"
        assert str(route.calls.last.request.url) == f"{TASKS_URL}?page=1&pageSize=100&projectId=3"

    @pytest.mark.asyncio
    @respx.mock
    async def test_by_assignee_open_only(self, client):
        """Open-only assignee queries should send isOpen=True."""
        route = respx.get(TASKS_URL).mock(return_value=httpx.Response(200, json=project_list()))
        await client.tasks.get_by_assignee(8)
        assert str(route.calls.last.request.url).endswith("&assignedToId=8&isOpen=True")

    @pytest.mark.asyncio
    @respx.mock
    async def test_by_assignee_including_closed(self, client):
        """open_only=False should not filter on isOpen."""
        route = respx.get(TASKS_URL).mock(return_value=httpx.Response(200, json=project_list()))
        await client.tasks.get_by_assignee(8, open_only=False)
        assert "isOpen" not in str(route.calls.last.request.url)

    @pytest.mark.asyncio
    @respx.mock
    async def test_update_status(self, client):
        """update_status should PATCH the status endpoint."""
        route = respx.patch(f"{TASKS_URL}/4/status").mock(
            return_value=httpx.Response(200, json={"id": 4, "status": 2})
        )
        task = await client.tasks.update_status(
            4, UpdateTaskStatusRequest(status=TaskStatus.COMPLETED)
        )
        assert task.status is TaskStatus.COMPLETED
        assert json.loads(route.calls.last.request.content) == {"status": 2}

    @pytest.mark.asyncio
    @respx.mock
    async def test_update_status_bulk(self, client):
        """Bulk status updates should PATCH bulk/status."""
        route = respx.patch(f"{TASKS_URL}/bulk/status").mock(
            return_value=httpx.Response(
                200,
                json={"total": 2, "succeeded": 2, "items": [{"id": 1}, {"id": 2}]},
            )
        )
        result = await client.tasks.update_status_bulk(
            BulkUpdateTaskStatusRequest(ids=[1, 2], status=TaskStatus.ON_HOLD)
        )
        assert [t.id for t in result.items] == [1, 2]
        assert json.loads(route.calls.last.request.content)["ids"] == [1, 2]
