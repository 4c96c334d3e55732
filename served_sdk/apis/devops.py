"""DevOps module: repositories, pull requests, pipeline runs and releases."""

from datetime import datetime
from urllib.parse import quote_plus

from served_sdk._internal.module import ApiModule, ApiResource
from served_sdk._internal.query import QueryPair, format_query_value
from served_sdk._internal.transport import HttpTransport
from served_sdk.models.devops import (
    CreateReleaseRequest,
    CreateRepositoryRequest,
    DeployReleaseRequest,
    PipelineRun,
    PullRequest,
    Release,
    ReleaseDeployment,
    ReleaseHealthCheck,
    ReleasePackage,
    ReleaseStage,
    ReleaseSummary,
    Repository,
    RollbackReleaseRequest,
    UpdateReleaseStageRequest,
    UpdateRepositoryRequest,
)


def _with_params(path: str, *params: QueryPair) -> str:
    """Append the non-None ``params`` to ``path`` as a query string."""
    rendered = [
        f"{key}={quote_plus(format_query_value(value))}"
        for key, value in params
        if value is not None
    ]
    return f"{path}?{'&'.join(rendered)}" if rendered else path


# =============================================================================
# Repositories
# =============================================================================


class RepositoriesResource(ApiResource):
    resource_name = "repositories"

    async def get_all(self, active_only: bool = True) -> list[Repository]:
        path = _with_params(self._base_path, ("activeOnly", active_only))
        return await self._get_list(path, Repository)

    async def get(self, id: int) -> Repository:
        return await self._transport.get(f"{self._base_path}/{id}", Repository)

    async def create(self, request: CreateRepositoryRequest) -> Repository:
        return await self._transport.post(self._base_path, request, Repository)

    async def update(self, request: UpdateRepositoryRequest) -> Repository:
        """Update a repository; the id travels in the request body."""
        return await self._transport.put(self._base_path, request, Repository)

    async def delete(self, id: int) -> None:
        await self._transport.delete(f"{self._base_path}/{id}")

    async def get_pull_requests(
        self, repository_id: int, state: str | None = None, limit: int = 50
    ) -> list[PullRequest]:
        path = _with_params(
            f"{self._base_path}/{repository_id}/pullrequests",
            ("limit", limit),
            ("state", state or None),
        )
        return await self._get_list(path, PullRequest)

    async def get_pipeline_runs(self, repository_id: int, limit: int = 50) -> list[PipelineRun]:
        path = _with_params(f"{self._base_path}/{repository_id}/runs", ("limit", limit))
        return await self._get_list(path, PipelineRun)


# =============================================================================
# Pull Requests
# =============================================================================


class PullRequestsResource(ApiResource):
    resource_name = "pullrequests"

    async def get_all(self, state: str | None = None, limit: int = 50) -> list[PullRequest]:
        path = _with_params(self._base_path, ("limit", limit), ("state", state or None))
        return await self._get_list(path, PullRequest)

    async def get_by_task(self, task_id: int) -> list[PullRequest]:
        return await self._get_list(
            self._module.resource_path(f"tasks/{task_id}/pullrequests"), PullRequest
        )

    async def get_by_session(self, session_id: int) -> list[PullRequest]:
        return await self._get_list(
            self._module.resource_path(f"sessions/{session_id}/pullrequests"), PullRequest
        )

    async def get_pipeline_runs(self, pull_request_id: int) -> list[PipelineRun]:
        return await self._get_list(f"{self._base_path}/{pull_request_id}/runs", PipelineRun)

    async def get_latest_pipeline_run(self, pull_request_id: int) -> PipelineRun | None:
        """Latest CI run for the pull request, or None if it cannot be fetched."""
        try:
            return await self._transport.get(
                f"{self._base_path}/{pull_request_id}/runs/latest", PipelineRun
            )
        except Exception as e:
            self._transport.log_debug(f"Latest pipeline run unavailable: {e}")
            return None


# =============================================================================
# Pipelines
# =============================================================================


class PipelinesResource(ApiResource):
    resource_name = "pipelines"

    async def get_all_runs(self, limit: int = 50) -> list[PipelineRun]:
        path = _with_params(f"{self._base_path}/runs", ("limit", limit))
        return await self._get_list(path, PipelineRun)

    async def get_run(self, run_id: int) -> PipelineRun:
        return await self._transport.get(f"{self._base_path}/runs/{run_id}", PipelineRun)


# =============================================================================
# Releases
# =============================================================================


class ReleasesResource(ApiResource):
    """Release lifecycle: created -> building -> testing -> deploying -> verifying -> published."""

    resource_name = "releases"

    async def get_all(self, stage: ReleaseStage | None = None, limit: int = 50) -> list[Release]:
        path = _with_params(
            self._base_path,
            ("limit", limit),
            ("stage", stage.wire_name if stage is not None else None),
        )
        return await self._get_list(path, Release)

    async def get(self, id: int) -> Release:
        return await self._transport.get(f"{self._base_path}/{id}", Release)

    async def get_by_version(self, version: str) -> Release:
        return await self._transport.get(f"{self._base_path}/version/{version}", Release)

    async def get_current(self) -> Release | None:
        try:
            return await self._transport.get(f"{self._base_path}/current", Release)
        except Exception as e:
            self._transport.log_debug(f"Current release unavailable: {e}")
            return None

    async def get_summary(self) -> ReleaseSummary:
        return await self._transport.get(f"{self._base_path}/summary", ReleaseSummary)

    async def create(self, request: CreateReleaseRequest) -> Release:
        return await self._transport.post(self._base_path, request, Release)

    async def update_stage(self, id: int, request: UpdateReleaseStageRequest) -> Release:
        return await self._transport.put(f"{self._base_path}/{id}/stage", request, Release)

    async def deploy(self, id: int, targets: list[str] | None = None) -> Release:
        return await self._transport.post(
            f"{self._base_path}/{id}/deploy", DeployReleaseRequest(targets=targets), Release
        )

    async def verify(self, id: int) -> Release:
        return await self._transport.post(f"{self._base_path}/{id}/verify", {}, Release)

    async def publish(self, id: int) -> Release:
        return await self._transport.post(f"{self._base_path}/{id}/publish", {}, Release)

    async def rollback(self, id: int, request: RollbackReleaseRequest | None = None) -> Release:
        return await self._transport.post(
            f"{self._base_path}/{id}/rollback", request or RollbackReleaseRequest(), Release
        )

    async def cancel(self, id: int) -> None:
        await self._transport.post(f"{self._base_path}/{id}/cancel", {})

    async def get_deployments(self, release_id: int) -> list[ReleaseDeployment]:
        return await self._get_list(
            f"{self._base_path}/{release_id}/deployments", ReleaseDeployment
        )

    async def get_health_checks(self, release_id: int) -> list[ReleaseHealthCheck]:
        return await self._get_list(f"{self._base_path}/{release_id}/health", ReleaseHealthCheck)

    async def get_packages(self, release_id: int) -> list[ReleasePackage]:
        return await self._get_list(f"{self._base_path}/{release_id}/packages", ReleasePackage)

    async def get_next_version(self) -> str:
        return await self._transport.get(f"{self._base_path}/next-version", str)

    async def get_history(
        self,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
        limit: int = 100,
    ) -> list[Release]:
        path = _with_params(
            f"{self._base_path}/history",
            ("limit", limit),
            ("from", from_date),
            ("to", to_date),
        )
        return await self._get_list(path, Release)


class DevOpsApi(ApiModule):
    module_name = "devops"

    def __init__(self, transport: HttpTransport) -> None:
        super().__init__(transport)
        self.repositories = RepositoriesResource(transport, self)
        self.pull_requests = PullRequestsResource(transport, self)
        self.pipelines = PipelinesResource(transport, self)
        self.releases = ReleasesResource(transport, self)
