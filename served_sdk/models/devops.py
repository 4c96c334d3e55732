"""DevOps models: repositories, pull requests, pipeline runs and releases."""

from datetime import datetime
from enum import IntEnum

from pydantic import Field

from served_sdk.models.common import ServedModel


class ReleaseStage(IntEnum):
    CREATED = 0
    BUILDING = 1
    TESTING = 2
    DEPLOYING = 3
    VERIFYING = 4
    PUBLISHED = 5
    FAILED = 6
    ROLLED_BACK = 7

    @property
    def wire_name(self) -> str:
        """Name as the API spells it in query strings (``RolledBack``)."""
        return "".join(part.capitalize() for part in self.name.split("_"))


# =============================================================================
# Repositories
# =============================================================================


class Repository(ServedModel):
    id: int
    provider: str = ""
    repository_name: str = ""
    repository_url: str = ""
    clone_url: str | None = None
    default_branch: str = "main"
    description: str | None = None
    is_private: bool = False
    webhook_active: bool = False
    last_webhook_at: datetime | None = None
    is_active: bool = False
    created_date: datetime | None = None


class CreateRepositoryRequest(ServedModel):
    repository_name: str
    repository_url: str
    provider: str = "GitHub"
    clone_url: str | None = None
    default_branch: str = "main"
    description: str | None = None
    is_private: bool = False
    access_token: str | None = None
    setup_webhook: bool = True


class UpdateRepositoryRequest(ServedModel):
    id: int
    default_branch: str | None = None
    description: str | None = None
    access_token: str | None = None
    is_active: bool | None = None


# =============================================================================
# Pull Requests / Runs
# =============================================================================


class PullRequest(ServedModel):
    id: int
    repository_id: int = 0
    repository_name: str = ""
    provider: str = ""
    external_pr_number: int = 0
    title: str = ""
    description: str | None = None
    url: str = ""
    source_branch: str = ""
    target_branch: str = ""
    state: str = "Open"
    is_draft: bool = False
    author_username: str | None = None
    commit_count: int = 0
    files_changed: int = 0
    additions: int = 0
    deletions: int = 0
    ci_status: str | None = None
    merged_at: datetime | None = None
    task_id: int | None = None
    task_name: str | None = None
    agent_session_id: int | None = None


class PipelineRun(ServedModel):
    id: int
    repository_id: int = 0
    pull_request_id: int | None = None
    external_run_id: str = ""
    run_number: int | None = None
    pipeline_name: str | None = None
    url: str = ""
    status: str = "Queued"
    conclusion: str | None = None
    trigger_event: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    actor: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    duration_seconds: int | None = None
    error_message: str | None = None


# =============================================================================
# Releases
# =============================================================================


class ReleaseDeployment(ServedModel):
    id: int
    release_id: int = 0
    target: str = ""
    image_tag: str | None = None
    status: str = "pending"
    is_healthy: bool = False
    error_message: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None


class ReleasePackage(ServedModel):
    id: int
    release_id: int = 0
    package_name: str = ""
    package_type: str = ""
    version: str = ""
    registry_url: str | None = None
    is_published: bool = False
    published_at: datetime | None = None


class ReleaseHealthCheck(ServedModel):
    target: str = ""
    url: str = ""
    is_healthy: bool = False
    http_status_code: int | None = None
    response_time_ms: int = 0
    error_message: str | None = None
    checked_at: datetime | None = None


class Release(ServedModel):
    id: int
    tenant_id: int = 0
    version: str = ""
    previous_version: str | None = None
    stage: ReleaseStage = ReleaseStage.CREATED
    tag_name: str | None = None
    commit_sha: str | None = None
    branch: str | None = None
    release_notes: str | None = None
    created_by: str | None = None
    targets: list[str] = Field(default_factory=list)
    deployments: list[ReleaseDeployment] = Field(default_factory=list)
    packages: list[ReleasePackage] = Field(default_factory=list)
    health_checks: list[ReleaseHealthCheck] = Field(default_factory=list)
    error_message: str | None = None
    failed_at_stage: ReleaseStage | None = None
    auto_publish: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    published_at: datetime | None = None
    duration_seconds: int | None = None


class ReleaseSummary(ServedModel):
    total_releases: int = 0
    published_count: int = 0
    failed_count: int = 0
    in_progress_count: int = 0
    current_release: Release | None = None
    last_successful_release: Release | None = None
    recent_releases: list[Release] = Field(default_factory=list)


class CreateReleaseRequest(ServedModel):
    targets: list[str] | None = None
    branch: str | None = None
    release_notes: str | None = None
    skip_tests: bool = False
    auto_publish: bool = False
    dry_run: bool = False


class UpdateReleaseStageRequest(ServedModel):
    stage: ReleaseStage
    error_message: str | None = None
    health_checks: list[ReleaseHealthCheck] | None = None


class DeployReleaseRequest(ServedModel):
    targets: list[str] | None = None


class RollbackReleaseRequest(ServedModel):
    target_version: str | None = None
    reason: str | None = None
